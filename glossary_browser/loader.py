# loader.py - read glossary entries from a JSON data file
"""
Expected layout:

    {
      "categories": [{"label": "Hardware / General", "order": "03.02"}],
      "entries": [
        {"id": "cpu", "title": "CPU", "category": "Hardware / General",
         "synonyms": ["Processor"], "abbreviations": [],
         "body": ["The [Processor] runs instructions."],
         "links": [{"title": "Central processing unit", "href": "https://...", "source": "Wikipedia"}]}
      ]
    }

An entry without "id" gets term_id(title).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from glossary_browser.entry import Entry, Link
from glossary_browser.errors import EntryFormatError
from glossary_browser.text.normalizer import term_id


def _strings(record: Dict[str, Any], key: str, where: str) -> Tuple[str, ...]:
    value = record.get(key) or []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise EntryFormatError(f"{where}: '{key}' must be a list of strings")
    return tuple(value)


def parse_entry(record: Any, where: str = "entry") -> Entry:
    """Turn one JSON record into an Entry, raising EntryFormatError if it is malformed."""
    if not isinstance(record, dict):
        raise EntryFormatError(f"{where}: expected an object, got {type(record).__name__}")
    title = record.get("title")
    if not isinstance(title, str) or not title.strip():
        raise EntryFormatError(f"{where}: missing 'title'")
    entry_id = record.get("id") or term_id(title)
    if not isinstance(entry_id, str) or not entry_id:
        raise EntryFormatError(f"{where}: cannot derive an id from title {title!r}")
    category = record.get("category")
    if category is not None and not isinstance(category, str):
        raise EntryFormatError(f"{where}: 'category' must be a string")

    links = []
    for i, raw in enumerate(record.get("links") or []):
        if not isinstance(raw, dict) or "href" not in raw:
            raise EntryFormatError(f"{where}: link {i} needs an 'href'")
        fields = {"href": raw["href"], "title": raw.get("title", raw["href"]), "source": raw.get("source", "")}
        for key, value in fields.items():
            if not isinstance(value, str):
                raise EntryFormatError(f"{where}: link {i} '{key}' must be a string")
        links.append(Link(**fields))

    return Entry(
        id=entry_id,
        title=title,
        category=category,
        synonyms=_strings(record, "synonyms", where),
        abbreviations=_strings(record, "abbreviations", where),
        body=_strings(record, "body", where),
        links=tuple(links),
    )


def load_glossary(path) -> Tuple[List[Entry], Dict[str, str]]:
    """Return (entries in file order, category label -> hierarchy index)."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        try:
            doc = json.load(fh)
        except ValueError as e:
            raise EntryFormatError(f"{path}: not valid JSON ({e})") from e
    if not isinstance(doc, dict):
        raise EntryFormatError(f"{path}: expected a JSON object at the top level")

    category_order: Dict[str, str] = {}
    for i, cat in enumerate(doc.get("categories") or []):
        if not isinstance(cat, dict) or "label" not in cat:
            raise EntryFormatError(f"{path}: category {i} needs a 'label'")
        category_order[cat["label"]] = str(cat.get("order", f"{i:02d}"))

    entries = [
        parse_entry(record, where=f"{path}: entry {i}")
        for i, record in enumerate(doc.get("entries") or [])
    ]
    return entries, category_order
