# tests/test_loader.py
import json

import pytest

from glossary_browser.errors import EntryFormatError
from glossary_browser.loader import load_glossary, parse_entry


def test_load_sample(data_path):
    entries, category_order = load_glossary(data_path)
    assert [e.id for e in entries] == ["cpu", "gpu", "apu", "cache", "ram", "operating-system"]
    assert category_order["Hardware / Memory"] == "01.02"
    cpu = entries[0]
    assert cpu.synonyms == ("Central Processing Unit", "Processor")
    assert cpu.links[0].source == "Wikipedia"
    assert entries[-1].abbreviations == ("OS",)


def test_parse_entry_defaults():
    entry = parse_entry({"title": "Main Memory", "synonyms": "RAM"})
    assert entry.id == "main-memory"
    assert entry.synonyms == ("RAM",)
    assert entry.category is None
    assert entry.body == ()


@pytest.mark.parametrize(
    "record",
    [
        {"id": "x"},
        {"title": "  "},
        {"title": "!!!"},
        {"title": "X", "synonyms": [1, 2]},
        {"title": "X", "category": 3},
        {"title": "X", "links": [{"title": "no href"}]},
        {"title": "X", "links": [{"href": 42}]},
        {"title": "X", "links": [{"href": "https://example.com", "title": ["t"]}]},
        {"title": "X", "links": [{"href": "https://example.com", "source": None}]},
        ["not", "an", "object"],
    ],
)
def test_parse_entry_rejects(record):
    with pytest.raises(EntryFormatError):
        parse_entry(record)


def test_load_bad_json(tmp_path):
    p = tmp_path / "g.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(EntryFormatError):
        load_glossary(p)


def test_load_names_bad_record(tmp_path):
    p = tmp_path / "g.json"
    p.write_text(json.dumps({"entries": [{"title": "ok"}, {"id": "broken"}]}), encoding="utf-8")
    with pytest.raises(EntryFormatError, match="entry 1"):
        load_glossary(p)


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_glossary(tmp_path / "nope.json")
