# glossary.py
"""
Glossary - lookups a browser needs around the entry list.

 - entries by id, categories in hierarchy order
 - resolving link text / URL fragments to entries through titles,
   synonyms and abbreviations sharing one term_id key space
 - splitting paragraphs into plain text and [Link] sections
 - the entry list to show for a selection or a search
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Mapping, Optional, Set
from urllib.parse import urlsplit

from glossary_browser.core.search_index import SearchIndex
from glossary_browser.core.query import search_terms
from glossary_browser.entry import Entry, Link
from glossary_browser.text.normalizer import term_id

LINK_RE = re.compile(r"(\[.+?\])")

# friendlier names for well-known link hosts
_HOST_NAMES = {
    "youtube.com": "YouTube",
    "khanacademy.org": "Khan Academy",
}


def text_sections(text: str) -> List[str]:
    """'A [CPU] runs' -> ['A ', '[CPU]', ' runs']"""
    return LINK_RE.split(text)


def is_link(section: str) -> bool:
    m = LINK_RE.match(section)
    return m is not None and m.group(0) == section


def term_in_link(section: str) -> str:
    return section[1:-1]


def link_title(link: Link) -> str:
    """'How caches work - Computerphile (YouTube)' style label for an external link."""
    host = urlsplit(link.href).netloc
    if host.startswith("www."):
        host = host[4:]
    if host.endswith("wikipedia.org"):
        host = "Wikipedia"
    else:
        host = _HOST_NAMES.get(host, host)
    source = "" if not link.source or link.source == host else f" - {link.source}"
    return f"{link.title}{source} ({host})"


class Glossary:
    """Entries plus their search index. Built once from the loaded data."""

    def __init__(
        self,
        entries: Iterable[Entry],
        category_order: Optional[Mapping[str, str]] = None,
        weights: Optional[Mapping[str, float]] = None,
    ) -> None:
        self.entries: List[Entry] = list(entries)
        # category label -> hierarchy index, e.g. "Hardware / General" -> "03.02"
        self.category_order: Dict[str, str] = dict(category_order or {})
        self.index = SearchIndex(weights)
        self.index.build_index(self.entries)
        self.entries_by_id: Dict[str, Entry] = {e.id: e for e in self.entries}

        self._synonyms: Dict[str, str] = {}
        self._abbreviations: Dict[str, str] = {}
        for e in self.entries:
            for s in e.synonyms:
                self._synonyms[term_id(s)] = e.id
            for a in e.abbreviations:
                self._abbreviations[term_id(a)] = e.id

    def get(self, entry_id: str) -> Optional[Entry]:
        return self.entries_by_id.get(entry_id)

    # categories ------------------------------------------------------------
    def categories(self) -> Set[str]:
        return {e.category for e in self.entries if e.category}

    def categories_sorted(self) -> List[str]:
        return [label for label, _ in sorted(self.category_order.items(), key=lambda kv: kv[1])]

    def entries_sorted_by_category(self) -> List[Entry]:
        """Entries grouped by category in hierarchy order; uncategorised ones last."""
        groups: Dict[Optional[str], List[Entry]] = {c: [] for c in self.categories_sorted()}
        rest: List[Entry] = []
        for e in self.entries:
            groups.get(e.category, rest).append(e)
        out: List[Entry] = []
        for group in groups.values():
            out.extend(group)
        return out + rest

    # term resolution --------------------------------------------------------
    def term_id_for_link_text(self, text: str) -> Optional[str]:
        """Entry id that link text refers to, via id, then synonym, then abbreviation."""
        key = term_id(text)
        if key in self.entries_by_id:
            return key
        return self._synonyms.get(key) or self._abbreviations.get(key)

    def select(self, fragment: str) -> Optional[Entry]:
        """Entry for a URL fragment like '#cpu' or 'Central%20Processing%20Unit'."""
        term = fragment[1:] if fragment.startswith("#") else fragment
        term = term.replace("%20", " ")
        if not term:
            return None
        entry = self.entries_by_id.get(term)
        if entry is None:
            entry = self.entries_by_id.get(term_id(term))
        return entry

    # what to show -----------------------------------------------------------
    def view(self, selected: Optional[str] = None, search_text: str = "") -> List[Entry]:
        """
        The selected entry alone, else search results, else everything by category.
        An unknown selection shows nothing; "" or a bare "#" is no selection.
        """
        if selected and selected.lstrip("#"):
            entry = self.select(selected)
            return [entry] if entry else []
        if search_terms(search_text):
            return self.index.search(search_text)
        return self.entries_sorted_by_category()
