# search_index.py
"""
SearchIndex - search-as-you-type over a glossary.

Purpose:
 - Own the Trie built from every entry's scored tokens
 - Answer free-text queries with a ranked entry list:
     search(text) -> List[Entry], search_ids(text) -> List[str]
 - Report diagnostics: stats() -> entries, tokens, build_ms

The index is built exactly once, after loading finishes, and is never
mutated afterwards, so searches need no locking.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Any

from glossary_browser.core.query import Ranked, combine_matches, rank_matches, search_terms
from glossary_browser.core.trie import Trie
from glossary_browser.entry import Entry
from glossary_browser.errors import DuplicateEntryError, IndexAlreadyBuiltError, IndexNotBuiltError
from glossary_browser.text.scorers import resolve_weights, score_tokens
from glossary_browser.utils.logger_utils import time_block

logger = logging.getLogger(__name__)


class SearchIndex:
    """Prefix search over glossary entries, weighted by where a token occurs."""

    def __init__(self, weights: Optional[Mapping[str, float]] = None) -> None:
        self._weights = resolve_weights(weights)
        self._trie = Trie()
        self._entries_by_id: Dict[str, Entry] = {}
        self._built = False
        self._build_ms = 0.0

    @property
    def built(self) -> bool:
        return self._built

    # Build ---------------------------------------------------------
    def build_index(self, entries: Iterable[Entry]) -> None:
        """Index the full entry sequence. May only be called once."""
        if self._built:
            raise IndexAlreadyBuiltError("search index already built")

        entries_by_id: Dict[str, Entry] = {}
        for entry in entries:
            if entry.id in entries_by_id:
                raise DuplicateEntryError(entry.id)
            entries_by_id[entry.id] = entry

        # a failed build leaves the index empty and unbuilt
        trie = Trie()
        logger.debug("building search index for %d entries", len(entries_by_id))
        with time_block("build search index", logger) as t:
            for entry in entries_by_id.values():
                for token, score in score_tokens(entry, self._weights).items():
                    trie.insert(token, entry.id, score)

        self._trie = trie
        self._entries_by_id = entries_by_id
        self._build_ms = t.elapsed_ms
        self._built = True
        logger.info(
            "search index ready: %d tokens from %d entries in %.1fms",
            self._trie.leaves_count(),
            len(entries_by_id),
            self._build_ms,
        )

    # Query ---------------------------------------------------------
    def search_scores(self, text: str) -> Ranked:
        """Ranked (entry_id, score) pairs for `text`."""
        if not self._built:
            raise IndexNotBuiltError("build_index() must be called before searching")
        terms = search_terms(text)
        if not terms:
            return []
        ranked = rank_matches(combine_matches(terms, self._trie.get_all))
        logger.debug("search %r -> terms %s -> %d matches", text, terms, len(ranked))
        return ranked

    def search_ids(self, text: str) -> List[str]:
        return [entry_id for entry_id, _ in self.search_scores(text)]

    def search(self, text: str) -> List[Entry]:
        """Ranked entries for `text`; ids without an entry are skipped."""
        out = []
        for entry_id in self.search_ids(text):
            entry = self._entries_by_id.get(entry_id)
            if entry is not None:
                out.append(entry)
        return out

    # Diagnostics ---------------------------------------------------
    def stats(self) -> Dict[str, Any]:
        return {
            "entries": len(self._entries_by_id),
            "tokens": self._trie.leaves_count(),
            "build_ms": round(self._build_ms, 3),
        }
