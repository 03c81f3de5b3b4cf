# trie.py
# Prefix tree mapping search tokens to per-entry relevance scores.
# Built once from the whole glossary, read-only afterwards.

from __future__ import annotations
import math
from typing import Dict, List

EntryId = str
Score = float
MatchScores = Dict[EntryId, Score]


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    scores: entry id -> accumulated score, only filled on nodes that end a token
    """

    __slots__ = ("children", "scores")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.scores: MatchScores = {}


class Trie:
    """
    Trie of search tokens, used by the SearchIndex for:
     - search-as-you-type prefix lookups
     - summing scores of every token an entry has under a prefix
    """

    def __init__(self) -> None:
        self._root = TrieNode()

    # insertion -----------------------------------------------------
    def insert(self, token: str, entry_id: EntryId, score: Score) -> None:
        """
        Add `score` for `entry_id` at the node ending `token`.
        Inserting the same (token, entry_id) again sums the scores.
        An empty token is ignored.
        """
        if score < 0 or math.isnan(score):
            raise ValueError(f"score must be non-negative, got {score!r} for {token!r}")
        if not token:
            return

        node = self._root
        for ch in token:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = node.children[ch] = TrieNode()
            node = nxt
        node.scores[entry_id] = node.scores.get(entry_id, 0) + score

    # search/traversal ---------------------------------------------------------
    def get_all(self, prefix: str) -> MatchScores:
        """
        Return entry id -> score for every token starting with `prefix`.
        An entry reached through several tokens gets the sum of their scores.
        Unknown prefix gives an empty dict.
        """
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return {}

        out: MatchScores = {}
        for scored in self._terminals(node):
            for entry_id, score in scored.scores.items():
                out[entry_id] = out.get(entry_id, 0) + score
        return out

    # internal collector ---------------------------------------------------------
    def _terminals(self, node: TrieNode) -> List[TrieNode]:
        """Walk the subtree under `node` and collect nodes carrying scores."""
        found: List[TrieNode] = []
        stack = [node]
        while stack:
            current = stack.pop()
            if current.scores:
                found.append(current)
            stack.extend(current.children.values())
        return found

    # convenience/debugging -----------------------------------------------------
    def leaves_count(self) -> int:
        """
        Count tokens holding at least one scored entry.
        (O(N) walk. For diagnostics, not ranking.)
        """
        return len(self._terminals(self._root))

    def __contains__(self, token: str) -> bool:
        """Exact token membership check."""
        node = self._root
        for ch in token:
            node = node.children.get(ch)
            if node is None:
                return False
        return bool(node.scores)
