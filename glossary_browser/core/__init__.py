"""
glossary_browser.core

Contains:
 - Trie: prefix tree of tokens -> per-entry scores
 - query helpers: term splitting, AND-combination, ranking
 - SearchIndex: builds the trie once and answers searches
 - Glossary: entries, categories, link resolution, browser view
"""

from .trie import Trie, TrieNode
from .query import search_terms, combine_matches, rank_matches
from .search_index import SearchIndex
from .glossary import Glossary

__all__ = [
    "Trie",
    "TrieNode",
    "search_terms",
    "combine_matches",
    "rank_matches",
    "SearchIndex",
    "Glossary",
]
