# query.py
# Multi-term query combination over trie match maps.

from __future__ import annotations
from typing import Callable, Iterable, List, Tuple

from glossary_browser.core.trie import MatchScores
from glossary_browser.text.normalizer import term_id
from glossary_browser.text.tokenizer import split_words

Ranked = List[Tuple[str, float]]


def search_terms(text: str) -> List[str]:
    """Split free text into case-folded search terms. Punctuation-only text gives []."""
    terms = []
    for word in split_words(text):
        term = term_id(word)
        if term:
            terms.append(term)
    return terms


def combine_matches(terms: Iterable[str], lookup: Callable[[str], MatchScores]) -> MatchScores:
    """
    AND the match maps of every term, summing the scores of surviving entries.
    Stops querying once nothing is left.
    """
    combined: MatchScores = {}
    for i, term in enumerate(terms):
        scores = lookup(term)
        if i == 0:
            combined = dict(scores)
        else:
            combined = {
                entry_id: score + scores[entry_id]
                for entry_id, score in combined.items()
                if entry_id in scores
            }
        if not combined:
            break
    return combined


def rank_matches(matches: MatchScores) -> Ranked:
    """Order by score (high first), ties broken by entry id ascending."""
    return sorted(matches.items(), key=lambda kv: (-kv[1], kv[0]))
