# glossary_browser/text/scorers.py
# per-entry token weights fed into the search trie

from collections import defaultdict
from typing import Dict, Iterable, Mapping, Optional

from glossary_browser.entry import Entry
from glossary_browser.text.normalizer import term_id
from glossary_browser.text.tokenizer import split_words

# weight a token gets each time it appears in a field
FIELD_WEIGHTS: Dict[str, float] = {
    "title": 10.0,
    "synonym": 3.0,
    "abbreviation": 3.0,
    "category": 2.0,
    "body": 1.0,
}


def resolve_weights(overrides: Optional[Mapping[str, float]] = None) -> Dict[str, float]:
    """Default field weights updated with `overrides`; rejects negatives and unknown fields."""
    weights = dict(FIELD_WEIGHTS)
    for field, value in (overrides or {}).items():
        if field not in weights:
            raise ValueError(f"unknown field weight: {field!r}")
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"field weight for {field!r} must be a number, got {value!r}") from None
        if value < 0:
            raise ValueError(f"field weight for {field!r} must be non-negative, got {value}")
        weights[field] = value
    return weights


def _fields(entry: Entry) -> Iterable[tuple]:
    yield "title", entry.title
    for s in entry.synonyms:
        yield "synonym", s
    for a in entry.abbreviations:
        yield "abbreviation", a
    if entry.category:
        yield "category", entry.category
    for paragraph in entry.body:
        yield "body", paragraph


def score_tokens(entry: Entry, weights: Optional[Mapping[str, float]] = None) -> Dict[str, float]:
    """
    Map every token found in `entry` to its total weight.
    Each occurrence adds its field's weight, so a token in both the title
    and the body scores title + body.
    """
    w = resolve_weights(weights)
    out: Dict[str, float] = defaultdict(float)
    for field, text in _fields(entry):
        for word in split_words(text):
            token = term_id(word)
            if token:
                out[token] += w[field]
    return dict(out)
