# glossary_browser/text/__init__.py
# text helpers turning entry fields into search tokens

from .normalizer import term_id, fold_case  # canonical term keys
from .tokenizer import WORD_SEPARATORS, split_words  # word splitting for entries and queries
from .scorers import FIELD_WEIGHTS, resolve_weights, score_tokens  # per-field token weights

__all__ = [
    "term_id",
    "fold_case",
    "WORD_SEPARATORS",
    "split_words",
    "FIELD_WEIGHTS",
    "resolve_weights",
    "score_tokens",
]
