# glossary_browser/text/normalizer.py
import re

_separator_re = re.compile(r"[\W_]+")  # any run of non-alphanumerics


def fold_case(s: str) -> str:
    """Case-fold a single word for matching."""
    return s.casefold()


def term_id(s: str) -> str:
    """
    Canonical key for a term.
    "CPU Cache", "cpu-cache" and " CPU_cache! " all give "cpu-cache".
    Empty or punctuation-only text gives "".
    """
    if not s:
        return ""
    s = _separator_re.sub("-", fold_case(s))
    return s.strip("-")
