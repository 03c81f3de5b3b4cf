# glossary_browser/text/tokenizer.py
# word splitting shared by the token scorer and the query engine

import re
from typing import List

# whitespace, punctuation, link brackets and underscores all separate words
WORD_SEPARATORS = re.compile(r"[\W_]+")


def split_words(s: str) -> List[str]:
    """
    Return the non-empty words of `s`, case untouched.
    "CPU-GPU hybrid, [Cache]" -> ["CPU", "GPU", "hybrid", "Cache"]
    """
    if not s:
        return []
    return [w for w in WORD_SEPARATORS.split(s) if w]
