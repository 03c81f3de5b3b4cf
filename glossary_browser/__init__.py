"""
glossary_browser

Search core for a glossary browser:
 - term canonicalization and per-field token scoring (glossary_browser.text)
 - prefix trie index and multi-term query engine (glossary_browser.core)
 - JSON loader and a Rich command line browser
"""

from .entry import Entry, Link
from .errors import (
    GlossaryError,
    IndexAlreadyBuiltError,
    IndexNotBuiltError,
    DuplicateEntryError,
    EntryFormatError,
)

__all__ = [
    "Entry",
    "Link",
    "GlossaryError",
    "IndexAlreadyBuiltError",
    "IndexNotBuiltError",
    "DuplicateEntryError",
    "EntryFormatError",
]

__version__ = "0.1.0"
