# entry.py
# Glossary records as delivered by the loader. Read-only for the search core.

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Link:
    """External reading for an entry, e.g. a Wikipedia article or a video."""

    title: str
    href: str
    source: str = ""


@dataclass(frozen=True)
class Entry:
    """
    One glossary item.
    body holds paragraphs; `[Some Term]` inside a paragraph links to another entry.
    """

    id: str
    title: str
    category: Optional[str] = None
    synonyms: Tuple[str, ...] = ()
    abbreviations: Tuple[str, ...] = ()
    body: Tuple[str, ...] = ()
    links: Tuple[Link, ...] = ()
