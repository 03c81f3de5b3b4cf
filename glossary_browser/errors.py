# errors.py - exceptions raised when callers break the index's rules


class GlossaryError(Exception):
    """Base class for glossary browser errors."""


class IndexAlreadyBuiltError(GlossaryError):
    """build_index() called on an index that is already built."""


class IndexNotBuiltError(GlossaryError):
    """Search attempted before build_index()."""


class DuplicateEntryError(GlossaryError):
    def __init__(self, entry_id: str) -> None:
        super().__init__(f"duplicate entry id: {entry_id!r}")
        self.entry_id = entry_id


class EntryFormatError(GlossaryError):
    """A record in the glossary data file could not be turned into an Entry."""
