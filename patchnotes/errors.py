"""
Exceptions raised by Patchnotes.

Every error here is fatal for a run: the source markup or the heuristic
tables no longer match reality and need a human to fix them.
"""


class PatchNotesError(Exception):
    """Base class for all Patchnotes errors."""


class DocumentStructureError(PatchNotesError):
    """The document violated the assumed changelog grammar."""


class TagCasingError(PatchNotesError):
    """At least one tag is still upper case after casing reconciliation."""

    def __init__(self, tags):
        self.tags = sorted(set(tags))
        super().__init__(f"There is at least one invalid tag: {', '.join(self.tags)}")


class ArchiveError(PatchNotesError):
    """A file in the historical archive could not be decoded."""


class FetchError(PatchNotesError):
    """A page could not be retrieved within the batch deadline."""
