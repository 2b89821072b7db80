from __future__ import annotations

"""
Listing and Materialization Errors.

Grammar violations derive from ValueError, filesystem failures from
OSError. Both are unrecoverable for the current run.
"""

from typing import List


class ListingFormatError(ValueError):
    """Base class for grammar violations found while parsing a listing."""

    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line


class NotAnEntryError(ListingFormatError):
    """A depth-stripped line starts with neither connector."""

    def __init__(self, line: str):
        super().__init__(f"Not an element: {line!r}", line)


class AmbiguousSymlinkError(ListingFormatError):
    """The symlink separator occurs more than once in one entry."""

    def __init__(self, line: str):
        super().__init__(f"Ambiguous symlink entry (separator repeated): {line!r}", line)


class TrailingInputError(ListingFormatError):
    """Lines remain unconsumed after the top-level parse returned."""

    def __init__(self, leftover: List[str]):
        first = leftover[0] if leftover else ""
        super().__init__(
            f"{len(leftover)} unparsed trailing line(s), starting at: {first!r}",
            first,
        )
        self.leftover = list(leftover)


class MaterializationError(OSError):
    """
    A filesystem operation failed while creating the parsed structure.

    Attributes:
        kind: Operation kind ('directory', 'file' or 'symlink').
        path: Path that could not be created.
        applied: Number of operations completed before the failure.
    """

    def __init__(self, kind: str, path: str, reason: str, applied: int = 0):
        super().__init__(f"Error creating {kind} '{path}': {reason}")
        self.kind = kind
        self.path = path
        self.applied = applied
