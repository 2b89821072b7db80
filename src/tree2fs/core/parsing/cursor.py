from __future__ import annotations

"""
Peekable cursor over an in-memory sequence of listing lines.
"""

from typing import List, Optional, Sequence


class LineCursor:
    """
    Forward-only view over a line sequence with one-line lookahead.

    The underlying sequence is never mutated; consumption only moves an
    index, so the unconsumed tail can be handed back at any time.
    """

    def __init__(self, lines: Sequence[str]):
        self._lines = lines
        self._pos = 0

    def __bool__(self) -> bool:
        return self._pos < len(self._lines)

    @property
    def position(self) -> int:
        return self._pos

    def peek(self) -> Optional[str]:
        """Return the current line without consuming it."""
        if self._pos < len(self._lines):
            return self._lines[self._pos]
        return None

    def peek_next(self) -> Optional[str]:
        """Return the line after the current one without consuming anything."""
        if self._pos + 1 < len(self._lines):
            return self._lines[self._pos + 1]
        return None

    def advance(self) -> str:
        """Consume and return the current line."""
        if self._pos >= len(self._lines):
            raise IndexError("cursor is exhausted")
        line = self._lines[self._pos]
        self._pos += 1
        return line

    def remaining(self) -> List[str]:
        return list(self._lines[self._pos:])
