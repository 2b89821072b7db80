from __future__ import annotations

"""
Listing Entry Parser.

Extracts the literal entry name from a depth-stripped line and detects
the 'name -> target' symbolic link notation.
"""

from tree2fs.domain.constants import CONNECTORS, SYMLINK_SEPARATOR
from tree2fs.domain.errors import AmbiguousSymlinkError, NotAnEntryError
from tree2fs.domain.tree_models import EntryName, Symlink


def parse_entry(remainder: str) -> EntryName:
    """
    Parse the entry text that follows the indentation markers.

    The text must start with the branch or terminal connector. Names are
    taken verbatim; no quoting or escaping is interpreted.

    Args:
        remainder: Line text left after indentation stripping.

    Returns:
        EntryName: The literal name, plus link halves for symlink lines.

    Raises:
        NotAnEntryError: If no connector starts the text.
        AmbiguousSymlinkError: If the separator appears more than once.
    """
    for connector in CONNECTORS:
        if remainder.startswith(connector):
            text = remainder[len(connector):]
            break
    else:
        raise NotAnEntryError(remainder)

    occurrences = text.count(SYMLINK_SEPARATOR)
    if occurrences == 0:
        return EntryName(name=text)
    if occurrences > 1:
        raise AmbiguousSymlinkError(text)

    target, source = text.split(SYMLINK_SEPARATOR)
    return EntryName(name=text, symlink=Symlink(target=target, source=source))
