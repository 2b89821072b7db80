from __future__ import annotations

"""
Listing Tree Parser.

Turns a flat, ordered sequence of listing lines into a TreeNode hierarchy.
Nesting is inferred from indentation markers; an entry is a directory
exactly when the following line classifies one level deeper.

Descent and dedent are tracked with an explicit stack of (node, depth)
frames over a peekable cursor, so arbitrarily deep listings never hit
the interpreter recursion limit.
"""

import logging
from typing import List, Sequence, Tuple

from tree2fs.core.parsing.classifier import classify_line
from tree2fs.core.parsing.cursor import LineCursor
from tree2fs.core.parsing.entry import parse_entry
from tree2fs.domain.errors import TrailingInputError
from tree2fs.domain.tree_models import TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_level(lines: Sequence[str], node: TreeNode, depth: int) -> List[str]:
    """
    Consume the entries of one level (and their subtrees) into a node.

    Lines are consumed while they classify at `depth` or belong to the
    subtree of a directory opened at this level. The first line that fits
    neither stops parsing.

    Args:
        lines: Ordered listing lines, boilerplate already removed.
        node: Directory node receiving the entries, mutated in place.
        depth: Nesting depth of the entries to consume.

    Returns:
        List[str]: Lines that were not consumed.

    Raises:
        ListingFormatError: On a malformed entry.
    """
    cursor = LineCursor(lines)
    stack: List[Tuple[TreeNode, int]] = [(node, depth)]

    while cursor and stack:
        current, level = stack[-1]

        remainder, matches = classify_line(cursor.peek(), level)
        if not matches:
            # Dedent: hand the line back to the enclosing level
            stack.pop()
            continue

        following = cursor.peek_next()
        is_directory = following is not None and classify_line(following, level + 1)[1]
        cursor.advance()

        entry = parse_entry(remainder)

        if entry.symlink is not None:
            current.symlinks.append(entry.symlink)
        elif is_directory:
            child = TreeNode()
            current.directories[entry.name] = child
            stack.append((child, level + 1))
        else:
            current.files.append(entry.name)

    return cursor.remaining()


def parse_listing(lines: Sequence[str]) -> TreeNode:
    """
    Parse a complete listing into its implicit root node.

    Args:
        lines: Listing lines without the root marker and summary footer.

    Returns:
        TreeNode: Root of the parsed hierarchy.

    Raises:
        TrailingInputError: If any line is left unconsumed.
        ListingFormatError: On a malformed entry.
    """
    root = TreeNode()
    leftover = parse_level(lines, root, 0)
    if leftover:
        logger.error(f"Listing parse stopped with {len(leftover)} unconsumed line(s).")
        raise TrailingInputError(leftover)

    logger.debug(f"Parsed {len(lines)} listing line(s).")
    return root
