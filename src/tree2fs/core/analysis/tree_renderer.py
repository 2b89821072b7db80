from __future__ import annotations

"""
Tree Renderer.

Converts a TreeNode hierarchy back into the listing grammar. At each level
directories come first, then files, then symlinks, so the output parses
back into an equal tree as long as every directory has at least one entry.
"""

from typing import Dict, List, Tuple, Union

from tree2fs.domain.constants import (
    BLANK_MARKER,
    BRANCH_CONNECTOR,
    CONTINUATION_MARKER,
    ROOT_MARKER,
    SYMLINK_SEPARATOR,
    TERMINAL_CONNECTOR,
)
from tree2fs.domain.tree_models import Symlink, TreeNode

_Entry = Tuple[str, Union[TreeNode, Symlink, None]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_listing(
        node: TreeNode,
        include_root: bool = False,
        include_summary: bool = False,
) -> List[str]:
    """
    Render a tree as listing lines.

    Args:
        node: Root of the tree to render.
        include_root: Prepend the '.' root marker.
        include_summary: Append a blank separator and the totals footer.

    Returns:
        List[str]: Listing lines without line terminators.
    """
    lines: List[str] = [ROOT_MARKER] if include_root else []
    render_tree_structure(node, lines)
    if include_summary:
        lines.append("")
        lines.append(render_summary(node))
    return lines


def render_tree_structure(node: TreeNode, lines: List[str], prefix: str = "") -> None:
    """
    Recursively append the entries of `node` to an accumulator.

    Uses the branch/terminal connectors and the continuation/blank markers
    for nested levels.

    Args:
        node: Current directory node.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    entries: List[_Entry] = []
    entries.extend(node.directories.items())
    entries.extend((name, None) for name in node.files)
    entries.extend((link.target, link) for link in node.symlinks)

    total = len(entries)
    for i, (name, payload) in enumerate(entries):
        is_last = (i == total - 1)
        connector = TERMINAL_CONNECTOR if is_last else BRANCH_CONNECTOR

        if isinstance(payload, Symlink):
            lines.append(f"{prefix}{connector}{payload.target}{SYMLINK_SEPARATOR}{payload.source}")
            continue

        lines.append(f"{prefix}{connector}{name}")
        if isinstance(payload, TreeNode):
            child_prefix = prefix + (BLANK_MARKER if is_last else CONTINUATION_MARKER)
            render_tree_structure(payload, lines, prefix=child_prefix)


def count_entries(node: TreeNode) -> Dict[str, int]:
    """Total directories, files and symlinks below `node` (excluding itself)."""
    counts = {"directories": 0, "files": 0, "symlinks": 0}
    stack = [node]
    while stack:
        current = stack.pop()
        counts["directories"] += len(current.directories)
        counts["files"] += len(current.files)
        counts["symlinks"] += len(current.symlinks)
        stack.extend(current.directories.values())
    return counts


def render_summary(node: TreeNode) -> str:
    """
    Build the listing footer line.

    Symlinks are counted as files, like the listing tool does.
    """
    counts = count_entries(node)
    dirs = counts["directories"]
    files = counts["files"] + counts["symlinks"]
    dir_word = "directory" if dirs == 1 else "directories"
    file_word = "file" if files == 1 else "files"
    return f"{dirs} {dir_word}, {files} {file_word}"
