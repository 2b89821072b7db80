from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the hierarchical model produced by the listing parser and consumed
by the materializer. A TreeNode exclusively owns its children; there are
no back-references.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Symlink:
    """
    Represents a symbolic link entry.

    Attributes:
        target: Name of the link itself, as it should appear on disk.
        source: Path text the link points to, taken verbatim from the listing.
    """
    target: str
    source: str


@dataclass
class TreeNode:
    """
    Represents one directory, including the implicit root.

    Attributes:
        directories: Child directory name to owned child node.
        files: Plain file names contained directly in this directory.
        symlinks: Symbolic links contained directly in this directory.
    """
    directories: Dict[str, "TreeNode"] = field(default_factory=dict)
    files: List[str] = field(default_factory=list)
    symlinks: List[Symlink] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.directories or self.files or self.symlinks)

    def to_dict(self) -> Dict[str, Any]:
        """
        Export the subtree as plain JSON-compatible data.

        Keys follow the listing model vocabulary: 'Directories', 'Files'
        and 'Symlinks' (each link as {'New': target, 'Old': source}).
        """
        return {
            "Directories": {name: child.to_dict() for name, child in self.directories.items()},
            "Files": list(self.files),
            "Symlinks": [{"New": s.target, "Old": s.source} for s in self.symlinks],
        }


@dataclass(frozen=True)
class EntryName:
    """
    Literal entry text extracted from one listing line.

    Attributes:
        name: The entry text after the connector, verbatim.
        symlink: Link halves when the text uses the arrow notation.
    """
    name: str
    symlink: Optional[Symlink] = None

    @property
    def is_symlink(self) -> bool:
        return self.symlink is not None
