from __future__ import annotations

"""
Scaffold Domain Data Models.

Defines the filesystem operation records emitted by the materializer and
the result object passed from the scaffold engine to the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# OPERATION RECORDS
# -----------------------------------------------------------------------------

OP_MKDIR = "directory"
OP_FILE = "file"
OP_SYMLINK = "symlink"


@dataclass(frozen=True)
class FsOperation:
    """
    A single filesystem action derived from the parsed tree.

    Attributes:
        kind: One of 'directory', 'file' or 'symlink'.
        path: Path to create.
        target: Link destination for symlinks, empty otherwise.
    """
    kind: str
    path: str
    target: str = ""

    def describe(self) -> str:
        if self.kind == OP_SYMLINK:
            return f"{self.kind}: {self.path} -> {self.target}"
        return f"{self.kind}: {self.path}"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScaffoldResult:
    """
    Unified result object of a complete scaffold run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Listing file that was read.
        output_dir: Root directory the structure was created under.
        dry_run: Whether filesystem writes were skipped.
        directories: Number of directories in the parsed tree.
        files: Number of plain files in the parsed tree.
        symlinks: Number of symbolic links in the parsed tree.
        operations: Human readable list of planned or applied operations.
        tree_lines: Re-rendered listing, when a preview was requested.
        tree: JSON export of the parsed tree, when requested.
        summary: Technical execution summary.
    """
    ok: bool
    error: str

    input_path: str
    output_dir: str
    dry_run: bool = False

    directories: int = 0
    files: int = 0
    symlinks: int = 0

    operations: List[str] = field(default_factory=list)
    tree_lines: List[str] = field(default_factory=list)
    tree: Dict[str, Any] = field(default_factory=dict)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        dry_run: bool = False,
        operations: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> ScaffoldResult:
    """
    Create a failed scaffold result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        dry_run: Simulation flag of the run.
        operations: Operations applied before the failure.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        ScaffoldResult: An immutable error result object.
    """
    return ScaffoldResult(
        ok=False,
        error=error,
        input_path=cfg.get("input_path", ""),
        output_dir=cfg.get("output_dir", ""),
        dry_run=dry_run,
        operations=operations or [],
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        counts: Dict[str, int],
        dry_run: bool = False,
        operations: Optional[List[str]] = None,
        tree_lines: Optional[List[str]] = None,
        tree: Optional[Dict[str, Any]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> ScaffoldResult:
    """
    Create a successful scaffold result instance.

    Args:
        cfg: Final configuration used during execution.
        counts: Entity totals keyed by 'directories', 'files' and 'symlinks'.
        dry_run: Simulation flag of the run.
        operations: Planned or applied operations.
        tree_lines: Re-rendered listing preview.
        tree: JSON export of the parsed tree.
        summary_extra: Final execution metrics.

    Returns:
        ScaffoldResult: An immutable success result object.
    """
    return ScaffoldResult(
        ok=True,
        error="",
        input_path=cfg.get("input_path", ""),
        output_dir=cfg.get("output_dir", ""),
        dry_run=dry_run,
        directories=counts.get("directories", 0),
        files=counts.get("files", 0),
        symlinks=counts.get("symlinks", 0),
        operations=operations or [],
        tree_lines=tree_lines or [],
        tree=tree or {},
        summary=summary_extra or {},
    )
