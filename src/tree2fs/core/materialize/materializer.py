from __future__ import annotations

"""
Structure Materializer.

Replays a parsed TreeNode hierarchy as real directories, empty files and
symbolic links under a base path. Operations run sequentially in a fixed
order: each directory followed by its subtree, then the files, then the
symlinks of the level.
"""

import logging
import os
from typing import Iterator, List

from tree2fs.domain.errors import MaterializationError
from tree2fs.domain.scaffold_models import OP_FILE, OP_MKDIR, OP_SYMLINK, FsOperation
from tree2fs.domain.tree_models import TreeNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def iter_operations(node: TreeNode, base_path: str) -> Iterator[FsOperation]:
    """
    Yield the filesystem operations needed to reproduce a subtree.

    Args:
        node: Directory node to replay.
        base_path: Path the node corresponds to on disk.

    Yields:
        FsOperation: Operations in execution order.
    """
    for name, child in node.directories.items():
        dir_path = _join(base_path, name)
        yield FsOperation(OP_MKDIR, dir_path)
        yield from iter_operations(child, dir_path)

    for name in node.files:
        yield FsOperation(OP_FILE, _join(base_path, name))

    for link in node.symlinks:
        yield FsOperation(OP_SYMLINK, _join(base_path, link.target), _join(base_path, link.source))


def materialize(node: TreeNode, base_path: str) -> List[FsOperation]:
    """
    Create the subtree of `node` under `base_path`.

    Directory creation is idempotent. Files and symlinks must not exist
    yet; the first failure stops the run and nothing created so far is
    rolled back.

    Args:
        node: Root of the subtree to create.
        base_path: Existing or creatable target directory.

    Returns:
        List[FsOperation]: Operations applied, in order.

    Raises:
        MaterializationError: On the first failing operation, chained to the
            underlying OSError (FileExistsError on collisions).
    """
    applied: List[FsOperation] = []
    for op in iter_operations(node, base_path):
        try:
            apply_operation(op)
        except OSError as e:
            logger.error(f"Failed to create {op.kind} '{op.path}': {e}")
            raise MaterializationError(op.kind, op.path, str(e), applied=len(applied)) from e
        applied.append(op)

    logger.info(f"Materialized {len(applied)} entries under '{base_path}'.")
    return applied


def apply_operation(op: FsOperation) -> None:
    """Execute one filesystem operation."""
    if op.kind == OP_MKDIR:
        os.makedirs(op.path, exist_ok=True)
    elif op.kind == OP_FILE:
        with open(op.path, "x", encoding="utf-8"):
            pass
    elif op.kind == OP_SYMLINK:
        os.symlink(op.target, op.path)
    else:
        raise ValueError(f"Unknown operation kind: {op.kind}")
    logger.debug(f"Created {op.describe()}")

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _join(base: str, name: str) -> str:
    # Names are replayed verbatim, absolute link sources included
    return f"{base}/{name}"
