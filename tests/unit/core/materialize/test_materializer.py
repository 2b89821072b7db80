from __future__ import annotations

"""
Unit tests for the Structure Materializer.

Verifies operation ordering, on-disk results, idempotent directory
creation and collision failures.
"""

import os

import pytest

from tree2fs.core.materialize.materializer import iter_operations, materialize
from tree2fs.domain.errors import MaterializationError
from tree2fs.domain.scaffold_models import OP_FILE, OP_MKDIR, OP_SYMLINK, FsOperation
from tree2fs.domain.tree_models import Symlink, TreeNode


def _dir_with_link() -> TreeNode:
    inner = TreeNode(files=["a.txt"], symlinks=[Symlink(target="b", source="a.txt")])
    return TreeNode(directories={"dir": inner})


def test_operation_order_directories_files_symlinks():
    tree = TreeNode(
        directories={
            "one": TreeNode(files=["x"]),
            "two": TreeNode(),
        },
        files=["top"],
        symlinks=[Symlink(target="ln", source="top")],
    )

    ops = list(iter_operations(tree, "base"))

    assert ops == [
        FsOperation(OP_MKDIR, "base/one"),
        FsOperation(OP_FILE, "base/one/x"),
        FsOperation(OP_MKDIR, "base/two"),
        FsOperation(OP_FILE, "base/top"),
        FsOperation(OP_SYMLINK, "base/ln", "base/top"),
    ]


def test_materialize_directory_file_and_symlink(tmp_path):
    base = str(tmp_path)

    applied = materialize(_dir_with_link(), base)

    assert len(applied) == 3
    assert os.path.isdir(os.path.join(base, "dir"))

    file_path = os.path.join(base, "dir", "a.txt")
    assert os.path.isfile(file_path)
    assert os.path.getsize(file_path) == 0

    link_path = os.path.join(base, "dir", "b")
    assert os.path.islink(link_path)
    assert os.readlink(link_path) == f"{base}/dir/a.txt"


def test_symlink_source_is_not_validated(tmp_path):
    tree = TreeNode(symlinks=[Symlink(target="dangling", source="no/such/path")])

    materialize(tree, str(tmp_path))

    link_path = tmp_path / "dangling"
    assert os.path.islink(link_path)
    assert not link_path.exists()
    assert os.readlink(link_path) == f"{tmp_path}/no/such/path"


def test_directory_creation_is_idempotent(tmp_path):
    tree = TreeNode(directories={"pkg": TreeNode(directories={"sub": TreeNode()})})

    materialize(tree, str(tmp_path))
    materialize(tree, str(tmp_path))

    assert (tmp_path / "pkg" / "sub").is_dir()


def test_file_collision_fails(tmp_path):
    tree = TreeNode(directories={"pkg": TreeNode(files=["mod.py"])})
    materialize(tree, str(tmp_path))

    with pytest.raises(MaterializationError) as exc:
        materialize(tree, str(tmp_path))

    err = exc.value
    assert isinstance(err, OSError)
    assert isinstance(err.__cause__, FileExistsError)
    assert err.kind == OP_FILE
    assert err.path == f"{tmp_path}/pkg/mod.py"
    assert err.applied == 1


def test_symlink_collision_fails(tmp_path):
    tree = TreeNode(symlinks=[Symlink(target="ln", source="x")])
    materialize(tree, str(tmp_path))

    with pytest.raises(MaterializationError) as exc:
        materialize(tree, str(tmp_path))
    assert exc.value.kind == OP_SYMLINK


def test_failure_stops_without_rollback(tmp_path):
    (tmp_path / "b").write_text("existing", encoding="utf-8")
    tree = TreeNode(files=["a", "b", "c"])

    with pytest.raises(MaterializationError):
        materialize(tree, str(tmp_path))

    assert (tmp_path / "a").exists()
    assert (tmp_path / "b").read_text(encoding="utf-8") == "existing"
    assert not (tmp_path / "c").exists()
