from __future__ import annotations

"""
Unit tests for the domain data models and error types.
"""

from tree2fs.domain.errors import TrailingInputError
from tree2fs.domain.scaffold_models import (
    OP_FILE,
    OP_SYMLINK,
    FsOperation,
    create_error_result,
    create_success_result,
)
from tree2fs.domain.tree_models import EntryName, Symlink, TreeNode


def test_tree_nodes_do_not_share_collections():
    a = TreeNode()
    b = TreeNode()
    a.files.append("x")
    assert b.files == []
    assert a.is_empty() is False
    assert b.is_empty() is True


def test_entry_name_symlink_flag():
    assert EntryName(name="f").is_symlink is False
    assert EntryName(name="l -> t", symlink=Symlink("l", "t")).is_symlink is True


def test_operation_descriptions():
    assert FsOperation(OP_FILE, "out/a").describe() == "file: out/a"
    assert FsOperation(OP_SYMLINK, "out/l", "out/t").describe() == "symlink: out/l -> out/t"


def test_trailing_input_error_carries_leftover():
    err = TrailingInputError(["x", "y"])
    assert err.leftover == ["x", "y"]
    assert err.line == "x"
    assert "2 unparsed" in str(err)


def test_result_factories(mock_config_dict):
    ok = create_success_result(mock_config_dict, {"directories": 2, "files": 3, "symlinks": 1})
    assert ok.ok is True
    assert ok.error == ""
    assert (ok.directories, ok.files, ok.symlinks) == (2, 3, 1)
    assert ok.output_dir == mock_config_dict["output_dir"]

    bad = create_error_result("boom", mock_config_dict, dry_run=True)
    assert bad.ok is False
    assert bad.error == "boom"
    assert bad.dry_run is True
    assert bad.operations == []
