from __future__ import annotations

"""
Integration tests for the scaffold engine.

Runs the whole load -> parse -> materialize chain against temporary
directories and checks the reported results.
"""

import os
from pathlib import Path
from typing import Any, Dict

import pytest

from tree2fs.core.pipeline.engine import run_scaffold


@pytest.fixture
def listing_config(tmp_path: Path, sample_listing_text: str, mock_config_dict: Dict[str, Any]) -> Dict[str, Any]:
    Path(mock_config_dict["input_path"]).write_text(sample_listing_text, encoding="utf-8")
    return mock_config_dict


def test_full_run_creates_structure(listing_config):
    result = run_scaffold(listing_config)

    assert result.ok is True, result.error
    assert (result.directories, result.files, result.symlinks) == (3, 5, 1)

    out = Path(listing_config["output_dir"])
    assert (out / "docs").is_dir()
    assert (out / "src" / "app").is_dir()
    assert (out / "src" / "app" / "core.py").is_file()
    assert (out / "README.md").stat().st_size == 0

    link = out / "docs" / "latest"
    assert link.is_symlink()
    assert os.readlink(link) == f"{out}/docs/docs/guide.md"
    assert result.summary["applied"] == len(result.operations) == 9


def test_dry_run_touches_nothing(listing_config):
    result = run_scaffold(listing_config, dry_run=True)

    assert result.ok is True
    assert result.dry_run is True
    assert result.summary["planned"] == 9
    assert result.operations[0] == f"directory: {listing_config['output_dir']}/docs"
    assert not Path(listing_config["output_dir"]).exists()


def test_preview_and_tree_export(listing_config):
    listing_config["print_tree"] = True
    listing_config["dump_tree"] = True

    result = run_scaffold(listing_config, dry_run=True)

    assert result.tree_lines[0] == "├── docs"
    assert result.tree_lines[-1] == "└── README.md"
    assert result.tree["Directories"]["docs"]["Symlinks"] == [
        {"New": "latest", "Old": "docs/guide.md"}
    ]


def test_missing_listing_is_an_error(mock_config_dict):
    result = run_scaffold(mock_config_dict)

    assert result.ok is False
    assert "Error reading listing" in result.error
    assert not Path(mock_config_dict["output_dir"]).exists()


def test_grammar_violation_is_an_error(mock_config_dict):
    Path(mock_config_dict["input_path"]).write_text(".\n├── ok\nnot an entry\n", encoding="utf-8")

    result = run_scaffold(mock_config_dict)

    assert result.ok is False
    assert "Not an element" in result.error
    assert result.summary["line"] == "not an entry"
    assert not Path(mock_config_dict["output_dir"]).exists()


def test_trailing_input_is_an_error(mock_config_dict):
    Path(mock_config_dict["input_path"]).write_text(
        "├── a\n└── b\n        └── orphan\n", encoding="utf-8"
    )

    result = run_scaffold(mock_config_dict)

    assert result.ok is False
    assert result.summary["leftover"] == ["        └── orphan"]


def test_second_run_reports_collision(listing_config):
    assert run_scaffold(listing_config).ok is True

    result = run_scaffold(listing_config)

    assert result.ok is False
    assert result.summary["failed_path"].endswith("docs/guide.md")
    assert result.summary["applied"] == 1
