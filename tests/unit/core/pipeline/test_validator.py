from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies default injection, type coercion, warnings and strict mode.
"""

import pytest

from tree2fs.core.pipeline.validator import validate_config
from tree2fs.domain.config import get_default_config


def test_valid_config_passes_unchanged(mock_config_dict):
    clean, warnings = validate_config(mock_config_dict)
    assert warnings == []
    assert clean == mock_config_dict


def test_missing_keys_are_filled_with_defaults():
    clean, warnings = validate_config({"input_path": "listing.txt"})
    assert warnings == []
    assert clean["input_path"] == "listing.txt"
    assert clean["output_dir"] == "output"
    assert clean["encoding"] == "utf-8"


def test_non_dict_config_falls_back_to_defaults():
    clean, warnings = validate_config(["not", "a", "dict"])
    assert clean == get_default_config()
    assert len(warnings) == 1


def test_type_coercion_with_warnings():
    clean, warnings = validate_config({
        "input_path": 42,
        "output_dir": "   ",
        "print_tree": "yes",
        "dump_tree": "maybe",
    })

    assert clean["input_path"] == "tree.txt"
    assert clean["output_dir"] == "output"
    assert clean["print_tree"] is True
    assert clean["dump_tree"] is False
    assert len(warnings) == 2


def test_unknown_encoding_falls_back():
    clean, warnings = validate_config({"encoding": "no-such-codec"})
    assert clean["encoding"] == "utf-8"
    assert any("no-such-codec" in w for w in warnings)


def test_strict_mode_raises():
    with pytest.raises(TypeError):
        validate_config({"print_tree": 3}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"encoding": "no-such-codec"}, strict=True)
