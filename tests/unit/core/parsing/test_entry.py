from __future__ import annotations

"""
Unit tests for the Listing Entry Parser.

Verifies connector handling, symlink detection and rejection of
malformed entries.
"""

import pytest

from tree2fs.core.parsing.entry import parse_entry
from tree2fs.domain.errors import AmbiguousSymlinkError, ListingFormatError, NotAnEntryError
from tree2fs.domain.tree_models import Symlink


@pytest.mark.parametrize("connector", ["├── ", "└── "])
def test_plain_entry_after_either_connector(connector):
    entry = parse_entry(connector + "main.py")
    assert entry.name == "main.py"
    assert entry.is_symlink is False
    assert entry.symlink is None


def test_name_is_kept_verbatim():
    """Spaces and slashes in names are not interpreted."""
    entry = parse_entry("└── My Documents/old notes.txt")
    assert entry.name == "My Documents/old notes.txt"


def test_symlink_entry_is_split_on_separator():
    entry = parse_entry("├── current -> releases/v2")
    assert entry.is_symlink is True
    assert entry.symlink == Symlink(target="current", source="releases/v2")


def test_arrow_without_spaces_is_a_plain_name():
    entry = parse_entry("└── a->b")
    assert entry.is_symlink is False
    assert entry.name == "a->b"


def test_repeated_separator_is_rejected():
    with pytest.raises(AmbiguousSymlinkError) as exc:
        parse_entry("├── a -> b -> c")
    assert isinstance(exc.value, ListingFormatError)
    assert "a -> b -> c" in exc.value.line


@pytest.mark.parametrize("text", [
    "main.py",
    "|-- main.py",
    "`-- main.py",
    "├─ main.py",
    "",
])
def test_missing_connector_is_rejected(text):
    with pytest.raises(NotAnEntryError):
        parse_entry(text)


def test_grammar_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_entry("no connector")
