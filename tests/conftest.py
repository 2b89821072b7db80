from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation to ensure the 'src' directory is importable.
2. Shared listing samples and configuration dictionaries.
"""

import os
import sys
from typing import Any, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
SAMPLE_LISTING = """\
.
├── docs
│   ├── guide.md
│   └── latest -> docs/guide.md
├── src
│   ├── app
│   │   ├── __init__.py
│   │   └── core.py
│   └── setup.cfg
└── README.md

3 directories, 6 files
"""


@pytest.fixture
def sample_listing_text() -> str:
    """Raw listing text with root marker, blank separator and summary footer."""
    return SAMPLE_LISTING


@pytest.fixture
def sample_lines() -> List[str]:
    """Sample listing lines with boilerplate already removed."""
    return [
        line for line in SAMPLE_LISTING.splitlines()
        if line and line != "." and "directories" not in line
    ]


@pytest.fixture
def mock_config_dict(tmp_path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Paths point into the pytest temporary directory.
    """
    return {
        "input_path": str(tmp_path / "tree.txt"),
        "output_dir": str(tmp_path / "output"),
        "encoding": "utf-8",
        "print_tree": False,
        "dump_tree": False,
    }
