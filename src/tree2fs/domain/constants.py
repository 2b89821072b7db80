from __future__ import annotations

"""
Domain Constants.

Glyph vocabulary of the directory listing grammar and the static defaults
used by the loader, the configuration layer, and the CLI.
"""

from typing import Tuple

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# LISTING GRAMMAR
# -----------------------------------------------------------------------------

# Four-character indentation markers
CONTINUATION_MARKER = "│   "
BLANK_MARKER = "    "
INDENT_MARKERS: Tuple[str, ...] = (CONTINUATION_MARKER, BLANK_MARKER)
INDENT_WIDTH = 4

# Connectors preceding the entry text
BRANCH_CONNECTOR = "├── "
TERMINAL_CONNECTOR = "└── "
CONNECTORS: Tuple[str, ...] = (BRANCH_CONNECTOR, TERMINAL_CONNECTOR)

SYMLINK_SEPARATOR = " -> "

# Boilerplate emitted by the listing tool around the entries
ROOT_MARKER = "."
SUMMARY_KEYWORDS: Tuple[str, ...] = ("directories", "files")

# -----------------------------------------------------------------------------
# RUNTIME DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_INPUT_FILE = "tree.txt"
DEFAULT_OUTPUT_DIR = "output"
DEFAULT_ENCODING = "utf-8"
