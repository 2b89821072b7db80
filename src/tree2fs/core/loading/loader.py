from __future__ import annotations

"""
Listing Loader.

Reads a directory listing from disk and removes the boilerplate the
listing tool writes around the entries: the root marker, the blank
separator, and the trailing 'N directories, M files' summary.
"""

import logging
import re
from typing import Iterable, List

from tree2fs.domain.constants import DEFAULT_ENCODING, ROOT_MARKER, SUMMARY_KEYWORDS

logger = logging.getLogger(__name__)

# Singular footer forms, e.g. '1 directory, 1 file'
_SUMMARY_RX = re.compile(r"^\d+ director(?:y|ies), \d+ files?$")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def read_listing(path: str, encoding: str = DEFAULT_ENCODING) -> List[str]:
    """
    Read a listing file and return its entry lines.

    Args:
        path: Listing file location.
        encoding: Text encoding of the file.

    Returns:
        List[str]: Lines ready for the parser.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the content does not match the encoding.
    """
    with open(path, "r", encoding=encoding) as f:
        raw_lines = f.read().splitlines()

    lines = filter_boilerplate(raw_lines)
    logger.debug(f"Read {len(raw_lines)} line(s) from '{path}', {len(lines)} kept.")
    return lines


def filter_boilerplate(lines: Iterable[str]) -> List[str]:
    """Drop root markers, summary lines and blank separators."""
    return [line for line in lines if not _is_boilerplate(line)]


def is_summary_line(line: str) -> bool:
    """Detect the listing footer, e.g. '3 directories, 12 files'."""
    if all(word in line for word in SUMMARY_KEYWORDS):
        return True
    return bool(_SUMMARY_RX.match(line.strip()))

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _is_boilerplate(line: str) -> bool:
    if line == ROOT_MARKER or not line.strip():
        return True
    return is_summary_line(line)
