from __future__ import annotations

"""
Listing Line Classifier.

Strips the four-character indentation markers from the front of a listing
line and reports whether the line sits at an expected nesting depth.
"""

from typing import Tuple

from tree2fs.domain.constants import INDENT_MARKERS, INDENT_WIDTH

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def strip_indentation(line: str) -> Tuple[str, int]:
    """
    Remove leading indentation markers from a line.

    Stops at the first four-character prefix that is neither the
    continuation marker nor the blank marker.

    Args:
        line: Raw listing line.

    Returns:
        Tuple[str, int]: Unstripped remainder and number of markers removed.
    """
    pos = 0
    depth = 0
    while line.startswith(INDENT_MARKERS, pos):
        pos += INDENT_WIDTH
        depth += 1
    return line[pos:], depth


def classify_line(line: str, expected_depth: int) -> Tuple[str, bool]:
    """
    Check whether a line belongs at the given nesting depth.

    Args:
        line: Raw listing line.
        expected_depth: Non-negative depth the caller is parsing.

    Returns:
        Tuple[str, bool]: Remainder after the markers and the match flag.
    """
    remainder, depth = strip_indentation(line)
    return remainder, depth == expected_depth


def count_depth(line: str) -> int:
    """Return the nesting depth encoded by a line's indentation."""
    return strip_indentation(line)[1]
