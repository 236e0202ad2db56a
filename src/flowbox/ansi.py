"""
ANSI escape handling for width measurement.

All layout math in the composer works on visible columns, so any string that
may carry color codes is measured through visible_width().
"""

import re

# ESC [ params m  (SGR color/style sequences)
ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove ANSI SGR escape sequences from text."""
    return ANSI_PATTERN.sub("", text)


def visible_width(text: str) -> int:
    """Return the number of visible columns in a single line of text."""
    return len(strip_ansi(text))

