"""
Locator for the trailing ?settings(...) clause of a template path.

Scans backward from the end of the string:

    <path> ? settings ( <args> )
           ^ returned offset

Strings that do not end in this shape are ordinary paths (-1 is returned).
A '?name(...)' tail with any name other than 'settings' is always an error,
since that shape is reserved.
"""

from __future__ import annotations

import logging
from enum import Enum

from .errors import UnexpectedClauseNameError

logger = logging.getLogger(__name__)

SETTINGS_CLAUSE_NAME = "settings"


class _QuoteMode(Enum):
    NORMAL = 0
    SINGLE = 1      # inside '...'
    DOUBLE = 2      # inside "..."


def _is_name_char(c: str) -> bool:
    return c.isalnum() or c == "_" or c == "$"


def _is_escaped(s: str, pos: int) -> bool:
    return pos > 0 and s[pos - 1] == "\\"


def _skip_ws_backward(s: str, pos: int) -> int:
    while pos >= 0 and s[pos].isspace():
        pos -= 1
    return pos


def find_settings_start(s: str) -> int:
    """
    Find where the settings clause of a template path starts.

    Args:
        s: Full template path string

    Returns:
        Offset of the '?' introducing the clause, or -1 if there is no clause

    Raises:
        UnexpectedClauseNameError: '?' is followed by an identifier other than 'settings'
    """
    pos = _skip_ws_backward(s, len(s) - 1)

    # Closing ')'
    if pos < 0 or s[pos] != ")":
        return -1
    pos -= 1

    # Back to the matching '(' (quote aware)
    depth = 1
    mode = _QuoteMode.NORMAL
    while depth > 0:
        if pos < 0:
            return -1
        c = s[pos]
        if mode is _QuoteMode.NORMAL:
            if c == "(":
                depth -= 1
            elif c == ")":
                depth += 1
            elif c == "'":
                mode = _QuoteMode.SINGLE
            elif c == '"':
                mode = _QuoteMode.DOUBLE
        elif mode is _QuoteMode.SINGLE:
            if c == "'" and not _is_escaped(s, pos):
                mode = _QuoteMode.NORMAL
        else:
            if c == '"' and not _is_escaped(s, pos):
                mode = _QuoteMode.NORMAL
        pos -= 1

    pos = _skip_ws_backward(s, pos)

    # Clause name
    name_end = pos + 1
    while pos >= 0 and _is_name_char(s[pos]):
        pos -= 1
    name_start = pos + 1
    if name_start == name_end:
        return -1
    name = s[name_start:name_end]

    pos = _skip_ws_backward(s, pos)

    # '?'
    if pos < 0 or s[pos] != "?":
        return -1

    if name != SETTINGS_CLAUSE_NAME:
        raise UnexpectedClauseNameError(name, s, name_start)

    logger.debug("Settings clause found at %d in %r", pos, s)
    return pos


__all__ = ["SETTINGS_CLAUSE_NAME", "find_settings_start"]
