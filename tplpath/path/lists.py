"""
Comma separated list values used by template path specifications.

Splitting is purely character based: a comma inside a quoted string still
separates items.
"""

from __future__ import annotations

import re
from typing import List, Pattern

from .errors import MalformedListError, RegexSyntaxError


def parse_comma_separated_list(value: str) -> List[str]:
    """
    Split value on ',' and trim every item.

    A single empty trailing item (trailing comma) is dropped;
    an empty item anywhere else is an error.

    Raises:
        MalformedListError: On an empty item before the last one
    """
    parts = value.split(",")
    items: List[str] = []
    for i, part in enumerate(parts):
        item = part.strip()
        if item:
            items.append(item)
        elif i != len(parts) - 1:
            raise MalformedListError("Missing list item after a comma", value)
    return items


def parse_comma_separated_patterns(value: str) -> List[Pattern[str]]:
    """
    Parse a comma separated list of regular expressions.

    Order is preserved; callers use it for first-match priority.

    Raises:
        MalformedListError: On an empty interior item
        RegexSyntaxError: If an item does not compile
    """
    patterns: List[Pattern[str]] = []
    for item in parse_comma_separated_list(value):
        try:
            patterns.append(re.compile(item))
        except re.error as e:
            raise RegexSyntaxError(f"Invalid regular expression {item!r} ({e})", value) from e
    return patterns


__all__ = ["parse_comma_separated_list", "parse_comma_separated_patterns"]
