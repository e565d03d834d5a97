"""
Lexer for the argument list of a ?settings(...) clause.

Tokens:
- NAME: property names
- KEYWORD: true, false, null
- STRING: '...' or "..." with backslash escapes
- NUMBER: integers and decimals, optionally signed
- SYMBOL: = , ( )
- EOF: end of input

Tokenization is lazy: the evaluator stops pulling tokens after the closing ')',
so whatever follows the clause is never tokenized.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List

from .errors import SettingsSyntaxError


@dataclass
class Token:
    """
    Token of a settings argument list.

    Attributes:
        type: Token type (NAME, KEYWORD, STRING, NUMBER, SYMBOL, EOF)
        value: Source text of the token
        position: Offset in the source string
        end: Offset just past the token
    """
    type: str
    value: str
    position: int
    end: int

    def __repr__(self):
        return f"Token({self.type}, '{self.value}', pos={self.position})"


class SettingsLexer:
    """Splits settings argument text into tokens, starting at an arbitrary offset."""

    # (regex_pattern, token_type, ignore_flag); order matters
    TOKEN_SPECS = [
        (r'\s+', 'WHITESPACE', True),

        (r'"(?:[^"\\]|\\.)*"', 'STRING', False),
        (r"'(?:[^'\\]|\\.)*'", 'STRING', False),
        (r'["\']', 'UNTERMINATED', False),

        (r'[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?', 'NUMBER', False),

        (r'[=,()]', 'SYMBOL', False),

        (r'[^\W\d][\w$]*|\$[\w$]*', 'NAME', False),

        (r'.', 'UNKNOWN', False),
    ]

    KEYWORDS = {'true', 'false', 'null'}

    def __init__(self):
        self._compiled_patterns = [
            (re.compile(pattern, re.DOTALL), token_type, ignore)
            for pattern, token_type, ignore in self.TOKEN_SPECS
        ]

    def tokenize_stream(self, text: str, start: int = 0) -> Iterator[Token]:
        """
        Lazily yield tokens of text from offset start.

        Yields an EOF token at the end of input and stops.

        Raises:
            SettingsSyntaxError: On an unterminated string or unknown character
        """
        position = start
        while position < len(text):
            for pattern, token_type, ignore in self._compiled_patterns:
                match = pattern.match(text, position)
                if not match:
                    continue
                value = match.group(0)
                if token_type == 'UNTERMINATED':
                    raise SettingsSyntaxError("Unterminated string literal", position)
                if token_type == 'UNKNOWN':
                    raise SettingsSyntaxError(f"Unexpected character {value!r}", position)
                if not ignore:
                    final_type = token_type
                    if token_type == 'NAME' and value in self.KEYWORDS:
                        final_type = 'KEYWORD'
                    yield Token(final_type, value, position, match.end())
                position = match.end()
                break

        yield Token('EOF', '', position, position)

    def tokenize(self, text: str, start: int = 0) -> List[Token]:
        """Tokenize everything from start, including the trailing EOF token."""
        return list(self.tokenize_stream(text, start))


__all__ = ["Token", "SettingsLexer"]
