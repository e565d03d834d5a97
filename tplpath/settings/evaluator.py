"""
Evaluators applying a ?settings(...) argument list to an already built object.

Grammar accepted by LiteralSettingsEvaluator (starting just past the '('):

    arguments  → [ assignment ("," assignment)* [","] ] ")"
    assignment → NAME "=" literal
    literal    → STRING | NUMBER | "true" | "false" | "null"
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, Tuple, runtime_checkable

from .errors import SettingsEvaluationError, SettingsSyntaxError
from .lexer import SettingsLexer, Token

logger = logging.getLogger(__name__)

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    "'": "'",
    '"': '"',
}


@runtime_checkable
class SettingsEvaluator(Protocol):
    """Common interface for settings clause evaluators."""

    def configure(self, source: str, pos: int, target: Any) -> int:
        """
        Apply the argument list of a settings clause to target.

        Args:
            source: Full text containing the clause
            pos: Offset just past the '(' that opens the argument list
            target: Object receiving the property assignments

        Returns:
            Offset where evaluation stopped (just past the consumed ')' and trailing whitespace)
        """
        ...


def _decode_string(token: Token) -> str:
    body = token.value[1:-1]
    out = []
    i = 0
    while i < len(body):
        c = body[i]
        if c == "\\":
            esc = body[i + 1]
            if esc not in _ESCAPES:
                raise SettingsSyntaxError(f"Unsupported escape sequence '\\{esc}'", token.position + 1 + i)
            out.append(_ESCAPES[esc])
            i += 2
        else:
            out.append(c)
            i += 1
    return "".join(out)


def _decode_number(token: Token) -> Any:
    text = token.value
    if any(ch in text for ch in ".eE"):
        return float(text)
    return int(text)


def _has_type(value: Any, types: Tuple[type, ...]) -> bool:
    # bool is an int subclass, but true/false must not satisfy a numeric property
    if isinstance(value, bool) and bool not in types:
        return False
    return isinstance(value, types)


class LiteralSettingsEvaluator:
    """
    Settings evaluator supporting literal property assignments.

    A target declaring SETTABLE (name -> accepted types) can only receive
    those properties, with values of those types. On other targets, only
    existing public non-method attributes can be assigned.
    """

    def __init__(self):
        self.lexer = SettingsLexer()

    def configure(self, source: str, pos: int, target: Any) -> int:
        """
        Parse name=literal pairs from pos up to the closing ')' and assign them.

        Raises:
            SettingsSyntaxError: On malformed argument list
            SettingsEvaluationError: On unknown or read-only property, or a value of the wrong type
        """
        tokens = self.lexer.tokenize_stream(source, pos)
        token = next(tokens)

        if not self._is_symbol(token, ")"):
            while True:
                name = self._expect(token, "NAME", "Expected property name").value
                self._expect(next(tokens), "SYMBOL", "Expected '=' after property name", "=")
                value = self._parse_literal(next(tokens))
                self._assign(target, name, value)

                token = next(tokens)
                if self._is_symbol(token, ","):
                    token = next(tokens)
                    if self._is_symbol(token, ")"):
                        break
                    continue
                if self._is_symbol(token, ")"):
                    break
                raise SettingsSyntaxError(f"Expected ',' or ')', got {token.value or 'end of input'!r}", token.position)

        end = token.end
        while end < len(source) and source[end].isspace():
            end += 1
        return end

    def _parse_literal(self, token: Token) -> Any:
        if token.type == "STRING":
            return _decode_string(token)
        if token.type == "NUMBER":
            return _decode_number(token)
        if token.type == "KEYWORD":
            return {"true": True, "false": False, "null": None}[token.value]
        raise SettingsSyntaxError(f"Expected literal value, got {token.value or 'end of input'!r}", token.position)

    def _assign(self, target: Any, name: str, value: Any) -> None:
        settable = getattr(target, "SETTABLE", None)
        if settable is not None:
            if name not in settable:
                raise SettingsEvaluationError(
                    f"{type(target).__name__} has no settable property {name!r}"
                )
            if not _has_type(value, settable[name]):
                expected = " or ".join(t.__name__ for t in settable[name])
                raise SettingsEvaluationError(
                    f"Property {name!r} of {type(target).__name__} expects {expected}, "
                    f"got {type(value).__name__}"
                )
        elif name.startswith("_") or not hasattr(target, name) or callable(getattr(target, name)):
            raise SettingsEvaluationError(
                f"{type(target).__name__} has no settable property {name!r}"
            )
        logger.debug("Setting %s.%s = %r", type(target).__name__, name, value)
        setattr(target, name, value)

    @staticmethod
    def _is_symbol(token: Token, symbol: str) -> bool:
        return token.type == "SYMBOL" and token.value == symbol

    @staticmethod
    def _expect(token: Token, token_type: str, message: str, value: str | None = None) -> Token:
        if token.type != token_type or (value is not None and token.value != value):
            raise SettingsSyntaxError(message, token.position)
        return token


__all__ = ["SettingsEvaluator", "LiteralSettingsEvaluator"]
