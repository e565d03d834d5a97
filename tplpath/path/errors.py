"""
Exceptions raised while parsing template path specifications.
"""

from __future__ import annotations

from typing import Optional

from ..errors import TplPathUserError


class TemplatePathError(TplPathUserError):
    """
    Base class for template path parsing errors.

    Attributes:
        message: Human-readable description
        raw_path: Template path string being parsed (if known)
        position: Offset inside raw_path where the problem was detected (if known)
    """

    def __init__(
        self,
        message: str,
        raw_path: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.message = message
        self.raw_path = raw_path
        self.position = position
        super().__init__(self._format())

    def _format(self) -> str:
        text = self.message
        if self.position is not None:
            text += f" at position {self.position}"
        if self.raw_path is not None:
            text += f": {self.raw_path!r}"
        return text


class UnterminatedListError(TemplatePathError):
    """Composite path starts with '[' but has no closing ']'."""
    pass


class ReservedSyntaxError(TemplatePathError):
    """Template path starts with '{', which is reserved for future use."""
    pass


class UnexpectedClauseNameError(TemplatePathError):
    """Something other than 'settings' follows the '?' in clause position."""

    def __init__(self, name: str, raw_path: Optional[str] = None, position: Optional[int] = None):
        self.name = name
        super().__init__(
            f"{name!r} is unexpected after the \"?\". Expected \"settings\"",
            raw_path,
            position,
        )


class TrailingContentError(TemplatePathError):
    """The settings evaluator stopped before the end of the template path."""
    pass


class MalformedListError(TemplatePathError):
    """Comma separated list has an empty item in the middle."""
    pass


class EvaluatorFailureError(TemplatePathError):
    """Settings clause could not be applied; the original error is the __cause__."""
    pass


class RegexSyntaxError(TemplatePathError):
    """Item of a comma separated pattern list is not a valid regular expression."""
    pass


__all__ = [
    "TemplatePathError",
    "UnterminatedListError",
    "ReservedSyntaxError",
    "UnexpectedClauseNameError",
    "TrailingContentError",
    "MalformedListError",
    "EvaluatorFailureError",
    "RegexSyntaxError",
]
