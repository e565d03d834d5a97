from __future__ import annotations

from typing import Optional

from ..errors import TplPathUserError


class SettingsEvaluationError(TplPathUserError):
    """Settings clause could not be applied to the target object."""
    pass


class SettingsSyntaxError(SettingsEvaluationError):
    """Malformed argument list inside ?settings(...)."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Settings syntax error{where}: {message}")


__all__ = ["SettingsEvaluationError", "SettingsSyntaxError"]
