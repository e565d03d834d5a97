"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from TplPathUserError.

Programming errors and bugs should NOT inherit from TplPathUserError;
they will propagate with full tracebacks.
"""

from __future__ import annotations


class TplPathUserError(Exception):
    """
    Base class for all user-facing errors in tplpath.

    These errors indicate problems that the user can fix:
    malformed template paths, bad settings, missing templates, broken config files.
    """
    pass


class TemplateNotFoundError(TplPathUserError):
    """Raised by a loader when no template exists under the requested name."""

    def __init__(self, name: str, loader: object = None):
        self.name = name
        self.loader = loader
        where = f" in {loader!r}" if loader is not None else ""
        super().__init__(f"Template not found: {name!r}{where}")


__all__ = ["TplPathUserError", "TemplateNotFoundError"]
