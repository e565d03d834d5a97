"""
Resource anchor of the current execution context.

The anchor is the name of the Python package whose resources back
'classpath:' template paths. It is set per thread / task and only read by the parser.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

_RESOURCE_ANCHOR: ContextVar[Optional[str]] = ContextVar("tplpath_resource_anchor", default=None)


def current_resource_anchor() -> Optional[str]:
    """Anchor active in the current context, or None if nothing was set."""
    return _RESOURCE_ANCHOR.get()


@contextmanager
def resource_anchor(name: Optional[str]) -> Iterator[Optional[str]]:
    """
    Make name the resource anchor for the duration of the with-block.

    Example:
        with resource_anchor("myapp"):
            parse_template_path("classpath:templates")
    """
    token = _RESOURCE_ANCHOR.set(name)
    try:
        yield name
    finally:
        _RESOURCE_ANCHOR.reset(token)


__all__ = ["current_resource_anchor", "resource_anchor"]
