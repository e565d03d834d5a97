"""
Utilities for creating files and directories in tests.
"""

from __future__ import annotations

from pathlib import Path


def write(p: Path, text: str) -> Path:
    """
    Write text to a file, creating parent directories when needed.

    Args:
        p: File path
        text: Content to write

    Returns:
        Path of the written file
    """
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


def write_bytes(p: Path, data: bytes) -> Path:
    """Binary counterpart of write()."""
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(data)
    return p
