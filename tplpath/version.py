from __future__ import annotations

from importlib import metadata
from typing import Tuple, Union

# Composite ([...]) and reserved ({...}) template path syntax exist since this version.
COMPOSITE_SYNTAX_VERSION = "2.3.22"

DEFAULT_INCOMPATIBLE_IMPROVEMENTS = COMPOSITE_SYNTAX_VERSION

VersionLike = Union[str, int, Tuple[int, ...]]


def tool_version() -> str:
    """
    Version of the installed package.
    Independent from the rest of the modules (to avoid import cycles).
    """
    try:
        return metadata.version("tplpath")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def version_int(version: VersionLike) -> int:
    """
    Pack a dotted version into a comparable integer: "2.3.22" -> 2003022.

    Accepts "major.minor.micro" strings (missing parts count as 0),
    tuples of ints, or an already packed int.
    """
    if isinstance(version, int):
        return version
    if isinstance(version, str):
        raw_parts = version.strip().split(".")
        try:
            parts = tuple(int(p) for p in raw_parts)
        except ValueError:
            raise ValueError(f"Invalid version string: {version!r}")
    else:
        parts = tuple(version)
    if not parts or len(parts) > 3 or any(p < 0 or p > 999 for p in parts):
        raise ValueError(f"Invalid version: {version!r}")
    major, minor, micro = (tuple(parts) + (0, 0, 0))[:3]
    return major * 1_000_000 + minor * 1_000 + micro


def composite_syntax_enabled(incompatible_improvements: VersionLike) -> bool:
    """True if '[' and '{' prefixes are recognized at this compatibility level."""
    return version_int(incompatible_improvements) >= version_int(COMPOSITE_SYNTAX_VERSION)


__all__ = [
    "COMPOSITE_SYNTAX_VERSION",
    "DEFAULT_INCOMPATIBLE_IMPROVEMENTS",
    "VersionLike",
    "tool_version",
    "version_int",
    "composite_syntax_enabled",
]
