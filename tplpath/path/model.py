"""
Data types for parsed template path specifications.

PathSpec is a closed union: ClassResource, FileResource, WebAppResource, Composite.
Consumers dispatch with isinstance(); no other variants exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple, Union


class AnchorKind(Enum):
    """Where the package resources of a ClassResource are looked up."""
    EXPLICIT = "explicit"   # reference anchor given to the parser (class://, classpath: fallback)
    CONTEXT = "context"     # anchor active in the current execution context (classpath:)


@dataclass(frozen=True)
class ClassResource:
    """Templates packaged as resources of a Python package."""
    anchor_kind: AnchorKind
    anchor: str                 # Importable package name
    package_path: str           # Always starts with exactly one /


@dataclass(frozen=True)
class FileResource:
    """Templates in a file system directory."""
    file_path: str


@dataclass(frozen=True)
class WebAppResource:
    """Templates relative to the web application root."""
    relative_path: str


@dataclass(frozen=True)
class Composite:
    """
    Several template sources consulted in the listed order.

    Each child is a full parse result, so it keeps its own settings clause.
    """
    children: Tuple["ParsedTemplatePath", ...]

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator["ParsedTemplatePath"]:
        return iter(self.children)


PathSpec = Union[ClassResource, FileResource, WebAppResource, Composite]


@dataclass(frozen=True)
class SettingsClause:
    """
    Location of a trailing ?settings(...) clause.

    Holds only offsets; the argument list itself is interpreted by a settings evaluator.
    """
    raw_path: str               # Text the clause was found in
    start: int                  # Offset of the '?'
    arg_list_start: int         # Offset just past the '(' opening the argument list

    @property
    def arguments(self) -> str:
        """Raw text between the opening '(' and the final ')'."""
        end = self.raw_path.rstrip().rfind(")")
        return self.raw_path[self.arg_list_start:end]


@dataclass(frozen=True)
class ParsedTemplatePath:
    """
    Result of parsing one template path string.

    Unpacks as (spec, settings).
    """
    spec: PathSpec
    settings: Optional[SettingsClause]
    raw: str

    def __iter__(self):
        yield self.spec
        yield self.settings


__all__ = [
    "AnchorKind",
    "ClassResource",
    "FileResource",
    "WebAppResource",
    "Composite",
    "PathSpec",
    "SettingsClause",
    "ParsedTemplatePath",
]
