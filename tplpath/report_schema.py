"""
JSON report models printed by the CLI.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .path import (
    ClassResource,
    Composite,
    FileResource,
    ParsedTemplatePath,
    WebAppResource,
)


class SettingsReport(BaseModel):
    start: int
    arguments: str


class PathSpecReport(BaseModel):
    kind: Literal["class", "file", "webapp", "composite"]
    raw: str
    anchor_kind: Optional[str] = None
    anchor: Optional[str] = None
    package_path: Optional[str] = None
    file_path: Optional[str] = None
    relative_path: Optional[str] = None
    children: List["PathSpecReport"] = Field(default_factory=list)
    settings: Optional[SettingsReport] = None

    @classmethod
    def from_parsed(cls, parsed: ParsedTemplatePath) -> "PathSpecReport":
        spec = parsed.spec
        settings = None
        if parsed.settings is not None:
            settings = SettingsReport(start=parsed.settings.start, arguments=parsed.settings.arguments)

        if isinstance(spec, ClassResource):
            return cls(
                kind="class", raw=parsed.raw, settings=settings,
                anchor_kind=spec.anchor_kind.value, anchor=spec.anchor, package_path=spec.package_path,
            )
        if isinstance(spec, FileResource):
            return cls(kind="file", raw=parsed.raw, settings=settings, file_path=spec.file_path)
        if isinstance(spec, WebAppResource):
            return cls(kind="webapp", raw=parsed.raw, settings=settings, relative_path=spec.relative_path)
        if isinstance(spec, Composite):
            return cls(
                kind="composite", raw=parsed.raw, settings=settings,
                children=[cls.from_parsed(child) for child in spec.children],
            )
        raise TypeError(f"Unsupported path spec: {spec!r}")


class SplitReport(BaseModel):
    items: List[str]


class ResolveReport(BaseModel):
    name: str
    found: bool
    excluded_by: Optional[str] = None
    loader: Optional[str] = None
    location: Optional[str] = None


__all__ = ["SettingsReport", "PathSpecReport", "SplitReport", "ResolveReport"]
