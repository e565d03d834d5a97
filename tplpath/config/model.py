from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Pattern

from pydantic import BaseModel, ConfigDict, field_validator

from ..path import parse_comma_separated_patterns
from ..path.parser import DEFAULT_REFERENCE_ANCHOR
from ..version import DEFAULT_INCOMPATIBLE_IMPROVEMENTS, version_int


class TemplatePathConfig(BaseModel):
    """Contents of tplpath.yaml."""
    model_config = ConfigDict(extra="forbid")

    template_path: str
    incompatible_improvements: str = DEFAULT_INCOMPATIBLE_IMPROVEMENTS
    reference_anchor: str = DEFAULT_REFERENCE_ANCHOR
    webapp_root: Optional[Path] = None
    # Comma separated regular expressions; template names matching any of them are not served
    exclude_patterns: str = ""

    @field_validator("incompatible_improvements", mode="before")
    @classmethod
    def _check_version(cls, v):
        v = str(v)
        version_int(v)
        return v

    @field_validator("exclude_patterns")
    @classmethod
    def _check_patterns(cls, v: str) -> str:
        # Raises RegexSyntaxError / MalformedListError directly (user errors)
        parse_comma_separated_patterns(v)
        return v

    def compiled_exclude_patterns(self) -> List[Pattern[str]]:
        return parse_comma_separated_patterns(self.exclude_patterns)

    def is_excluded(self, name: str) -> Optional[str]:
        """First exclude pattern (in listed order) matching name, or None."""
        for pattern in self.compiled_exclude_patterns():
            if pattern.search(name):
                return pattern.pattern
        return None


__all__ = ["TemplatePathConfig"]
