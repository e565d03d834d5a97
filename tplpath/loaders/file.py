from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from .base import TemplateLoader, TemplateSource, normalize_template_name


class FileTemplateLoader(TemplateLoader):
    """
    Loads templates from a directory of the file system.

    Templates outside base_dir (via '..' or symlinks) are never served.
    """

    SETTABLE = {
        "encoding": (str,),
        "emulate_case_sensitive_file_system": (bool,),
    }

    def __init__(self, base_dir: Union[str, Path]):
        self.base_dir = Path(base_dir)
        self.encoding: str = "utf-8"
        # On case-insensitive file systems, require the on-disk case to match the name
        self.emulate_case_sensitive_file_system: bool = False

    def find_template_source(self, name: str) -> Optional[TemplateSource]:
        rel = normalize_template_name(name)
        if rel is None:
            return None

        base = self.base_dir.resolve()
        path = base / rel
        if not path.is_file():
            return None
        if not path.resolve().is_relative_to(base):
            return None
        if self.emulate_case_sensitive_file_system and not self._case_matches(base, rel):
            return None

        return TemplateSource(loader=self, name=rel, location=str(path))

    @staticmethod
    def _case_matches(base: Path, rel: str) -> bool:
        current = base
        for part in rel.split("/"):
            if part not in os.listdir(current):
                return False
            current = current / part
        return True

    def _read_bytes(self, source: TemplateSource) -> bytes:
        return Path(source.location).read_bytes()

    def __repr__(self) -> str:
        return f"FileTemplateLoader(base_dir={str(self.base_dir)!r})"


__all__ = ["FileTemplateLoader"]
