from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .base import TemplateSource
from .file import FileTemplateLoader


class WebAppTemplateLoader(FileTemplateLoader):
    """Loads templates from a directory relative to the web application root."""

    def __init__(self, webapp_root: Union[str, Path], relative_path: str):
        self.webapp_root = Path(webapp_root)
        self.relative_path = relative_path
        super().__init__(self.webapp_root / relative_path.strip("/"))

    def find_template_source(self, name: str) -> Optional[TemplateSource]:
        if not self.base_dir.resolve().is_relative_to(self.webapp_root.resolve()):
            return None
        return super().find_template_source(name)

    def __repr__(self) -> str:
        return f"WebAppTemplateLoader(webapp_root={str(self.webapp_root)!r}, relative_path={self.relative_path!r})"


__all__ = ["WebAppTemplateLoader"]
