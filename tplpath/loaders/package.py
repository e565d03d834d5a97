from __future__ import annotations

import logging
from importlib import resources
from importlib.resources.abc import Traversable
from typing import Optional

from .base import TemplateLoader, TemplateSource, normalize_template_name

logger = logging.getLogger(__name__)


class PackageTemplateLoader(TemplateLoader):
    """
    Loads templates packaged as resources of a Python package.

    Args:
        anchor: Importable package name (e.g. "myapp")
        package_path: Absolute resource directory inside the package (e.g. "/templates")
    """

    SETTABLE = {"encoding": (str,)}

    def __init__(self, anchor: str, package_path: str):
        self.anchor = anchor
        self.package_path = package_path
        self.encoding: str = "utf-8"

    def _root(self) -> Optional[Traversable]:
        try:
            root = resources.files(self.anchor)
        except (ModuleNotFoundError, TypeError) as e:
            logger.debug("Resource anchor %r is not available: %s", self.anchor, e)
            return None
        for part in self.package_path.strip("/").split("/"):
            if part:
                root = root.joinpath(part)
        return root

    def find_template_source(self, name: str) -> Optional[TemplateSource]:
        rel = normalize_template_name(name)
        if rel is None:
            return None
        root = self._root()
        if root is None:
            return None

        resource = root
        for part in rel.split("/"):
            resource = resource.joinpath(part)
        if not resource.is_file():
            return None

        location = f"{self.anchor}:{self.package_path.rstrip('/')}/{rel}"
        return TemplateSource(loader=self, name=rel, location=location)

    def _read_bytes(self, source: TemplateSource) -> bytes:
        root = self._root()
        if root is None:
            raise FileNotFoundError(source.location)
        resource = root
        for part in source.name.split("/"):
            resource = resource.joinpath(part)
        return resource.read_bytes()

    def __repr__(self) -> str:
        return f"PackageTemplateLoader(anchor={self.anchor!r}, package_path={self.package_path!r})"


__all__ = ["PackageTemplateLoader"]
