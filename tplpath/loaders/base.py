from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Dict, Optional, Tuple

from ..errors import TemplateNotFoundError


@dataclass(frozen=True)
class TemplateSource:
    """
    A template found by a loader.

    Attributes:
        loader: Loader that found the template (the leaf loader for composites)
        name: Normalized template name
        location: Human-readable location (file path, package resource)
    """
    loader: "TemplateLoader"
    name: str
    location: str


def normalize_template_name(name: str) -> Optional[str]:
    """
    Normalize a template name to a relative POSIX path.

    Returns None for names that would leave the loader's root ('..' segments) or are empty.
    """
    parts = [p for p in PurePosixPath(name.replace("\\", "/")).parts if p not in ("/", ".")]
    if not parts or ".." in parts:
        return None
    return "/".join(parts)


class TemplateLoader(ABC):
    """
    Abstract base class for all template loaders.

    SETTABLE lists the properties a ?settings(...) clause may assign, with
    the accepted value types. Leaf loaders (those that read bytes) also carry
    a settable encoding.
    """

    SETTABLE: Dict[str, Tuple[type, ...]] = {}

    @abstractmethod
    def find_template_source(self, name: str) -> Optional[TemplateSource]:
        """
        Look up a template.

        Args:
            name: Template name, relative to the loader root

        Returns:
            Found source or None
        """
        pass

    @abstractmethod
    def _read_bytes(self, source: TemplateSource) -> bytes:
        pass

    def read_template(self, name: str) -> str:
        """
        Read template text, decoded with the leaf loader's encoding.

        Raises:
            TemplateNotFoundError: If no template exists under this name
        """
        source = self.find_template_source(name)
        if source is None:
            raise TemplateNotFoundError(name, self)
        return source.loader._read_bytes(source).decode(source.loader.encoding)


__all__ = ["TemplateSource", "TemplateLoader", "normalize_template_name"]
