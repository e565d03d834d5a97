from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence

from .base import TemplateLoader, TemplateSource

logger = logging.getLogger(__name__)


class MultiTemplateLoader(TemplateLoader):
    """
    Consults several loaders in order; the first one that finds the template wins.

    With sticky enabled, a name found by some child is looked up in that child
    first on later calls. Templates are decoded by the child that found them,
    so the composite itself has no encoding.
    """

    SETTABLE = {"sticky": (bool,)}

    def __init__(self, loaders: Sequence[TemplateLoader]):
        self.loaders = list(loaders)
        self.sticky: bool = True
        self._last_hit: Dict[str, TemplateLoader] = {}

    def find_template_source(self, name: str) -> Optional[TemplateSource]:
        if self.sticky:
            last = self._last_hit.get(name)
            if last is not None:
                source = last.find_template_source(name)
                if source is not None:
                    return source
                del self._last_hit[name]

        for loader in self.loaders:
            source = loader.find_template_source(name)
            if source is not None:
                logger.debug("%r found by %r", name, loader)
                if self.sticky:
                    self._last_hit[name] = loader
                return source
        return None

    def reset_state(self) -> None:
        """Forget the sticky lookups."""
        self._last_hit.clear()

    def _read_bytes(self, source: TemplateSource) -> bytes:
        return source.loader._read_bytes(source)

    def __repr__(self) -> str:
        return f"MultiTemplateLoader({self.loaders!r})"


__all__ = ["MultiTemplateLoader"]
