"""
Builds template loaders from parsed template paths and applies settings clauses.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from ..path import (
    ClassResource,
    Composite,
    EvaluatorFailureError,
    FileResource,
    ParsedTemplatePath,
    SettingsClause,
    TemplatePathParser,
    TrailingContentError,
    WebAppResource,
)
from ..path.parser import DEFAULT_REFERENCE_ANCHOR
from ..settings import LiteralSettingsEvaluator, SettingsEvaluator
from ..version import DEFAULT_INCOMPATIBLE_IMPROVEMENTS, VersionLike
from .base import TemplateLoader
from .file import FileTemplateLoader
from .multi import MultiTemplateLoader
from .package import PackageTemplateLoader
from .webapp import WebAppTemplateLoader

logger = logging.getLogger(__name__)


class TemplateLoaderFactory:
    """
    Turns ParsedTemplatePath trees into TemplateLoader objects.

    Composite children are built first, in order, each with its own settings applied.
    """

    def __init__(
        self,
        *,
        webapp_root: Union[str, Path, None] = None,
        evaluator: Optional[SettingsEvaluator] = None,
    ):
        """
        Args:
            webapp_root: Root for relative (web application) template paths; defaults to cwd
            evaluator: Applies ?settings(...) clauses; defaults to LiteralSettingsEvaluator
        """
        self.webapp_root = Path(webapp_root) if webapp_root is not None else Path.cwd()
        self.evaluator: SettingsEvaluator = evaluator or LiteralSettingsEvaluator()

    def build(self, parsed: ParsedTemplatePath) -> TemplateLoader:
        """
        Build the loader for a parsed template path.

        Raises:
            EvaluatorFailureError: Settings could not be applied
            TrailingContentError: Text remains after the settings clause
        """
        spec = parsed.spec
        loader: TemplateLoader
        if isinstance(spec, ClassResource):
            loader = PackageTemplateLoader(spec.anchor, spec.package_path)
        elif isinstance(spec, FileResource):
            loader = FileTemplateLoader(spec.file_path)
        elif isinstance(spec, WebAppResource):
            loader = WebAppTemplateLoader(self.webapp_root, spec.relative_path)
        elif isinstance(spec, Composite):
            loader = MultiTemplateLoader([self.build(child) for child in spec.children])
        else:
            raise TypeError(f"Unsupported path spec: {spec!r}")

        if parsed.settings is not None:
            self._apply_settings(parsed.settings, loader)

        logger.debug("Built %r for %r", loader, parsed.raw)
        return loader

    def _apply_settings(self, clause: SettingsClause, loader: TemplateLoader) -> None:
        try:
            end = self.evaluator.configure(clause.raw_path, clause.arg_list_start, loader)
        except Exception as e:
            raise EvaluatorFailureError(f"Failed to set properties ({e})", clause.raw_path) from e

        if end != len(clause.raw_path):
            raise TrailingContentError(
                "Template path should end after the setting list", clause.raw_path, end
            )


def create_template_loader(
    template_path: str,
    *,
    incompatible_improvements: VersionLike = DEFAULT_INCOMPATIBLE_IMPROVEMENTS,
    reference_anchor: str = DEFAULT_REFERENCE_ANCHOR,
    webapp_root: Union[str, Path, None] = None,
    evaluator: Optional[SettingsEvaluator] = None,
) -> TemplateLoader:
    """
    Parse a template path and build its loader in one call.

    Example:
        loader = create_template_loader("[file:///srv/tpl, classpath:templates]")
        text = loader.read_template("index.html")
    """
    parser = TemplatePathParser(
        incompatible_improvements=incompatible_improvements,
        reference_anchor=reference_anchor,
    )
    factory = TemplateLoaderFactory(webapp_root=webapp_root, evaluator=evaluator)
    return factory.build(parser.parse(template_path))


__all__ = ["TemplateLoaderFactory", "create_template_loader"]
