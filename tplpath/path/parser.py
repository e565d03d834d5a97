"""
Parser for template path specifications.

Grammar (informal):

    template_path  → pure_path [ "?" "settings" "(" args ")" ]
    pure_path      → "class://" package_path
                   | "classpath:" package_path
                   | "file://" file_path
                   | "[" template_path ("," template_path)* [","] "]"
                   | "{" ...                      (reserved, always an error)
                   | relative_path                (relative to the web application root)

'[' and '{' are recognized only from COMPOSITE_SYNTAX_VERSION on.
Only syntactic parsing: loaders are built and settings applied elsewhere.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..context import current_resource_anchor
from ..version import DEFAULT_INCOMPATIBLE_IMPROVEMENTS, VersionLike, composite_syntax_enabled
from .errors import MalformedListError, ReservedSyntaxError, UnterminatedListError
from .lists import parse_comma_separated_list
from .model import (
    AnchorKind,
    ClassResource,
    Composite,
    FileResource,
    ParsedTemplatePath,
    PathSpec,
    SettingsClause,
    WebAppResource,
)
from .suffix import find_settings_start

logger = logging.getLogger(__name__)

PREFIX_CLASS = "class://"
PREFIX_CLASSPATH = "classpath:"
PREFIX_FILE = "file://"

DEFAULT_REFERENCE_ANCHOR = "tplpath"


def normalize_to_absolute_package_path(path: str) -> str:
    """Strip all leading '/' and prepend exactly one."""
    return "/" + path.lstrip("/")


class TemplatePathParser:
    """
    Parser for template path strings.

    Transforms a template path string into a ParsedTemplatePath tree.
    """

    def __init__(
        self,
        *,
        incompatible_improvements: VersionLike = DEFAULT_INCOMPATIBLE_IMPROVEMENTS,
        reference_anchor: str = DEFAULT_REFERENCE_ANCHOR,
        context_lookup: Callable[[], Optional[str]] = current_resource_anchor,
    ):
        """
        Initialize parser.

        Args:
            incompatible_improvements: Compatibility level; gates '[' and '{' syntax
            reference_anchor: Package used by 'class://' and as 'classpath:' fallback
            context_lookup: Returns the execution context's anchor, or None if unavailable
        """
        self.composite_enabled = composite_syntax_enabled(incompatible_improvements)
        self.reference_anchor = reference_anchor
        self._context_lookup = context_lookup

    def parse(self, raw: str) -> ParsedTemplatePath:
        """
        Parse a template path string.

        Args:
            raw: Template path, optionally ending in ?settings(...)

        Returns:
            Parsed path spec with the located settings clause (if any)

        Raises:
            TemplatePathError: On any syntax error
        """
        settings_start = find_settings_start(raw)
        if settings_start == -1:
            pure_path = raw.strip()
        else:
            pure_path = raw[:settings_start].strip()

        spec = self._classify(pure_path)

        settings: Optional[SettingsClause] = None
        if settings_start != -1:
            paren = raw.index("(", settings_start)
            settings = SettingsClause(raw_path=raw, start=settings_start, arg_list_start=paren + 1)

        return ParsedTemplatePath(spec=spec, settings=settings, raw=raw)

    def _classify(self, pure_path: str) -> PathSpec:
        """Decide which kind of template source the pure path denotes."""
        if pure_path.startswith(PREFIX_CLASS):
            package_path = normalize_to_absolute_package_path(pure_path[len(PREFIX_CLASS):])
            spec: PathSpec = ClassResource(AnchorKind.EXPLICIT, self.reference_anchor, package_path)
        elif pure_path.startswith(PREFIX_CLASSPATH):
            # Like Spring resource paths, "//" is not required here
            package_path = normalize_to_absolute_package_path(pure_path[len(PREFIX_CLASSPATH):])
            spec = self._classpath_resource(package_path)
        elif pure_path.startswith(PREFIX_FILE):
            spec = FileResource(pure_path[len(PREFIX_FILE):])
        elif pure_path.startswith("[") and self.composite_enabled:
            spec = self._parse_composite(pure_path)
        elif pure_path.startswith("{") and self.composite_enabled:
            raise ReservedSyntaxError(
                "Template paths starting with \"{\" are reserved for future purposes", pure_path, 0
            )
        else:
            spec = WebAppResource(pure_path)

        logger.debug("Classified %r as %s", pure_path, type(spec).__name__)
        return spec

    def _classpath_resource(self, package_path: str) -> ClassResource:
        anchor = self._context_lookup()
        if anchor is None:
            logger.warning(
                "No resource anchor is set in the current context. Falling back to %r.",
                self.reference_anchor,
            )
            return ClassResource(AnchorKind.EXPLICIT, self.reference_anchor, package_path)
        return ClassResource(AnchorKind.CONTEXT, anchor, package_path)

    def _parse_composite(self, pure_path: str) -> Composite:
        """Parse [item, item, ...]; every item is a full template path."""
        if not pure_path.endswith("]"):
            raise UnterminatedListError("Failed to parse template path; closing \"]\" is missing", pure_path)

        try:
            items = parse_comma_separated_list(pure_path[1:-1])
        except MalformedListError as e:
            raise MalformedListError(f"Failed to parse template path; {e.message}", pure_path) from e

        return Composite(tuple(self.parse(item) for item in items))


def parse_template_path(
    raw: str,
    *,
    incompatible_improvements: VersionLike = DEFAULT_INCOMPATIBLE_IMPROVEMENTS,
    reference_anchor: str = DEFAULT_REFERENCE_ANCHOR,
) -> ParsedTemplatePath:
    """Shortcut for TemplatePathParser(...).parse(raw)."""
    parser = TemplatePathParser(
        incompatible_improvements=incompatible_improvements,
        reference_anchor=reference_anchor,
    )
    return parser.parse(raw)


__all__ = [
    "PREFIX_CLASS",
    "PREFIX_CLASSPATH",
    "PREFIX_FILE",
    "DEFAULT_REFERENCE_ANCHOR",
    "TemplatePathParser",
    "normalize_to_absolute_package_path",
    "parse_template_path",
]
