"""
tplpath: parser for template path specifications.

    >>> from tplpath import parse_template_path
    >>> spec, settings = parse_template_path("class://templates?settings(encoding='latin-1')")
    >>> spec.package_path, settings.arguments
    ('/templates', "encoding='latin-1'")
"""

from .errors import TplPathUserError, TemplateNotFoundError
from .context import current_resource_anchor, resource_anchor
from .path import (
    AnchorKind,
    ClassResource,
    FileResource,
    WebAppResource,
    Composite,
    PathSpec,
    SettingsClause,
    ParsedTemplatePath,
    TemplatePathParser,
    parse_template_path,
    parse_comma_separated_list,
    parse_comma_separated_patterns,
    TemplatePathError,
)
from .loaders import TemplateLoader, TemplateLoaderFactory, create_template_loader

__all__ = [
    "TplPathUserError",
    "TemplateNotFoundError",
    "current_resource_anchor",
    "resource_anchor",
    "AnchorKind",
    "ClassResource",
    "FileResource",
    "WebAppResource",
    "Composite",
    "PathSpec",
    "SettingsClause",
    "ParsedTemplatePath",
    "TemplatePathParser",
    "parse_template_path",
    "parse_comma_separated_list",
    "parse_comma_separated_patterns",
    "TemplatePathError",
    "TemplateLoader",
    "TemplateLoaderFactory",
    "create_template_loader",
]
