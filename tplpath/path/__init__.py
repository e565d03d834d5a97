"""
Template path specifications.

Parses strings like "[file:///srv/tpl, classpath:templates?settings(encoding='latin-1')]"
into a typed tree describing where template sources are loaded from.
"""

from .model import (
    AnchorKind,
    ClassResource,
    FileResource,
    WebAppResource,
    Composite,
    PathSpec,
    SettingsClause,
    ParsedTemplatePath,
)

from .lists import parse_comma_separated_list, parse_comma_separated_patterns

from .suffix import SETTINGS_CLAUSE_NAME, find_settings_start

from .parser import (
    PREFIX_CLASS,
    PREFIX_CLASSPATH,
    PREFIX_FILE,
    DEFAULT_REFERENCE_ANCHOR,
    TemplatePathParser,
    normalize_to_absolute_package_path,
    parse_template_path,
)

from .errors import (
    TemplatePathError,
    UnterminatedListError,
    ReservedSyntaxError,
    UnexpectedClauseNameError,
    TrailingContentError,
    MalformedListError,
    EvaluatorFailureError,
    RegexSyntaxError,
)


__all__ = [
    # Types
    "AnchorKind",
    "ClassResource",
    "FileResource",
    "WebAppResource",
    "Composite",
    "PathSpec",
    "SettingsClause",
    "ParsedTemplatePath",

    # Lists
    "parse_comma_separated_list",
    "parse_comma_separated_patterns",

    # Settings clause
    "SETTINGS_CLAUSE_NAME",
    "find_settings_start",

    # Parser
    "PREFIX_CLASS",
    "PREFIX_CLASSPATH",
    "PREFIX_FILE",
    "DEFAULT_REFERENCE_ANCHOR",
    "TemplatePathParser",
    "normalize_to_absolute_package_path",
    "parse_template_path",

    # Exceptions
    "TemplatePathError",
    "UnterminatedListError",
    "ReservedSyntaxError",
    "UnexpectedClauseNameError",
    "TrailingContentError",
    "MalformedListError",
    "EvaluatorFailureError",
    "RegexSyntaxError",
]
