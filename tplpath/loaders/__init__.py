"""
Template loaders built from template path specifications.
"""

from .base import TemplateLoader, TemplateSource, normalize_template_name
from .file import FileTemplateLoader
from .package import PackageTemplateLoader
from .webapp import WebAppTemplateLoader
from .multi import MultiTemplateLoader
from .factory import TemplateLoaderFactory, create_template_loader

__all__ = [
    "TemplateLoader",
    "TemplateSource",
    "normalize_template_name",
    "FileTemplateLoader",
    "PackageTemplateLoader",
    "WebAppTemplateLoader",
    "MultiTemplateLoader",
    "TemplateLoaderFactory",
    "create_template_loader",
]
