"""
Configuration loading for tplpath.
"""

from __future__ import annotations

from .model import TemplatePathConfig
from .load import ConfigLoadError, load_config
from .paths import CONFIG_FILE, config_path

__all__ = [
    "TemplatePathConfig",
    "ConfigLoadError",
    "load_config",
    "CONFIG_FILE",
    "config_path",
]
