from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import TplPathUserError
from .model import TemplatePathConfig

_yaml = YAML(typ="safe")


class ConfigLoadError(TplPathUserError):
    """Configuration file is missing, unreadable or invalid."""
    pass


def _read_yaml_map(path: Path) -> dict:
    """Read a YAML file that must contain a mapping."""
    if not path.is_file():
        raise ConfigLoadError(f"Config file not found: {path}")
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigLoadError(f"YAML must be a mapping: {path}")
    return raw


def load_config(path: Path) -> TemplatePathConfig:
    """
    Load and validate tplpath.yaml.

    A relative webapp_root is resolved against the config file's directory.

    Raises:
        ConfigLoadError: On missing file, bad YAML or validation failure
    """
    raw = _read_yaml_map(path)
    try:
        cfg = TemplatePathConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid config {path}:\n{e}") from e

    if cfg.webapp_root is not None and not cfg.webapp_root.is_absolute():
        cfg = cfg.model_copy(update={"webapp_root": (path.parent / cfg.webapp_root).resolve()})
    return cfg


__all__ = ["ConfigLoadError", "load_config"]
