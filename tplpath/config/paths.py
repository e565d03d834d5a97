from __future__ import annotations

from pathlib import Path

# Default configuration file looked up in the working directory.
CONFIG_FILE = "tplpath.yaml"


def config_path(root: Path) -> Path:
    """Path to the default configuration file under root."""
    return (root / CONFIG_FILE).resolve()
