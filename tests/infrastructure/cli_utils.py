"""
Utilities for working with CLI in tests.
"""

import json
import os
import re
import subprocess
import sys
from pathlib import Path


def run_cli(root: Path, *args: str) -> subprocess.CompletedProcess:
    """
    Runs tplpath.cli with specified arguments in the given directory.

    Args:
        root: Working directory for command execution
        *args: Command line arguments for tplpath.cli

    Returns:
        CompletedProcess with execution results
    """
    env = os.environ.copy()
    # The package is importable from the repository root even when not installed
    repo_root = str(Path(__file__).resolve().parents[2])
    env["PYTHONPATH"] = os.pathsep.join(p for p in (repo_root, env.get("PYTHONPATH")) if p)
    return subprocess.run(
        [sys.executable, "-m", "tplpath.cli", *args],
        cwd=root, env=env, capture_output=True, text=True, encoding="utf-8"
    )


def jload(s: str):
    """
    Parses a JSON string, automatically removing ANSI escape codes.

    Some IDEs may add ANSI escape sequences to subprocess output;
    they are removed before parsing.
    """
    clean = re.sub(r'\x1b\[[0-9;]*m', '', s)
    return json.loads(clean)


__all__ = ["run_cli", "jload"]
