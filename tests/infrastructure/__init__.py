"""
Shared test infrastructure for tplpath.

Modules:
- file_utils: Utilities for creating files and directories
- cli_utils: Running the CLI in a subprocess
- evaluators: Test doubles for settings evaluators
"""

from .file_utils import write, write_bytes
from .cli_utils import run_cli, jload
from .evaluators import RecordingEvaluator, FixedEndEvaluator, FailingEvaluator

__all__ = [
    "write",
    "write_bytes",
    "run_cli",
    "jload",
    "RecordingEvaluator",
    "FixedEndEvaluator",
    "FailingEvaluator",
]
