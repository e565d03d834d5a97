"""
Settings evaluator doubles used by parser and factory tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Tuple


@dataclass
class RecordingEvaluator:
    """Records every call and consumes everything up to the end of the source."""
    calls: List[Tuple[str, int, Any]] = field(default_factory=list)

    def configure(self, source: str, pos: int, target: Any) -> int:
        self.calls.append((source, pos, target))
        return len(source)

    def spans(self) -> List[str]:
        """Argument text seen by each call (from pos to the final ')')."""
        return [src[pos:src.rstrip().rfind(")")] for src, pos, _ in self.calls]


@dataclass
class FixedEndEvaluator:
    """Pretends evaluation stopped at a fixed offset."""
    end: int

    def configure(self, source: str, pos: int, target: Any) -> int:
        return self.end


class FailingEvaluator:
    """Always fails with the given exception."""

    def __init__(self, exc: Exception):
        self.exc = exc

    def configure(self, source: str, pos: int, target: Any) -> int:
        raise self.exc
