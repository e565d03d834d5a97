"""
Evaluation of ?settings(...) clauses.
"""

from .errors import SettingsEvaluationError, SettingsSyntaxError
from .lexer import SettingsLexer, Token
from .evaluator import SettingsEvaluator, LiteralSettingsEvaluator

__all__ = [
    "SettingsEvaluationError",
    "SettingsSyntaxError",
    "SettingsLexer",
    "Token",
    "SettingsEvaluator",
    "LiteralSettingsEvaluator",
]
