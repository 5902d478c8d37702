"""Natural language front end for the Windows command shell."""

from .command_agent import CommandAgent, Interpretation
from .exceptions import RuleTableError, ShellNLPError
from .rules import (
    QUIT,
    SIMPLIFICATION_RULES,
    TRANSLATION_RULES,
    SimplificationRule,
    TranslationRule,
    build_simplification_rules,
    build_translation_rules,
)
from .simplifier import simplify
from .translator import translate

__all__ = [
    "CommandAgent",
    "Interpretation",
    "QUIT",
    "RuleTableError",
    "SIMPLIFICATION_RULES",
    "ShellNLPError",
    "SimplificationRule",
    "TRANSLATION_RULES",
    "TranslationRule",
    "build_simplification_rules",
    "build_translation_rules",
    "simplify",
    "translate",
]
