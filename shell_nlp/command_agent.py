"""Command Agent Module

Main agent class that:
- Owns the simplification and translation rule tables
- Simplifies a natural language request to its canonical form
- Translates the canonical form to a Windows shell command
- Suggests a known phrasing when a request is not understood"""

import logging
from typing import NamedTuple, Optional, Sequence

from .rules import QUIT, SIMPLIFICATION_RULES, TRANSLATION_RULES, SimplificationRule, TranslationRule
from .simplifier import simplify
from .suggester import PhraseSuggester
from .translator import translate


logger = logging.getLogger(__name__)


class Interpretation(NamedTuple):
    """Everything the agent worked out for one line of input."""

    text: str
    canonical: str
    command: Optional[str]
    suggestion: Optional[str] = None

    @property
    def understood(self) -> bool:
        return self.command is not None

    @property
    def is_quit(self) -> bool:
        return self.command == QUIT


class CommandAgent:
    """Translates natural language requests to shell commands."""

    def __init__(
        self,
        simplification_rules: Sequence[SimplificationRule] = SIMPLIFICATION_RULES,
        translation_rules: Sequence[TranslationRule] = TRANSLATION_RULES,
        whole_words: bool = False,
        suggest: bool = True,
    ):
        """Sets up the command agent.

        Takes in:
            simplification_rules: ordered simplification table
            translation_rules: ordered translation table
            whole_words: stop simplification phrases from matching inside longer words
            suggest: build a phrase suggester for requests that are not understood"""
        self.simplification_rules = tuple(simplification_rules)
        self.translation_rules = tuple(translation_rules)
        self.whole_words = whole_words

        self.suggester: Optional[PhraseSuggester] = None
        if suggest:
            self.suggester = PhraseSuggester(self.translation_rules, self.simplification_rules,
                                             whole_words=whole_words)

    def simplify(self, text: str) -> str:
        return simplify(text, self.simplification_rules, self.whole_words)

    def interpret(self, text: str) -> Interpretation:
        """Runs one request through both engines.
        Takes in:
        text: natural language request
        Gives back:
        Interpretation with the canonical form and the command (None if not understood)"""
        canonical = self.simplify(text)
        command = translate(canonical, self.translation_rules)

        suggestion = None
        if command is None and self.suggester is not None:
            suggestion = self.suggester.suggest(canonical)

        logger.debug("interpreted %r as %r -> %r", text, canonical, command)
        return Interpretation(text, canonical, command, suggestion)

    def translate(self, text: str) -> Optional[str]:
        """Translate natural language input to a command, or None."""
        canonical = self.simplify(text)
        return translate(canonical, self.translation_rules)
