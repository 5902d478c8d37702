"""Translation Engine

Maps a canonical token string to a shell command using the first translation
rule whose pattern matches the whole string."""

import logging
from typing import Optional, Sequence

from .rules import QUIT, TranslationRule


logger = logging.getLogger(__name__)


def find_rule(canonical: str, rules: Sequence[TranslationRule]) -> Optional[TranslationRule]:
    for rule in rules:
        if rule.match(canonical) is not None:
            return rule
    return None


def translate(canonical: str, rules: Sequence[TranslationRule]) -> Optional[str]:
    """Translate a canonical string to a command.
    Takes in:
    canonical: output of simplify()
    rules: translation rules in priority order
    Gives back:
    the command string, QUIT, or None when no rule matches"""
    rule = find_rule(canonical, rules)
    if rule is None:
        logger.debug("no translation rule for %r", canonical)
        return None

    command = rule.render(canonical)
    logger.debug("pattern %r turned %r into %r", rule.pattern, canonical, command)
    return command


def is_quit(command: Optional[str]) -> bool:
    return command == QUIT
