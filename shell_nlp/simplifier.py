"""Simplification Engine

Rewrites a free text request into a canonical token string by repeatedly
matching the front of the remaining text against the simplification rules:
- the first matching rule wins, its replacement (if any) becomes a token
- if no rule matches, the first word is kept verbatim
- tokens are joined with single spaces"""

import logging
import re
from typing import Iterator, NamedTuple, Optional, Sequence

from .rules import SimplificationRule


logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


class RewriteStep(NamedTuple):
    """One step of the rewrite: the rule that fired (None when a word was kept),
    the token it produced (None when nothing was emitted) and the text left over."""

    rule: Optional[SimplificationRule]
    token: Optional[str]
    remaining: str


def find_rule(text: str, rules: Sequence[SimplificationRule], whole_words: bool = False) -> Optional[SimplificationRule]:
    for rule in rules:
        if rule.matches(text, whole_words):
            return rule
    return None


def iter_rewrites(text: str, rules: Sequence[SimplificationRule], whole_words: bool = False) -> Iterator[RewriteStep]:
    """Lazily rewrites text left to right.
    Takes in:
    text: raw request
    rules: simplification rules in priority order
    whole_words: only let a rule match a complete leading phrase
    Gives back:
    one RewriteStep per consumed piece of text"""
    remaining = text or ""

    while remaining:
        rule = find_rule(remaining, rules, whole_words)

        if rule is None:
            pieces = _WHITESPACE.split(remaining, maxsplit=1)
            word = pieces[0].strip()
            remaining = pieces[1] if len(pieces) > 1 else ""
            yield RewriteStep(None, word or None, remaining)
            continue

        # the phrase and one separator character are consumed
        remaining = remaining[len(rule.source) + 1:]
        token = rule.target.strip() or None
        yield RewriteStep(rule, token, remaining)


def simplify(text: str, rules: Sequence[SimplificationRule], whole_words: bool = False) -> str:
    """Reduces text to its canonical form.

    >>> from shell_nlp.rules import SIMPLIFICATION_RULES
    >>> simplify("please switch directory to C:\\\\temp", SIMPLIFICATION_RULES)
    'change directory C:\\\\temp'
    """
    tokens = []
    for step in iter_rewrites(text, rules, whole_words):
        if step.rule is not None:
            logger.debug("rule %r -> %r, left %r", step.rule.source, step.rule.target, step.remaining)
        if step.token is not None:
            tokens.append(step.token)

    canonical = " ".join(tokens)
    logger.debug("simplified %r to %r", text, canonical)
    return canonical
