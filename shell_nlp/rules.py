"""Rule Tables Module

Holds the two rule tables used by the natural language shell:
- simplification rules: leading phrase rewrites (synonyms, stop words)
- translation rules: canonical phrase patterns mapped to DOS commands

Both tables are built once at import time, validated eagerly and never
mutated afterwards."""

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from .exceptions import RuleTableError


QUIT = "quit"


@dataclass(frozen=True)
class SimplificationRule:
    """Replace the leading phrase `source` with `target` (case-insensitive).

    An empty target drops the phrase altogether."""

    source: str
    target: str = ""

    def __post_init__(self):
        if not isinstance(self.source, str) or not isinstance(self.target, str):
            raise RuleTableError(f"Simplification rule fields must be strings: {self!r}")
        if not self.source:
            raise RuleTableError(f"Simplification rule has an empty phrase (target {self.target!r})")

    def matches(self, text: str, whole_words: bool = False) -> bool:
        """Checks whether text starts with this rule's phrase.
        Takes in:
        text: remaining input
        whole_words: also require whitespace or end of text after the phrase
        Gives back:
        true if the rule applies to the front of text"""
        size = len(self.source)
        if text[:size].lower() != self.source.lower():
            return False
        if whole_words and len(text) > size and not text[size].isspace():
            return False
        return True

    @property
    def is_stop(self) -> bool:
        return not self.target.strip()


@dataclass(frozen=True)
class TranslationRule:
    """Full-string pattern mapped to a command template.

    Capture groups are substituted positionally: group 1 -> {0}, group 2 -> {1}."""

    pattern: str
    template: str
    example: Optional[str] = None
    regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.pattern, str) or not isinstance(self.template, str):
            raise RuleTableError(f"Translation rule fields must be strings: {self!r}")
        try:
            compiled = re.compile(self.pattern, re.IGNORECASE)
        except re.error as exc:
            raise RuleTableError(f"Invalid translation pattern {self.pattern!r}: {exc}") from exc
        object.__setattr__(self, "regex", compiled)

    def match(self, canonical: str):
        return self.regex.fullmatch(canonical)

    def render(self, canonical: str) -> Optional[str]:
        """Builds the command for canonical, or None if the pattern does not match."""
        found = self.match(canonical)
        if found is None:
            return None
        return self.template.format(*found.groups(default=""))


# equivalent phrases - like synonyms
EQUIVALENT_PHRASES = [
    ("directory to", "directory"),
    ("disk in drive", "drive"),
    ("disk in", "drive"),
    ("what files", "files"),
    ("everything", "all files"),
    ("any files", "all files"),
    ("files contents", "contents files"),
    ("to make", "make"),
    ("to remove", "remove"),
    ("to change", "change"),
    ("to copy", "copy"),
    ("to show", "show"),
]

# synonyms - equivalent words
SYNONYMS = [
    ("disk", "drive"),
    ("file", "files"),
    ("every", "all"),
    ("content", "contents"),
    ("in", "on"),
    ("create", "make"),
    ("delete", "remove"),
    ("switch", "change"),
    ("bye", QUIT),
    ("exit", QUIT),
    ("running", "using"),
    ("path", "directory"),
]

STOP_PHRASES = [
    "i would", "can i", "can you", "could i", "could you", "would you",
    "will you", "give me", "like you to", "like to", "am i", "i am",
]

STOP_WORDS = [
    "please", "me", "the", "is", "are", "a", "there", "these", "any",
    "like", "of", "see", "list", "show", "tell", "what", "which", "you",
]


TRANSLATIONS = [
    (r"^quit$", QUIT, "bye"),
    (r"^all files on drive (.+)$", "dir {0}:", "show me everything on disk C"),
    (r"^(.+?) files on drive (.+)$", "dir {1}:*.{0}", "list the txt files on drive D"),
    (r"^copy files from (.+?) to (.+)$", "copy {0} {1}", "copy files from report.txt to backup"),
    (r"^files on directory (.+)$", "dir {0}", "what files are in directory projects"),
    (r"^contents files (.+)$", "c:\\windows\\system32\\more {0}", "show the contents of file notes.txt"),
    (r"^current directory$", "cd", "what is the current directory"),
    (r"^change directory (.+)$", "cd {0}", "please switch directory to C:\\temp"),
    (r"^make directory (.+)$", "mkdir {0}", "could you create the directory reports"),
    (r"^remove directory (.+)$", "rmdir {0}", "delete the directory reports"),
    (r"^os using$", "ver", "what os am i running"),
]


def priority_key(indexed_rule: Tuple[int, SimplificationRule]):
    """Longest phrase first, then longest replacement, then declaration order."""
    index, rule = indexed_rule
    return (-len(rule.source), -len(rule.target), index)


def order_simplification_rules(rules: Iterable[SimplificationRule]) -> Tuple[SimplificationRule, ...]:
    """Orders rules so that no short phrase can shadow a longer one sharing its prefix.
    Takes in:
    rules: rules in declaration order
    Gives back:
    tuple of rules in matching priority order"""
    return tuple(rule for _, rule in sorted(enumerate(rules), key=priority_key))


def build_simplification_rules(
    equivalent_phrases=EQUIVALENT_PHRASES,
    synonyms=SYNONYMS,
    stop_phrases=STOP_PHRASES,
    stop_words=STOP_WORDS,
) -> Tuple[SimplificationRule, ...]:
    """Builds the ordered simplification table from its four tiers."""
    declared = [SimplificationRule(source, target) for source, target in equivalent_phrases]
    declared += [SimplificationRule(source, target) for source, target in synonyms]
    declared += [SimplificationRule(phrase) for phrase in stop_phrases]
    declared += [SimplificationRule(word) for word in stop_words]
    return order_simplification_rules(declared)


def build_translation_rules(translations=TRANSLATIONS) -> Tuple[TranslationRule, ...]:
    """Builds the translation table, compiling every pattern up front.

    Raises RuleTableError on the first invalid entry so no partial table exists."""
    rules = []
    for entry in translations:
        if len(entry) not in (2, 3):
            raise RuleTableError(f"Translation entry needs a pattern and a template: {entry!r}")
        rules.append(TranslationRule(*entry))
    return tuple(rules)


SIMPLIFICATION_RULES = build_simplification_rules()
TRANSLATION_RULES = build_translation_rules()
