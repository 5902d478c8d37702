"""Exceptions raised by the natural language shell."""


class ShellNLPError(Exception):
    """Base class for shell_nlp errors."""


class RuleTableError(ShellNLPError):
    """A rule table entry is malformed. Raised while the tables are built."""
