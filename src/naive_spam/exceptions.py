"""Exception hierarchy for the spam classifier."""

from __future__ import annotations


class NaiveSpamError(Exception):
    """Base class for all errors raised by ``naive_spam``."""


class DegenerateModelError(NaiveSpamError):
    """A class total is zero, so priors and likelihoods are undefined.

    Raised when classification is attempted against a model that has no
    usable (above-threshold) word counts for one of the two classes.
    """

    def __init__(self, ham_total: int, spam_total: int) -> None:
        self.ham_total = ham_total
        self.spam_total = spam_total
        empty = [name for name, total in (("ham", ham_total), ("spam", spam_total)) if total == 0]
        super().__init__(
            f"Degenerate model: {' and '.join(empty)} total is zero "
            f"(ham_total={ham_total}, spam_total={spam_total})"
        )


class DocumentReadError(NaiveSpamError):
    """A single document could not be read or decoded."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read document {source}: {reason}")


class ConfigError(NaiveSpamError, ValueError):
    """Invalid configuration value."""
