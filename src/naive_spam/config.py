"""Classifier configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigError

#: Minimum occurrence count for a word to influence totals and scores.
MIN_WORD_FREQ = 100

PRIOR_MODES = ("raw", "log")

ENV_PREFIX = "NAIVE_SPAM_"


@dataclass(frozen=True)
class ClassifierConfig:
    """Tunables for model building and scoring.

    Args:
        min_word_freq: Frequency cutoff below which a word is ignored.
        prior_mode: How the class prior enters the score. ``"raw"`` adds the
            plain probability, ``"log"`` adds its natural logarithm.
        workers: Thread count for corpus evaluation and training.
    """

    min_word_freq: int = MIN_WORD_FREQ
    prior_mode: str = "raw"
    workers: int = 1

    def __post_init__(self) -> None:
        if self.min_word_freq < 0:
            raise ConfigError(f"min_word_freq must be non-negative, got {self.min_word_freq}")
        if self.prior_mode not in PRIOR_MODES:
            raise ConfigError(
                f"Unknown prior_mode {self.prior_mode!r}. Known: {', '.join(PRIOR_MODES)}"
            )
        if self.workers < 1:
            raise ConfigError(f"workers must be at least 1, got {self.workers}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClassifierConfig":
        """Build a config from ``NAIVE_SPAM_*`` environment variables.

        Unset variables keep their defaults.

        Raises:
            ConfigError: If a variable holds a malformed value.
        """
        env = os.environ if environ is None else environ
        kwargs: dict = {}

        for name, key, convert in (
            ("min_word_freq", "MIN_WORD_FREQ", int),
            ("prior_mode", "PRIOR_MODE", str),
            ("workers", "WORKERS", int),
        ):
            raw = env.get(ENV_PREFIX + key)
            if raw is None or raw == "":
                continue
            try:
                kwargs[name] = convert(raw.strip())
            except ValueError as e:
                raise ConfigError(f"Invalid {ENV_PREFIX + key}={raw!r}: {e}") from e

        return cls(**kwargs)
