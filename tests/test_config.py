"""Tests for classifier configuration."""

from __future__ import annotations

import pytest

from naive_spam.config import MIN_WORD_FREQ, ClassifierConfig
from naive_spam.exceptions import ConfigError


class TestClassifierConfig:

    def test_defaults(self):
        config = ClassifierConfig()
        assert config.min_word_freq == MIN_WORD_FREQ == 100
        assert config.prior_mode == "raw"
        assert config.workers == 1

    @pytest.mark.parametrize("kwargs", [
        {"min_word_freq": -1},
        {"prior_mode": "laplace"},
        {"workers": 0},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigError):
            ClassifierConfig(**kwargs)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            ClassifierConfig(workers=-2)

    def test_from_env(self):
        config = ClassifierConfig.from_env({
            "NAIVE_SPAM_MIN_WORD_FREQ": "25",
            "NAIVE_SPAM_PRIOR_MODE": "log",
            "NAIVE_SPAM_WORKERS": " 4 ",
        })
        assert config == ClassifierConfig(min_word_freq=25, prior_mode="log", workers=4)

    def test_from_env_ignores_unset_and_empty(self):
        config = ClassifierConfig.from_env({"NAIVE_SPAM_WORKERS": "", "OTHER": "1"})
        assert config == ClassifierConfig()

    def test_from_env_malformed(self):
        with pytest.raises(ConfigError, match="NAIVE_SPAM_MIN_WORD_FREQ"):
            ClassifierConfig.from_env({"NAIVE_SPAM_MIN_WORD_FREQ": "many"})

    def test_from_env_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("NAIVE_SPAM_PRIOR_MODE", "log")
        assert ClassifierConfig.from_env().prior_mode == "log"
