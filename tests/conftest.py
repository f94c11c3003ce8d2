"""Shared test fixtures for naive-spam tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from naive_spam.vocabulary import VocabularyModel


def _write(directory: Path, files: dict[str, str]) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    for name, text in files.items():
        (directory / name).write_text(text, encoding="utf-8")


@pytest.fixture
def overlapping_model() -> VocabularyModel:
    """Model where the frequent words of each class also occur in the other.

    ham_total = 300 + 250 = 550, spam_total = 400 + 350 = 750.
    """
    return VocabularyModel.from_bags(
        ham={"HELLO": 300, "MEETING": 250, "FREE": 20, "MONEY": 30},
        spam={"FREE": 400, "MONEY": 350, "HELLO": 10, "MEETING": 5},
    )


@pytest.fixture
def disjoint_model() -> VocabularyModel:
    """Model whose classes share no words (ham_total = 270, spam_total = 380)."""
    return VocabularyModel.from_bags(
        ham={"HELLO": 150, "MEETING": 120},
        spam={"FREE": 200, "MONEY": 180},
    )


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """Enron-style corpus: one training shard and one test shard.

    Training counts per class: 150 for each of its four words, plus 3 stray
    occurrences of one word from the other class. Both totals are 600.
    """
    data = tmp_path / "data"
    ham_text = "hello meeting schedule project " * 50 + "money"
    spam_text = "free money winner offer " * 50 + "hello"
    _write(data / "enron1" / "ham", {f"{i}.ham.txt": ham_text for i in range(3)})
    _write(data / "enron1" / "spam", {f"{i}.spam.txt": spam_text for i in range(3)})
    _write(data / "enron6" / "ham", {
        "a.ham.txt": "Hello meeting",
        "b.ham.txt": "schedule\nhello",
    })
    _write(data / "enron6" / "spam", {
        "a.spam.txt": "FREE money",
        "b.spam.txt": "winner\tmoney",
    })
    return data
