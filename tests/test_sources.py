"""Tests for file-system document sources."""

from __future__ import annotations

from pathlib import Path

import pytest

from naive_spam.exceptions import DocumentReadError
from naive_spam.models import Label
from naive_spam.sources import iter_directory, iter_files, iter_labeled_corpus, read_document


class TestReadDocument:

    def test_reads_utf8(self, tmp_path: Path):
        path = tmp_path / "msg.txt"
        path.write_text("Grüße aus Köln", encoding="utf-8")
        assert read_document(path) == "Grüße aus Köln"

    def test_invalid_bytes_are_replaced(self, tmp_path: Path):
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"caf\xe9 free")
        assert read_document(path) == "caf\ufffd free"

    def test_missing_file(self, tmp_path: Path):
        missing = tmp_path / "nope.txt"
        with pytest.raises(DocumentReadError) as excinfo:
            read_document(missing)
        assert excinfo.value.source == str(missing)

    def test_directory_is_not_readable(self, tmp_path: Path):
        with pytest.raises(DocumentReadError):
            read_document(tmp_path)


class TestIterFiles:

    def test_recursive_and_sorted(self, tmp_path: Path):
        (tmp_path / "b").mkdir()
        (tmp_path / "b" / "2.txt").write_text("x")
        (tmp_path / "a.txt").write_text("y")
        (tmp_path / "b" / "1.txt").write_text("z")
        names = [p.relative_to(tmp_path).as_posix() for p in iter_files(tmp_path)]
        assert names == ["a.txt", "b/1.txt", "b/2.txt"]

    def test_missing_root(self, tmp_path: Path):
        with pytest.raises(DocumentReadError, match="not a directory"):
            list(iter_files(tmp_path / "missing"))

    def test_iter_directory_defers_reading(self, tmp_path: Path):
        path = tmp_path / "msg.txt"
        path.write_text("first")
        readers = list(iter_directory(tmp_path))
        path.write_text("second")
        assert [read() for read in readers] == ["second"]


class TestIterLabeledCorpus:

    def test_yields_both_classes(self, corpus_dir: Path):
        pairs = list(iter_labeled_corpus(corpus_dir / "enron6"))
        labels = [label for label, _ in pairs]
        assert labels == [Label.HAM, Label.HAM, Label.SPAM, Label.SPAM]
        assert pairs[2][1]() == "FREE money"

    def test_missing_class_directory(self, tmp_path: Path):
        (tmp_path / "shard" / "ham").mkdir(parents=True)
        with pytest.raises(DocumentReadError):
            list(iter_labeled_corpus(tmp_path / "shard"))
