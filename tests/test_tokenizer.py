"""Tests for whitespace tokenization."""

from __future__ import annotations

from naive_spam.tokenizer import tokenize


class TestTokenize:

    def test_splits_and_uppercases(self):
        assert tokenize("buy cheap meds") == ["BUY", "CHEAP", "MEDS"]

    def test_case_invariance(self):
        assert tokenize("Free Money") == tokenize("FREE MONEY") == ["FREE", "MONEY"]

    def test_runs_of_mixed_whitespace(self):
        assert tokenize("  a\tb\n\nc   d \r\n") == ["A", "B", "C", "D"]

    def test_empty_and_blank_input(self):
        assert tokenize("") == []
        assert tokenize(" \t\n ") == []

    def test_punctuation_is_kept(self):
        assert tokenize("Hello, world!") == ["HELLO,", "WORLD!"]

    def test_rejoined_output_is_stable(self):
        tokens = tokenize("Subject: meeting moved to 3pm")
        assert tokenize(" ".join(tokens)) == tokens

    def test_deterministic(self):
        text = "same input, same output"
        assert tokenize(text) == tokenize(text)

    def test_duplicates_are_preserved(self):
        assert tokenize("spam spam SPAM") == ["SPAM", "SPAM", "SPAM"]

    def test_unicode_case_mapping_and_separators(self):
        assert tokenize("Straße") == ["STRASSE"]
        assert tokenize("free\x1fmoney") == ["FREE", "MONEY"]
