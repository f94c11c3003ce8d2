"""Whitespace tokenizer with case normalization."""

from __future__ import annotations


def tokenize(text: str) -> list[str]:
    """Split text on runs of whitespace and uppercase each token.

    No punctuation stripping, stemming, or stop-word removal is applied.
    Empty or whitespace-only input yields an empty list.

    Splitting and case mapping follow Python's Unicode rules: ``str.split``
    also breaks on the ASCII separator controls 0x1C to 0x1F, and
    ``str.upper`` may lengthen a token (``"straße"`` becomes ``"STRASSE"``).
    """
    return [token.upper() for token in text.split()]
