"""Frequency counts of words and characters, in sorted key order."""

from __future__ import annotations

from collections import Counter


def count_words(text: str) -> dict[str, int]:
    """Count whitespace-separated words, keyed in ascending order."""
    return dict(sorted(Counter(text.split()).items()))


def count_characters(text: str) -> dict[str, int]:
    """Count every character, spaces included, keyed in ascending order."""
    return dict(sorted(Counter(text).items()))