"""Helpers for splitting text into words."""

from __future__ import annotations

from collections.abc import Iterable


def split_into_words(text: str) -> list[str]:
    """Split ``text`` on single spaces, keeping empty words between adjacent spaces."""
    return text.split(" ")


def make_unique_non_empty_strings(strings: Iterable[str]) -> set[str]:
    """Return the set of distinct non-empty strings found in ``strings``."""
    return {s for s in strings if s}