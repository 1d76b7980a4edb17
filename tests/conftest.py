"""Shared fixtures for anagram finder tests."""

from __future__ import annotations

import pytest

from anagram.dictionary import Dictionary


@pytest.fixture
def small_dictionary() -> Dictionary:
    """Hand-picked words built directly in memory. No file I/O."""
    return Dictionary([
        # 2-letter
        "at", "ta", "as", "aa",
        # 3-letter
        "act", "arc", "art", "cat", "car", "eat", "rat", "sat",
        "tar", "tea", "sea", "aaa", "ant", "tan", "nag",
        # 4-letter
        "acts", "arcs", "cast", "cats", "east", "eats", "rats",
        "scar", "scat", "seat", "star", "tack", "teas", "tsar",
        # 5-letter
        "stare", "tears", "rates", "aster", "caste", "crate", "trace",
        # 6-letter
        "carets", "caters", "crates", "reacts", "traces",
    ])


@pytest.fixture
def cat_dictionary() -> Dictionary:
    return Dictionary(["cat", "act", "cats", "tack"])


@pytest.fixture
def word_list_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Cat\n  act \n\nCATS\ntack\n", encoding="utf-8")
    return path
