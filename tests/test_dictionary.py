"""Unit tests for the trie dictionary and word-list loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from anagram.dictionary import (
    Dictionary,
    LoadError,
    default_dictionary_path,
    filter_words,
    load_default_dictionary,
    load_dictionary,
)


class TestMembership:
    def test_contains_exact_word(self, cat_dictionary: Dictionary) -> None:
        assert cat_dictionary.contains("cat")
        assert cat_dictionary.contains("tack")

    def test_prefix_is_not_a_word(self, cat_dictionary: Dictionary) -> None:
        assert not cat_dictionary.contains("ca")
        assert not cat_dictionary.contains("ta")

    def test_case_insensitive(self, cat_dictionary: Dictionary) -> None:
        assert cat_dictionary.contains("Cat") == cat_dictionary.contains("cat")
        assert cat_dictionary.contains("CATS")

    def test_in_operator(self, cat_dictionary: Dictionary) -> None:
        assert "act" in cat_dictionary
        assert "dog" not in cat_dictionary
        assert 42 not in cat_dictionary

    def test_empty_string_not_a_word(self, cat_dictionary: Dictionary) -> None:
        assert not cat_dictionary.contains("")

    def test_duplicates_counted_once(self) -> None:
        d = Dictionary(["cat", "CAT", " cat ", "", "  "])
        assert d.word_count == 1
        assert len(d) == 1


class TestPrefix:
    def test_every_prefix_of_a_word(self, small_dictionary: Dictionary) -> None:
        for word in ["carets", "stare", "tack"]:
            for i in range(1, len(word) + 1):
                assert small_dictionary.has_prefix(word[:i]), word[:i]

    def test_missing_prefix(self, small_dictionary: Dictionary) -> None:
        assert not small_dictionary.has_prefix("zz")
        assert not small_dictionary.has_prefix("catsx")

    def test_prefix_case_insensitive(self, cat_dictionary: Dictionary) -> None:
        assert cat_dictionary.has_prefix("TA")

    def test_empty_prefix(self, cat_dictionary: Dictionary) -> None:
        assert cat_dictionary.has_prefix("")
        assert not Dictionary().has_prefix("")


class TestLoadDictionary:
    def test_load_from_path(self, word_list_file) -> None:
        d = load_dictionary(word_list_file)
        assert d.word_count == 4
        assert d.contains("cat")
        assert d.contains("act")
        assert d.contains("cats")

    def test_load_from_str_path(self, word_list_file) -> None:
        d = load_dictionary(str(word_list_file))
        assert d.word_count == 4

    def test_load_from_lines(self) -> None:
        d = load_dictionary(["Sea\n", "\n", "tea\r\n"])
        assert d.word_count == 2
        assert d.contains("sea")
        assert d.contains("tea")

    def test_missing_file_gives_empty_dictionary(self, tmp_path, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="anagram.dictionary"):
            d = load_dictionary(tmp_path / "nope.txt")
        assert d.word_count == 0
        assert "not found" in caplog.text

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty.txt"
        path.write_text("")
        assert load_dictionary(path).word_count == 0

    def test_directory_raises_load_error(self, tmp_path) -> None:
        with pytest.raises(LoadError):
            load_dictionary(tmp_path)

    def test_undecodable_file_raises_load_error(self, tmp_path) -> None:
        path = tmp_path / "bad.txt"
        path.write_bytes(b"cat\n\xff\xfe\xfa\n")
        with pytest.raises(LoadError):
            load_dictionary(path)

    def test_default_path_from_env(self, word_list_file, monkeypatch) -> None:
        monkeypatch.setenv("ANAGRAM_DICTIONARY", str(word_list_file))
        assert default_dictionary_path() == word_list_file
        assert load_default_dictionary().word_count == 4

    def test_default_path_without_env(self, monkeypatch) -> None:
        monkeypatch.delenv("ANAGRAM_DICTIONARY", raising=False)
        path = default_dictionary_path()
        assert path.name == "dictionary.txt"
        assert path.parent.name == "data"

    def test_bundled_word_list_ships_with_package(self, monkeypatch) -> None:
        import anagram.dictionary

        monkeypatch.delenv("ANAGRAM_DICTIONARY", raising=False)
        path = default_dictionary_path()
        assert path.parent.parent == Path(anagram.dictionary.__file__).resolve().parent
        assert path.is_file()
        d = load_default_dictionary()
        assert d.word_count > 0
        assert d.contains("cats")


class TestFilterWords:
    def test_keeps_repeats_by_default(self) -> None:
        d = Dictionary(["cat"])
        assert filter_words(d, "Cat\n\nXQZ\ncat") == ["cat", "cat"]

    def test_unique(self) -> None:
        d = Dictionary(["cat"])
        assert filter_words(d, "Cat\n\nXQZ\ncat", unique=True) == ["cat"]

    def test_preserves_input_order(self, small_dictionary: Dictionary) -> None:
        text = "tea\nzzz\nact\n  Star  \nsat"
        assert filter_words(small_dictionary, text) == ["tea", "act", "star", "sat"]

    def test_windows_line_endings(self, small_dictionary: Dictionary) -> None:
        assert filter_words(small_dictionary, "tea\r\nsea\r\n") == ["tea", "sea"]

    def test_empty_text(self, small_dictionary: Dictionary) -> None:
        assert filter_words(small_dictionary, "") == []
