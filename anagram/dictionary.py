"""Trie-based dictionary for word membership and prefix lookups."""

from __future__ import annotations

import logging
import os
import re
import time
from collections.abc import Iterable
from pathlib import Path

from anagram.constants import ENV_DICTIONARY

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class LoadError(Exception):
    """The word list exists but could not be read."""


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Dictionary:
    """Read-only trie of lowercase words.

    Built once from an iterable of words; there is no public way to add
    words afterwards, so a single instance can be shared by any number of
    concurrent searches.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = TrieNode()
        self._word_count = 0
        for word in words:
            word = word.strip().lower()
            if word:
                self._insert(word)

    def _insert(self, word: str) -> None:
        node = self._root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._word_count += 1

    def _find(self, prefix: str) -> TrieNode | None:
        node = self._root
        for ch in prefix.lower():
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @property
    def root(self) -> TrieNode:
        """Trie root, for callers that walk the trie one letter at a time."""
        return self._root

    def contains(self, word: str) -> bool:
        node = self._find(word)
        return node is not None and node.is_word

    def has_prefix(self, prefix: str) -> bool:
        """True if some stored word starts with *prefix*."""
        if not prefix:
            return self._word_count > 0
        return self._find(prefix) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self._word_count

    @property
    def word_count(self) -> int:
        return self._word_count


def load_dictionary(source: str | Path | Iterable[str]) -> Dictionary:
    """Build a Dictionary from a word-list file or an iterable of lines.

    A missing file gives an empty dictionary (logged as a warning); it is up
    to the caller whether that is acceptable. Any other read failure raises
    LoadError.
    """
    start = time.perf_counter()
    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            with open(path, encoding="utf-8") as f:
                d = Dictionary(f)
        except FileNotFoundError:
            logger.warning("Dictionary not found at %s; using an empty word list", path)
            return Dictionary()
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Could not read dictionary {path}: {e}") from e
        origin = str(path)
    else:
        try:
            d = Dictionary(source)
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Could not read dictionary: {e}") from e
        origin = "<lines>"

    elapsed = time.perf_counter() - start
    logger.info("Loaded %d words from %s in %.2fs", d.word_count, origin, elapsed)
    return d


def default_dictionary_path() -> Path:
    """Path named by $ANAGRAM_DICTIONARY, else the bundled data/dictionary.txt."""
    env_path = os.environ.get(ENV_DICTIONARY)
    if env_path:
        return Path(env_path)
    return Path(__file__).resolve().parent / "data" / "dictionary.txt"


def load_default_dictionary() -> Dictionary:
    return load_dictionary(default_dictionary_path())


def filter_words(dictionary: Dictionary, text: str, unique: bool = False) -> list[str]:
    """Return the lines of *text* that are dictionary words.

    Each line is trimmed and lowercased; empty lines are skipped. Input order
    is preserved, and so are repeats unless *unique* is set.
    """
    valid: list[str] = []
    seen: set[str] = set()
    for line in _LINE_BREAK.split(text):
        word = line.strip().lower()
        if not word or not dictionary.contains(word):
            continue
        if unique:
            if word in seen:
                continue
            seen.add(word)
        valid.append(word)
    return valid
