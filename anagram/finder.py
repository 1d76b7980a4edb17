"""Backtracking anagram search over a letter multiset with trie pruning."""

from __future__ import annotations

import logging
import time
from collections import Counter
from collections.abc import Container
from dataclasses import dataclass

from anagram.constants import ALPHABET, CHECK_INTERVAL
from anagram.dictionary import Dictionary, TrieNode

logger = logging.getLogger(__name__)


class InvalidRequest(ValueError):
    """Search bounds or letters are malformed."""


class SearchTimeout(RuntimeError):
    """The search ran past its deadline."""


def normalize_letters(letters: str) -> str:
    """Lowercase and strip *letters*, rejecting anything outside a-z."""
    cleaned = letters.strip().lower()
    bad = sorted({ch for ch in cleaned if ch not in ALPHABET})
    if bad:
        raise InvalidRequest(f"Unsupported characters in letters: {''.join(bad)!r}")
    return cleaned


@dataclass(frozen=True)
class SearchRequest:
    letters: Counter[str]
    min_length: int
    max_length: int

    @property
    def size(self) -> int:
        return sum(self.letters.values())

    @property
    def is_empty(self) -> bool:
        """True when no word can fall in range (min_length exceeds the letters)."""
        return self.min_length > self.size

    @classmethod
    def build(cls, letters: str, min_length: int,
              max_length: int | None = None) -> SearchRequest:
        """Normalize *letters* and validate the length range.

        *max_length* defaults to the number of letters. A *min_length*
        longer than the letters is allowed and simply matches nothing.
        """
        counts = Counter(normalize_letters(letters))
        size = sum(counts.values())
        if max_length is None:
            max_length = max(size, min_length)
        if min_length < 1:
            raise InvalidRequest(f"min_length must be at least 1, got {min_length}")
        if max_length < min_length:
            raise InvalidRequest(
                f"max_length ({max_length}) is less than min_length ({min_length})"
            )
        if min_length <= size < max_length:
            raise InvalidRequest(
                f"max_length ({max_length}) exceeds the number of letters ({size})"
            )
        return cls(counts, min_length, max_length)


class Deadline:
    """Counts recursion steps and raises SearchTimeout once time runs out."""

    __slots__ = ("_deadline", "_steps", "steps")

    def __init__(self, timeout: float | None) -> None:
        self._deadline = None if timeout is None else time.monotonic() + timeout
        self._steps = 0
        self.steps = 0

    def tick(self) -> None:
        self.steps += 1
        if self._deadline is None:
            return
        self._steps += 1
        if self._steps >= CHECK_INTERVAL:
            self._steps = 0
            if time.monotonic() > self._deadline:
                raise SearchTimeout(f"Search gave up after {self.steps} steps")


def _search_pruned(root: TrieNode, request: SearchRequest, clock: Deadline) -> set[str]:
    """Walk the trie alongside the letter counts.

    Holding the trie node for the current prefix makes the prefix check a
    single child lookup: a letter with no child node means no word starts
    with the path so far plus that letter, and the branch is skipped.
    """
    counts = dict(request.letters)
    distinct = sorted(counts)
    lo, hi = request.min_length, request.max_length
    found: set[str] = set()
    path: list[str] = []

    def _walk(node: TrieNode, depth: int) -> None:
        clock.tick()
        if node.is_word and depth >= lo:
            found.add("".join(path))
        if depth >= hi:
            return
        for ch in distinct:
            if counts[ch] == 0:
                continue
            child = node.children.get(ch)
            if child is None:
                continue
            counts[ch] -= 1
            path.append(ch)
            _walk(child, depth + 1)
            path.pop()
            counts[ch] += 1

    _walk(root, 0)
    return found


def _search_unpruned(words: Container[str], request: SearchRequest,
                     clock: Deadline) -> set[str]:
    """Generate every distinct sequence up to max_length and test membership."""
    counts = dict(request.letters)
    distinct = sorted(counts)
    lo, hi = request.min_length, request.max_length
    found: set[str] = set()
    path: list[str] = []

    def _walk(depth: int) -> None:
        clock.tick()
        if depth >= lo:
            candidate = "".join(path)
            if candidate in words:
                found.add(candidate)
        if depth >= hi:
            return
        for ch in distinct:
            if counts[ch] == 0:
                continue
            counts[ch] -= 1
            path.append(ch)
            _walk(depth + 1)
            path.pop()
            counts[ch] += 1

    _walk(0)
    return found


def search(dictionary: Dictionary | Container[str], request: SearchRequest, *,
           prune: bool | None = None, timeout: float | None = None) -> list[str]:
    """Run *request* against *dictionary*, returning words by (length, word).

    Pruning needs a trie; with a plain container (e.g. a set of words) or
    ``prune=False`` every sequence is generated and tested, which gives the
    same answer more slowly.
    """
    if request.is_empty:
        return []
    if prune is None:
        prune = isinstance(dictionary, Dictionary)
    if prune and not isinstance(dictionary, Dictionary):
        raise TypeError("Prefix pruning needs a trie-backed Dictionary")

    clock = Deadline(timeout)
    start = time.perf_counter()
    if prune:
        found = _search_pruned(dictionary.root, request, clock)
    else:
        found = _search_unpruned(dictionary, request, clock)
    logger.debug(
        "Searched %d letters [%d-%d] (%s): %d words, %d steps in %.3fs",
        request.size, request.min_length, request.max_length,
        "pruned" if prune else "unpruned",
        len(found), clock.steps, time.perf_counter() - start,
    )
    return sorted(found, key=lambda w: (len(w), w))


def find_words(dictionary: Dictionary | Container[str], letters: str,
               min_length: int, max_length: int | None = None, *,
               prune: bool | None = None, timeout: float | None = None) -> list[str]:
    """Find all dictionary words spelled by a subset of *letters*.

    Each distinct letter is tried once per position, so repeated letters
    never produce the same sequence twice. Raises InvalidRequest for a bad
    range or alphabet and SearchTimeout if *timeout* seconds pass.
    """
    request = SearchRequest.build(letters, min_length, max_length)
    return search(dictionary, request, prune=prune, timeout=timeout)


def find_words_by_length(dictionary: Dictionary | Container[str], letters: str,
                         min_length: int, max_length: int | None = None, *,
                         prune: bool | None = None,
                         timeout: float | None = None) -> dict[int, list[str]]:
    """Like find_words(), grouped by length. Every length in range has a key."""
    request = SearchRequest.build(letters, min_length, max_length)
    words = search(dictionary, request, prune=prune, timeout=timeout)
    if request.is_empty:
        return {}
    grouped: dict[int, list[str]] = {
        n: [] for n in range(request.min_length, request.max_length + 1)
    }
    for w in words:
        grouped[len(w)].append(w)
    return grouped
