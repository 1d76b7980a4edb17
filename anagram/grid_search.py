"""Word-hunt board search: words traced through adjacent cells of a square board."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from anagram.constants import ALPHABET, GRID_MAX_LENGTH, GRID_MIN_LENGTH, MAX_GRID_SIZE
from anagram.dictionary import Dictionary, TrieNode
from anagram.finder import Deadline, InvalidRequest

# All eight neighbours, diagonals included
NEIGHBOURS: tuple[tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


@dataclass
class GridWord:
    """A word found on the board and the cells that spell it."""
    word: str
    path: list[tuple[int, int]] = field(default_factory=list)


def parse_board(rows: Sequence[str | Sequence[str]]) -> list[list[str]]:
    """Normalize board rows (strings or lists of letters) to a square letter grid."""
    board: list[list[str]] = []
    for row in rows:
        if isinstance(row, str):
            cells = list(row)
        elif isinstance(row, Sequence):
            cells = [str(c) for c in row]
        else:
            raise InvalidRequest("Board rows must be strings or lists of letters")
        cells = [c.lower() for c in cells]
        for col, ch in enumerate(cells):
            if len(ch) != 1 or ch not in ALPHABET:
                raise InvalidRequest(
                    f"Board cell ({len(board)},{col}) must be a single letter, got {ch!r}"
                )
        board.append(cells)
    size = len(board)
    if size == 0:
        raise InvalidRequest("Board is empty")
    if size > MAX_GRID_SIZE:
        raise InvalidRequest(f"Board is larger than {MAX_GRID_SIZE}x{MAX_GRID_SIZE}")
    if any(len(r) != size for r in board):
        raise InvalidRequest("Board must be square")
    return board


def find_grid_words(dictionary: Dictionary, rows: Sequence[str | Sequence[str]],
                    min_length: int = GRID_MIN_LENGTH,
                    max_length: int = GRID_MAX_LENGTH,
                    timeout: float | None = None) -> list[GridWord]:
    """Find dictionary words traced through adjacent board cells.

    Each cell is used at most once per word. When a word can be traced more
    than one way, the first path found is kept. Results run longest first,
    then alphabetically.
    """
    if min_length < 1 or max_length < min_length:
        raise InvalidRequest(f"Invalid length range [{min_length}, {max_length}]")
    board = parse_board(rows)
    size = len(board)
    clock = Deadline(timeout)
    found: dict[str, list[tuple[int, int]]] = {}
    visited = [[False] * size for _ in range(size)]
    path: list[tuple[int, int]] = []
    letters: list[str] = []

    def _walk(row: int, col: int, node: TrieNode) -> None:
        clock.tick()
        if node.is_word and len(letters) >= min_length:
            word = "".join(letters)
            if word not in found:
                found[word] = list(path)
        if len(letters) >= max_length:
            return
        for dr, dc in NEIGHBOURS:
            r, c = row + dr, col + dc
            if not (0 <= r < size and 0 <= c < size) or visited[r][c]:
                continue
            child = node.children.get(board[r][c])
            if child is None:
                continue
            visited[r][c] = True
            path.append((r, c))
            letters.append(board[r][c])
            _walk(r, c, child)
            letters.pop()
            path.pop()
            visited[r][c] = False

    for r in range(size):
        for c in range(size):
            child = dictionary.root.children.get(board[r][c])
            if child is None:
                continue
            visited[r][c] = True
            path.append((r, c))
            letters.append(board[r][c])
            _walk(r, c, child)
            letters.pop()
            path.pop()
            visited[r][c] = False

    ordered = sorted(found, key=lambda w: (-len(w), w))
    return [GridWord(w, found[w]) for w in ordered]
