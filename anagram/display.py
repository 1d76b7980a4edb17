"""Terminal rendering of search results."""

from __future__ import annotations

from anagram.grid_search import GridWord


def render_groups(groups: dict[int, list[str]]) -> str:
    """Render words grouped by length, one heading per length."""
    lines: list[str] = []
    for length in sorted(groups):
        lines.append(f"{length}-letter words:")
        lines.extend(groups[length])
        lines.append("")
    return "\n".join(lines)


def print_groups(groups: dict[int, list[str]]) -> None:
    print(render_groups(groups))


def render_grid_words(board: list[list[str]], words: list[GridWord]) -> str:
    """Render the board followed by each found word and its cell path."""
    lines = ["  ".join(ch.upper() for ch in row) for row in board]
    lines.append("")
    if not words:
        lines.append("(no words found)")
    width = max((len(gw.word) for gw in words), default=0)
    for gw in words:
        cells = " ".join(f"({r},{c})" for r, c in gw.path)
        lines.append(f"{gw.word:<{width}}  {cells}")
    return "\n".join(lines)
