"""CLI entry point for the anagram finder."""

from __future__ import annotations

import argparse
import logging
import re
import sys

from anagram.constants import DEFAULT_MIN_LENGTH, MAX_INPUT_LENGTH, MIN_INPUT_LENGTH
from anagram.dictionary import Dictionary, LoadError, load_default_dictionary, load_dictionary
from anagram.display import print_groups, render_grid_words
from anagram.finder import InvalidRequest, SearchTimeout, find_words_by_length
from anagram.grid_search import find_grid_words, parse_board

_LETTERS_ONLY = re.compile(r"^[a-z]+$")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Anagram finder — list dictionary words made from your letters",
    )
    parser.add_argument(
        "--letters", "-l",
        type=str,
        help='Letters to search, e.g. "cats". Prompts interactively when omitted',
    )
    parser.add_argument(
        "--min",
        type=int,
        default=DEFAULT_MIN_LENGTH,
        dest="min_length",
        help=f"Shortest word length to report (default: {DEFAULT_MIN_LENGTH})",
    )
    parser.add_argument(
        "--max",
        type=int,
        default=None,
        dest="max_length",
        help="Longest word length to report (default: number of letters)",
    )
    parser.add_argument(
        "--board", "-b",
        type=str,
        help='Word-hunt board, rows separated by commas, e.g. "cats,oxen,dogs,army"',
    )
    parser.add_argument(
        "--dictionary", "-d",
        type=str,
        help="Word list, one word per line (default: $ANAGRAM_DICTIONARY or the bundled sample list)",
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        default=None,
        help="Give up a search after this many seconds",
    )
    parser.add_argument(
        "--no-prune",
        action="store_true",
        help="Disable prefix pruning (slow; for comparison)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log dictionary loading and search timing",
    )
    return parser.parse_args(argv)


def get_letters_from_input() -> str:
    """Prompt for a length, then a letter string of exactly that length."""
    try:
        raw_length = input(
            f"Enter the length of the input string ({MIN_INPUT_LENGTH}-{MAX_INPUT_LENGTH}): "
        ).strip()
        length = int(raw_length)
        letters = input("Enter the input characters (letters only): ").strip().lower()
    except ValueError:
        print("Invalid input. Please try again.")
        sys.exit(1)
    except (EOFError, KeyboardInterrupt):
        print()
        sys.exit(1)

    if not (MIN_INPUT_LENGTH <= length <= MAX_INPUT_LENGTH):
        print("Invalid input. Please try again.")
        sys.exit(1)
    if len(letters) != length or not _LETTERS_ONLY.match(letters):
        print("Invalid input. Please try again.")
        sys.exit(1)
    return letters


def _load(path: str | None) -> Dictionary:
    try:
        dictionary = load_dictionary(path) if path else load_default_dictionary()
    except LoadError as e:
        print(f"Error loading dictionary: {e}")
        sys.exit(1)
    if dictionary.word_count == 0:
        print("Warning: dictionary is empty; no words will be found.")
    return dictionary


def run_board(board_arg: str, dictionary: Dictionary, args: argparse.Namespace) -> None:
    rows = [r.strip() for r in board_arg.split(",") if r.strip()]
    kwargs = {"timeout": args.timeout}
    if args.max_length is not None:
        kwargs["max_length"] = args.max_length
    try:
        board = parse_board(rows)
        words = find_grid_words(dictionary, rows, min_length=args.min_length, **kwargs)
    except (InvalidRequest, SearchTimeout) as e:
        print(f"Error: {e}")
        sys.exit(1)
    print(render_grid_words(board, words))


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1. Get letters (or a board)
    if args.board:
        dictionary = _load(args.dictionary)
        run_board(args.board, dictionary, args)
        return

    if args.letters:
        letters = args.letters.strip().lower()
        if not (MIN_INPUT_LENGTH <= len(letters) <= MAX_INPUT_LENGTH):
            print("Invalid input. Please try again.")
            sys.exit(1)
    else:
        letters = get_letters_from_input()

    # 2. Load dictionary
    dictionary = _load(args.dictionary)

    # 3. Search
    try:
        groups = find_words_by_length(
            dictionary, letters, args.min_length, args.max_length,
            prune=False if args.no_prune else None,
            timeout=args.timeout,
        )
    except InvalidRequest as e:
        print(f"Invalid request: {e}")
        sys.exit(1)
    except SearchTimeout:
        print(f"Search timed out after {args.timeout:.0f}s.")
        sys.exit(1)

    # 4. Display
    print_groups(groups)


if __name__ == "__main__":
    main()
