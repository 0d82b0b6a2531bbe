"""Boggle-style word search along rows, columns and down-right diagonals."""

from __future__ import annotations

import re
import sys
from pathlib import Path

from boggleht.rng import MersenneTwister

Board = list[list[str]]

# Scrabble letter frequencies for A to Z.
_LETTER_FREQUENCIES = (
    9, 2, 2, 4, 12, 2, 3, 2, 9, 1, 1, 4, 2, 6, 8, 2, 1, 6, 4, 6, 4, 2, 2, 1, 2, 1,
)
_LETTERS = "".join(
    chr(ord("A") + index) * count for index, count in enumerate(_LETTER_FREQUENCIES)
)

# Right, down and down-right.
_DIRECTIONS = ((0, 1), (1, 0), (1, 1))

_USAGE = "Usage: boggle-driver <size> <seed> <dictionary file>"


def gen_board(n: int, seed: int) -> Board:
    """Return an n-by-n board of letters drawn with Scrabble frequencies."""
    generator = MersenneTwister(seed)
    return [
        [_LETTERS[generator() % len(_LETTERS)] for _ in range(n)] for _ in range(n)
    ]


def format_board(board: Board) -> str:
    """Render the board with each letter right-aligned in two columns."""
    return "".join(
        "".join(f"{letter:>2}" for letter in row[: len(board)]) + "\n"
        for row in board
    )


def print_board(board: Board) -> None:
    """Write the board to standard output."""
    sys.stdout.write(format_board(board))


def parse_dict(fname: str | Path) -> tuple[set[str], set[str]]:
    """Read whitespace-separated words; return the words and all their proper prefixes.

    The prefix set always contains the empty string. Raises ValueError if
    the file cannot be opened.
    """
    try:
        text = Path(fname).read_text()
    except OSError as exc:
        raise ValueError("unable to open dictionary file") from exc
    words: set[str] = set()
    prefixes: set[str] = {""}
    for word in text.split():
        words.add(word)
        prefixes.update(word[:i] for i in range(1, len(word)))
    return words, prefixes


def _longest_word(
    dictionary: set[str],
    prefix: set[str],
    board: Board,
    row: int,
    col: int,
    d_row: int,
    d_col: int,
) -> str | None:
    """Return the longest word reachable from (row, col) in one direction."""
    size = len(board)
    word = ""
    longest = None
    while row < size and col < size:
        word += board[row][col]
        in_dictionary = word in dictionary
        if not in_dictionary and word not in prefix:
            break
        if in_dictionary:
            longest = word
        row += d_row
        col += d_col
    return longest


def boggle(dictionary: set[str], prefix: set[str], board: Board) -> set[str]:
    """Find words on the board, keeping only the longest word on each straight path."""
    found: set[str] = set()
    size = len(board)
    for row in range(size):
        for col in range(size):
            for d_row, d_col in _DIRECTIONS:
                word = _longest_word(dictionary, prefix, board, row, col, d_row, d_col)
                if word is not None:
                    found.add(word)
    return found


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Generate a board, print it, and list the dictionary words found on it."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 3:
        print(_USAGE)
        return 1
    size = max(0, _atoi(args[0]))
    seed = _atoi(args[1])
    board = gen_board(size, seed)
    print_board(board)
    try:
        dictionary, prefix = parse_dict(args[2])
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    found = boggle(dictionary, prefix, board)
    print(f"Found {len(found)} words:")
    print(", ".join(sorted(found)))
    return 0


if __name__ == "__main__":
    sys.exit(main())