"""Solve the 4x4 skyscraper puzzle from sixteen visibility clues.

Clues come in four groups of four: the columns seen from the top, the
columns seen from the bottom, the rows seen from the left and the rows seen
from the right.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

SIZE = 4
ERROR_MESSAGE = "Error"

_WHITESPACE = " \t\n\v\f\r"
_CLUE_CHARS = "1234"

Clues = tuple[tuple[int, ...], ...]
Grid = list[list[int]]


def parse_clues(text: str) -> Clues:
    """Read sixteen clues, each one character from 1 to 4.

    Whitespace between clues is optional and ignored. Returns four tuples:
    top, bottom, left and right. Raises ValueError on any other character
    or on a count other than sixteen.
    """
    values = []
    for char in text:
        if char in _WHITESPACE:
            continue
        if char not in _CLUE_CHARS:
            raise ValueError(f"invalid clue character: {char!r}")
        if len(values) == SIZE * SIZE:
            raise ValueError("too many clues")
        values.append(int(char))
    if len(values) != SIZE * SIZE:
        raise ValueError(f"expected {SIZE * SIZE} clues, got {len(values)}")
    return tuple(
        tuple(values[start:start + SIZE]) for start in range(0, SIZE * SIZE, SIZE)
    )


def visible_count(line: Sequence[int]) -> int:
    """Count the buildings seen from the start of ``line``.

    A building is seen when it is taller than every building before it;
    heights of zero or less are never seen.
    """
    tallest = 0
    seen = 0
    for height in line:
        if height > tallest:
            tallest = height
            seen += 1
    return seen


def _line_ok(line: Sequence[int], front: int, back: int) -> bool:
    return visible_count(line) == front and visible_count(line[::-1]) == back


def _check_shape(clues: Sequence[Sequence[int]]) -> Clues:
    groups = tuple(tuple(group) for group in clues)
    if len(groups) != SIZE or any(len(group) != SIZE for group in groups):
        raise ValueError(f"clues must be {SIZE} groups of {SIZE}")
    return groups


def solve(clues: Sequence[Sequence[int]]) -> Grid:
    """Return the first grid, in row-major order of values, meeting the clues.

    Every row and column holds 1 to 4 once each. Raises ValueError when the
    clues are badly shaped or no grid satisfies them.
    """
    top, bottom, left, right = _check_shape(clues)
    grid: Grid = [[0] * SIZE for _ in range(SIZE)]

    def fits(row: int, col: int) -> bool:
        if col == SIZE - 1 and not _line_ok(grid[row], left[row], right[row]):
            return False
        if row == SIZE - 1:
            column = [line[col] for line in grid]
            if not _line_ok(column, top[col], bottom[col]):
                return False
        return True

    def place(position: int) -> bool:
        if position == SIZE * SIZE:
            return True
        row, col = divmod(position, SIZE)
        used = set(grid[row][:col]) | {line[col] for line in grid[:row]}
        for value in range(1, SIZE + 1):
            if value in used:
                continue
            grid[row][col] = value
            if fits(row, col) and place(position + 1):
                return True
        grid[row][col] = 0
        return False

    if not place(0):
        raise ValueError("no grid satisfies the clues")
    return grid


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render the grid as lines of space-separated digits, each ending in a newline."""
    return "".join(" ".join(str(value) for value in row) + "\n" for row in grid)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve the puzzle given as the single argument and print the grid.

    Prints ``Error`` for a wrong argument count, bad clues or no solution.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) != 1:
            raise ValueError("expected exactly one argument")
        grid = solve(parse_clues(args[0]))
    except ValueError:
        sys.stdout.write(ERROR_MESSAGE + "\n")
        return 0
    sys.stdout.write(format_grid(grid))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())