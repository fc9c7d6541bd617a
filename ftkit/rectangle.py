"""Draw text rectangles framed in one of five character styles."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum
from typing import NamedTuple, Optional

INVALID_SIZE_MESSAGE = "Give a valid int"


class _Frame(NamedTuple):
    top_left: str
    top_fill: str
    top_right: str
    side: str
    bottom_left: str
    bottom_fill: str
    bottom_right: str
    newline_after_bottom: bool
    checks_size: bool


class Style(Enum):
    """The characters that frame a rectangle, and how its last line ends."""

    RUSH00 = _Frame("o", "-", "o", "|", "o", "-", "o", True, False)
    RUSH01 = _Frame("/", "*", "\\", "*", "\\", "*", "/", False, False)
    RUSH02 = _Frame("A", "B", "A", "B", "C", "B", "C", False, False)
    RUSH03 = _Frame("A", "B", "C", "B", "A", "B", "C", True, False)
    RUSH04 = _Frame("A", "B", "C", "B", "C", "B", "A", False, True)

    @property
    def frame(self) -> _Frame:
        return self.value


def _edge(width: int, left: str, fill: str, right: str) -> str:
    return left + fill * (width - 2) + (right if width > 1 else "")


def render(width: int, height: int, style: Style = Style.RUSH04) -> str:
    """Return the rectangle of ``width`` columns and ``height`` rows as text.

    The top and bottom edges are always drawn, even when ``height`` is below
    two. Every line but the bottom one ends in a newline; the bottom one does
    too for the styles that call for it. ``Style.RUSH04`` refuses a width or
    height below one with ValueError.
    """
    frame = style.frame
    if frame.checks_size and (width < 1 or height < 1):
        raise ValueError(INVALID_SIZE_MESSAGE)
    top = _edge(width, frame.top_left, frame.top_fill, frame.top_right) + "\n"
    middle = _edge(width, frame.side, " ", frame.side) + "\n"
    bottom = _edge(width, frame.bottom_left, frame.bottom_fill, frame.bottom_right)
    if frame.newline_after_bottom:
        bottom += "\n"
    return top + middle * max(0, height - 2) + bottom


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a 5 by 3 rectangle in the RUSH04 style; arguments are ignored."""
    try:
        sys.stdout.write(render(5, 3, Style.RUSH04))
    except ValueError as error:
        sys.stdout.write(str(error))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())