"""A tiny integer calculator: ``do-op <left> <operator> <right>``."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import Optional

OPERATORS = "+-*/%"
DIVISION_BY_ZERO = "Stop : division by zero"
MODULO_BY_ZERO = "Stop : modulo by zero"

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _wrap32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer with two's-complement wrap."""
    return ((value + 2**31) % 2**32) - 2**31


def parse_int(text: str) -> int:
    """Read a leading integer the way ``atoi`` does, wrapping to 32 bits.

    Leading whitespace is skipped, then any run of ``+``/``-`` signs (each
    ``-`` flips the sign), then decimal digits. Anything else ends the number.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    while position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -sign
        position += 1
    number = 0
    while position < length and text[position] in _DIGITS:
        number = _wrap32(number * 10 + int(text[position]))
        position += 1
    return _wrap32(number * sign)


def is_valid_operator(operator: str) -> bool:
    """Tell whether ``operator`` is exactly one of ``+ - * / %``."""
    return len(operator) == 1 and operator in OPERATORS


def _truncated_divmod(left: int, right: int) -> tuple[int, int]:
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        quotient = -quotient
    return quotient, left - quotient * right


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: _truncated_divmod(a, b)[0],
    "%": lambda a, b: _truncated_divmod(a, b)[1],
}


def apply_operator(left: int, operator: str, right: int) -> int:
    """Apply ``operator`` with 32-bit integer semantics.

    Division truncates toward zero and the remainder takes the sign of the
    dividend. Raises ValueError for an unknown operator and
    ZeroDivisionError for a zero divisor.
    """
    if not is_valid_operator(operator):
        raise ValueError(f"invalid operator: {operator!r}")
    if right == 0 and operator == "/":
        raise ZeroDivisionError(DIVISION_BY_ZERO)
    if right == 0 and operator == "%":
        raise ZeroDivisionError(MODULO_BY_ZERO)
    return _wrap32(_OPERATIONS[operator](left, right))


def do_op(left: str, operator: str, right: str) -> str:
    """Return the text the command prints for one calculation, without newline."""
    if not is_valid_operator(operator):
        return "0"
    try:
        result = apply_operator(parse_int(left), operator, parse_int(right))
    except ZeroDivisionError as error:
        return str(error)
    return str(result)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the calculator on exactly three arguments; otherwise print nothing."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 3:
        sys.stdout.write(do_op(*args) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())