"""Higher-order helpers over plain sequences of integers and strings."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from functools import cmp_to_key
from itertools import pairwise
from typing import Any, TypeVar

T = TypeVar("T")
R = TypeVar("R")

Compare = Callable[[Any, Any], int]


def foreach(values: Iterable[T], func: Callable[[T], Any]) -> None:
    """Call ``func`` on every value, in order."""
    for value in values:
        func(value)


def map_values(values: Iterable[T], func: Callable[[T], R]) -> list[R]:
    """Return a new list holding ``func`` applied to every value, in order."""
    return [func(value) for value in values]


def any_match(strings: Iterable[str], predicate: Callable[[str], Any]) -> bool:
    """Tell whether ``predicate`` gives a true (non-zero) result for any string."""
    return any(predicate(text) for text in strings)


def count_if(strings: Iterable[str], predicate: Callable[[str], Any]) -> int:
    """Count the strings for which ``predicate`` gives a true (non-zero) result."""
    return sum(1 for text in strings if predicate(text))


def is_sorted(values: Sequence[T], compare: Compare) -> bool:
    """Tell whether ``values`` is ordered, ascending or descending, by ``compare``.

    ``compare(a, b)`` returns a negative number, zero or a positive number
    as ``a`` sorts before, with or after ``b``. Sequences of fewer than two
    values count as sorted.
    """
    results = [compare(first, second) for first, second in pairwise(values)]
    return all(r <= 0 for r in results) or all(r >= 0 for r in results)


def compare_strings(first: str, second: str) -> int:
    """Compare two strings character by character, as ``strcmp`` does.

    Returns the difference between the code points of the first differing
    characters; the end of a string counts as code point 0.
    """
    for left, right in zip(first, second):
        if left != right:
            return ord(left) - ord(right)
    if len(first) > len(second):
        return ord(first[len(second)])
    if len(second) > len(first):
        return -ord(second[len(first)])
    return 0


def sort_strings(strings: list[str]) -> None:
    """Sort ``strings`` in place in ascending :func:`compare_strings` order."""
    strings.sort(key=cmp_to_key(compare_strings))


def advanced_sort_strings(strings: list[str], compare: Compare) -> None:
    """Sort ``strings`` in place, ascending by ``compare``.

    Only strictly out-of-order neighbours are exchanged, so strings that
    compare equal keep their relative order.
    """
    strings.sort(key=cmp_to_key(compare))