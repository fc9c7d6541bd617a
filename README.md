# ftkit

A small collection of sequence helpers and a few terminal toys:

- `ftkit.arrays` – `foreach`, `map_values`, `any_match`, `count_if`,
  `is_sorted`, `compare_strings`, `sort_strings` and
  `advanced_sort_strings`, working on plain Python sequences.
- `ftkit.calculator` – a tiny integer calculator with 32-bit wrap-around
  (`parse_int`, `is_valid_operator`, `apply_operator`, `do_op`).
- `ftkit.rectangle` – draws framed ASCII rectangles (`render`, `Style`).
- `ftkit.skyscraper` – solves the 4x4 skyscraper puzzle (`parse_clues`,
  `visible_count`, `solve`, `format_grid`).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from ftkit.arrays import compare_strings, is_sorted, sort_strings
from ftkit.calculator import apply_operator
from ftkit.rectangle import Style, render
from ftkit.skyscraper import format_grid, parse_clues, solve

words = ["Hola", "Alo", "Ball", "Zebra"]
sort_strings(words)                                  # ['Alo', 'Ball', 'Hola', 'Zebra']
print(is_sorted([1, 2, 3, 4, 5], lambda a, b: a - b))  # True

print(apply_operator(-7, "/", 2))                    # -3 (truncates toward zero)

print(render(5, 3, Style.RUSH00))

clues = parse_clues("4 3 2 1 1 2 2 2 4 3 2 1 1 2 2 2")
print(format_grid(solve(clues)))
```

Comparison callbacks follow the classic convention: they return a
negative number when the first value comes before the second, `0` when
they match, and a positive number otherwise. `compare_strings` behaves
like `strcmp`, returning the difference of the first differing code
points.

`render` accepts one of five styles, `Style.RUSH00` to `Style.RUSH04`.
Only `Style.RUSH04` rejects a width or height below one, raising
`ValueError("Give a valid int")`.

`parse_clues` and `solve` raise `ValueError` for malformed clues or
clues with no solution.

## Commands

### do-op

Takes a number, an operator (`+`, `-`, `*`, `/`, `%`) and a number.
Numbers are read like `atoi`: leading whitespace, any run of signs, then
digits.

```
$ do-op 4 + 2
6
```

Dividing or taking the modulo by zero prints
`Stop : division by zero` or `Stop : modulo by zero`; an unknown operator
prints `0`. With anything other than exactly three arguments it prints
nothing.

### ftkit-skyscraper

Takes the sixteen clues (top, bottom, left, right; four each, values 1
to 4) as one argument and prints the solved grid, or `Error` when the
argument count is wrong, the clues are malformed or they have no
solution:

```
$ ftkit-skyscraper "4 3 2 1 1 2 2 2 4 3 2 1 1 2 2 2"
1 2 3 4
2 3 4 1
3 4 1 2
4 1 2 3
```

### ftkit-rectangle

Prints a fixed 5 by 3 rectangle in the `RUSH04` style (no trailing
newline); arguments are ignored:

```
$ ftkit-rectangle
ABBBC
B   B
CBBBA
```

## What it does not do

ftkit has no linked-list type: its helpers work on ordinary Python
lists and iterables. The rectangle command takes no size arguments; use
`render` for other sizes and styles.