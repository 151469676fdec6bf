"""Text patterns of stars, digits and letters, each returned as printable text."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence


def _render(rows: Iterable[str]) -> str:
    return "".join(f"{row}\n" for row in rows)


def _letter(offset: int) -> str:
    return chr(ord("A") + offset)


def square(size: int) -> str:
    """A ``size`` by ``size`` block of stars."""
    return _render("* " * size for _ in range(size))


def star_triangle(n: int) -> str:
    """A right triangle of stars growing from one to ``n`` per row."""
    return _render("* " * (i + 1) for i in range(n))


def reverse_star_triangle(n: int) -> str:
    """A right triangle of stars shrinking from ``n`` to one per row."""
    return _render("* " * (i + 1) for i in reversed(range(n)))


def number_triangle(n: int) -> str:
    """Rows counting 1..i for i from 1 to ``n``."""
    return _render("".join(f"{j} " for j in range(1, i + 1)) for i in range(1, n + 1))


def reverse_number_triangle(n: int) -> str:
    """Rows counting 1..i for i from ``n`` down to 1."""
    return _render("".join(f"{j} " for j in range(1, i + 1)) for i in range(n, 0, -1))


def _pyramid_rows(n: int) -> list[str]:
    rows = []
    for i in range(n):
        pad = " " * (n - i - 1)
        rows.append(pad + "* " * (2 * i + 2) + pad)
    return rows


def _inverted_rows(n: int) -> list[str]:
    return [" " + "* " * (2 * n - (2 * i + 1)) + " " for i in range(n)]


def pyramid(n: int) -> str:
    """A centred pyramid of stars, widening by two stars per row."""
    return _render(_pyramid_rows(n))


def inverted_pyramid(n: int) -> str:
    """An inverted pyramid of stars with an odd count per row."""
    return _render(_inverted_rows(n))


def diamond(n: int) -> str:
    """A pyramid followed by an inverted pyramid."""
    return _render(_pyramid_rows(n) + _inverted_rows(n))


def half_diamond(n: int) -> str:
    """Stars growing to ``n`` then shrinking back to an empty row."""
    up = ["* " * (i + 1) for i in range(n)]
    down = ["* " * (n - i - 1) for i in range(n)]
    return _render(up + down)


def binary_triangle(n: int) -> str:
    """A triangle of alternating 1s and 0s; even rows start with 1."""
    rows = []
    for i in range(n):
        bit = 1 if i % 2 == 0 else 0
        cells = []
        for _ in range(i + 1):
            cells.append(str(bit))
            bit = 1 - bit
        rows.append("".join(cells))
    return _render(rows)


def number_crown(n: int) -> str:
    """Numbers rising on the left and falling on the right, closing the gap row by row."""
    rows = []
    for i in range(1, n + 1):
        left = "".join(str(j) for j in range(1, i + 1))
        right = "".join(str(j) for j in range(i, 0, -1))
        rows.append(left + " " * (2 * (n - i)) + right)
    return _render(rows)


def floyd_triangle(n: int) -> str:
    """Consecutive integers from 1 laid out one more per row."""
    rows = []
    num = 1
    for i in range(1, n + 1):
        rows.append("".join(f"{k} " for k in range(num, num + i)))
        num += i
    return _render(rows)


def letter_triangle(n: int) -> str:
    """Rows of letters A up to the row's letter."""
    return _render("".join(f"{_letter(k)} " for k in range(i + 1)) for i in range(n))


def reverse_letter_triangle(n: int) -> str:
    """Rows of letters from A, shrinking from ``n`` letters to one."""
    return _render("".join(f"{_letter(k)} " for k in range(n - i)) for i in range(n))


def repeated_letter_triangle(n: int) -> str:
    """Row i repeats the i-th letter i times."""
    return _render(f"{_letter(i)} " * (i + 1) for i in range(n))


def letter_palindrome_triangle(n: int) -> str:
    """Rows reading A up to the row's letter and back down to A."""
    rows = []
    for i in range(n):
        up = "".join(_letter(j) for j in range(i + 1))
        down = "".join(_letter(j) for j in range(i - 1, -1, -1))
        rows.append(up + down)
    return _render(rows)


def letter_tail() -> str:
    """The fixed five-row letter pattern ending at E."""
    last = ord("E")
    rows = []
    for i in range(1, 6):
        if i == 1:
            rows.append("E")
        elif i == 2:
            rows.append("DA")
        else:
            rows.append("".join(chr(c) for c in range(last - i + 1, last + 1)))
    return _render(rows)


def star_void(n: int) -> str:
    """Two star walls with a gap that opens and then closes again."""
    rows = []
    gap = 0
    for i in range(n):
        stars = "*" * (n - i)
        rows.append(stars + " " * gap + stars)
        gap += 2
    gap = 8
    for i in range(1, n + 1):
        stars = "*" * i
        rows.append(stars + " " * gap + stars)
        gap -= 2
    return _render(rows)


def butterfly(n: int) -> str:
    """Two star wings meeting at the middle row and parting again."""
    widths = list(range(1, n + 1)) + list(range(n - 1, 0, -1))
    return _render("*" * i + " " * (2 * (n - i)) + "*" * i for i in widths)


def hollow_rectangle(rows: int, cols: int) -> str:
    """A star border of ``rows`` by ``cols`` with a blank interior."""
    lines = []
    for i in range(1, rows + 1):
        lines.append(
            "".join(
                "*" if i in (1, rows) or j in (1, cols) else " "
                for j in range(1, cols + 1)
            )
        )
    return _render(lines)


def concentric_square(n: int) -> str:
    """Nested squares of digits from ``n`` at the edge down to 1 at the centre."""
    size = 2 * n - 1
    rows = []
    for i in range(size):
        cells = []
        for j in range(size):
            depth = min(i, j, size - 1 - i, size - 1 - j)
            cells.append(str(n - depth))
        rows.append("".join(cells))
    return _render(rows)


@dataclass(frozen=True)
class _Pattern:
    build: Callable[..., str]
    prompts: tuple[str, ...]


_SIZE = ("Enter the size: ",)

_PATTERNS: dict[str, _Pattern] = {
    "square": _Pattern(square, ("Enter the size of square: ",)),
    "star-triangle": _Pattern(star_triangle, ("Enter the size of trangle: ",)),
    "reverse-star-triangle": _Pattern(reverse_star_triangle, ("Enter the Number: ",)),
    "number-triangle": _Pattern(number_triangle, ("Enter the size of trangle: ",)),
    "reverse-number-triangle": _Pattern(reverse_number_triangle, ("Enter the Number: ",)),
    "pyramid": _Pattern(pyramid, ("Enter the size of trangle: ",)),
    "inverted-pyramid": _Pattern(inverted_pyramid, ("Enter the size of trangle: ",)),
    "diamond": _Pattern(diamond, ("Enter the size of trangle: ",)),
    "half-diamond": _Pattern(half_diamond, ("Enter the size of trangle: ",)),
    "binary-triangle": _Pattern(binary_triangle, _SIZE),
    "number-crown": _Pattern(number_crown, ("Enter the number: ",)),
    "floyd-triangle": _Pattern(floyd_triangle, ("Enter the number: ",)),
    "letter-triangle": _Pattern(letter_triangle, ("Enter number: ",)),
    "reverse-letter-triangle": _Pattern(reverse_letter_triangle, ("Enter number: ",)),
    "repeated-letter-triangle": _Pattern(repeated_letter_triangle, ("Enter number: ",)),
    "letter-palindrome-triangle": _Pattern(
        letter_palindrome_triangle, ("Enter number of rows: ",)
    ),
    "letter-tail": _Pattern(letter_tail, ()),
    "star-void": _Pattern(star_void, ("Enter number:",)),
    "butterfly": _Pattern(butterfly, ("Enter the number of rows: ",)),
    "hollow-rectangle": _Pattern(
        hollow_rectangle, ("Enter number of rows: ", "Enter number of columns: ")
    ),
    "concentric-square": _Pattern(concentric_square, ("Enter n: ",)),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print a named pattern; missing sizes are asked for on standard input."""
    parser = argparse.ArgumentParser(description="Print a text pattern.")
    parser.add_argument("pattern", choices=sorted(_PATTERNS))
    parser.add_argument("sizes", nargs="*", type=int)
    args = parser.parse_args(argv)

    pattern = _PATTERNS[args.pattern]
    wanted = len(pattern.prompts)
    if len(args.sizes) > wanted:
        parser.error(f"{args.pattern} takes {wanted} size argument(s)")
    sizes = list(args.sizes)
    for prompt in pattern.prompts[len(sizes):]:
        try:
            sizes.append(int(input(prompt)))
        except ValueError:
            parser.error("sizes must be integers")
    sys.stdout.write(pattern.build(*sizes))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())