"""Text patterns of stars and digits, one string per printed row."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence


def square(n: int) -> list[str]:
    """Return an ``n`` by ``n`` block of stars."""
    return ["*" * n for _ in range(n)]


def right_triangle(n: int) -> list[str]:
    """Return a left-aligned triangle of stars growing by one per row."""
    return ["*" * size for size in range(1, n + 1)]


def _count_up(size: int) -> str:
    return "".join(str(digit) for digit in range(1, size + 1))


def number_triangle(n: int) -> list[str]:
    """Return rows counting 1, 12, 123 and so on up to ``n`` digits."""
    return [_count_up(size) for size in range(1, n + 1)]


def repeated_number_triangle(n: int) -> list[str]:
    """Return rows where row ``k`` repeats the number ``k`` ``k`` times."""
    return [str(size) * size for size in range(1, n + 1)]


def inverted_triangle(n: int) -> list[str]:
    """Return a triangle of stars shrinking by one per row."""
    return ["*" * size for size in range(n, 0, -1)]


def inverted_number_triangle(n: int) -> list[str]:
    """Return counting rows shrinking from ``n`` digits down to one."""
    return [_count_up(size) for size in range(n, 0, -1)]


def pyramid(n: int) -> list[str]:
    """Return a centred pyramid of stars, padded on both sides."""
    rows = []
    for i in range(n):
        pad = " " * (n - i - 1)
        rows.append(pad + "*" * (2 * i + 1) + pad)
    return rows


def inverted_pyramid(n: int) -> list[str]:
    """Return a centred upside-down pyramid of stars, padded on both sides."""
    rows = []
    for i in range(n):
        pad = " " * i
        rows.append(pad + "*" * (2 * n - (2 * i + 1)) + pad)
    return rows


def diamond(n: int) -> list[str]:
    """Return a pyramid followed by its inverted twin."""
    return pyramid(n) + inverted_pyramid(n)


PATTERNS: dict[str, Callable[[int], list[str]]] = {
    "square": square,
    "right-triangle": right_triangle,
    "number-triangle": number_triangle,
    "repeated-number-triangle": repeated_number_triangle,
    "inverted-triangle": inverted_triangle,
    "inverted-number-triangle": inverted_number_triangle,
    "pyramid": pyramid,
    "inverted-pyramid": inverted_pyramid,
    "diamond": diamond,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print a named pattern; the row count comes from the arguments or stdin."""
    parser = argparse.ArgumentParser(description="Print a text pattern.")
    parser.add_argument("pattern", choices=sorted(PATTERNS))
    parser.add_argument("rows", type=int, nargs="?")
    args = parser.parse_args(argv)

    rows = args.rows
    if rows is None:
        tokens = sys.stdin.read().split()
        if not tokens:
            parser.error("no row count given")
        try:
            rows = int(tokens[0])
        except ValueError:
            parser.error(f"invalid row count: {tokens[0]!r}")

    for line in PATTERNS[args.pattern](rows):
        print(line)
    return 0