import io

import pytest

from algokit import patterns
from algokit.patterns import (
    diamond,
    inverted_number_triangle,
    inverted_pyramid,
    inverted_triangle,
    main,
    number_triangle,
    pyramid,
    repeated_number_triangle,
    right_triangle,
    square,
)


@pytest.mark.parametrize(
    "func",
    [
        square,
        right_triangle,
        number_triangle,
        repeated_number_triangle,
        inverted_triangle,
        inverted_number_triangle,
        pyramid,
        inverted_pyramid,
    ],
)
@pytest.mark.parametrize("n", [1, 4, 7])
def test_row_count_matches_n(func, n):
    assert len(func(n)) == n


@pytest.mark.parametrize("n", [0, -3])
def test_non_positive_sizes_are_empty(n):
    assert square(n) == []
    assert diamond(n) == []
    assert number_triangle(n) == []


def test_square_rows_are_all_stars_of_width_n():
    rows = square(5)
    assert {len(row) for row in rows} == {5}
    assert set("".join(rows)) == {"*"}


def test_right_triangle_grows_by_one():
    rows = right_triangle(6)
    assert [len(row) for row in rows] == list(range(1, 7))
    assert set("".join(rows)) == {"*"}


def test_inverted_triangle_is_right_triangle_reversed():
    assert inverted_triangle(5) == right_triangle(5)[::-1]


def test_number_triangle_rows_are_prefixes_of_last():
    rows = number_triangle(6)
    assert all(rows[-1].startswith(row) for row in rows)
    assert rows[0] == "1"


def test_inverted_number_triangle_is_number_triangle_reversed():
    assert inverted_number_triangle(5) == number_triangle(5)[::-1]


def test_repeated_number_triangle_rows_repeat_their_row_number():
    for number, row in enumerate(repeated_number_triangle(7), start=1):
        assert set(row) == {str(number)}
        assert len(row) == number


def test_pyramid_is_symmetric_with_fixed_width():
    n = 5
    rows = pyramid(n)
    assert {len(row) for row in rows} == {2 * n - 1}
    assert all(row == row[::-1] for row in rows)
    assert [row.count("*") for row in rows] == [1, 3, 5, 7, 9]


def test_inverted_pyramid_is_pyramid_reversed():
    assert inverted_pyramid(6) == pyramid(6)[::-1]


def test_diamond_joins_both_pyramids():
    assert diamond(4) == pyramid(4) + inverted_pyramid(4)
    assert len(diamond(4)) == 8


def test_main_prints_pattern_from_arguments(capsys):
    assert main(["square", "2"]) == 0
    assert capsys.readouterr().out == "**\n**\n"


def test_main_reads_row_count_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main(["pyramid"]) == 0
    assert capsys.readouterr().out == "\n".join(pyramid(3)) + "\n"


def test_main_rejects_unknown_pattern():
    with pytest.raises(SystemExit):
        main(["hexagon", "3"])


def test_main_rejects_missing_row_count(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit):
        main(["square"])


def test_every_registered_pattern_is_reachable_from_main(capsys):
    for name, func in patterns.PATTERNS.items():
        main([name, "3"])
        assert capsys.readouterr().out.splitlines() == func(3)