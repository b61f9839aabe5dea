import pytest

from algokit.basics import (
    add_binary,
    int_sqrt,
    min_height,
    roman_to_int,
    supplies_count,
)


@pytest.mark.parametrize(
    "a, b", [("11", "1"), ("1010", "1011"), ("0", "0"), ("1", "111111"), ("", "1")]
)
def test_add_binary_round_trip(a, b):
    result = add_binary(a, b)
    assert int(result, 2) == int(a or "0", 2) + int(b, 2)
    assert set(result) <= {"0", "1"}


def test_add_binary_zero():
    assert add_binary("0", "0") == "0"


def test_add_binary_rejects_other_digits():
    with pytest.raises(ValueError):
        add_binary("12", "1")


def test_supplies_single_cell():
    assert supplies_count(1, 1) == 1


@pytest.mark.parametrize("n, m", [(3, 5), (4, 7), (10, 10), (1, 8)])
def test_supplies_symmetric(n, m):
    assert supplies_count(n, m) == supplies_count(m, n)


@pytest.mark.parametrize("k, m", [(1, 3), (2, 5), (5, 6)])
def test_supplies_even_matches_preceding_odd(k, m):
    assert supplies_count(2 * k, m) == supplies_count(2 * k - 1, m)


def test_min_height_exact():
    assert min_height(2, 5) == 5


@pytest.mark.parametrize("base, area", [(2, 2), (17, 100), (3, 7), (10, 1), (7, 49)])
def test_min_height_is_smallest(base, area):
    height = min_height(base, area)
    assert height * base >= 2 * area
    assert (height - 1) * base < 2 * area


def test_roman_examples():
    assert roman_to_int("MCMXCIV") == 1994
    assert roman_to_int("LVIII") == 58


def test_roman_single_symbols():
    assert roman_to_int("M") == 1000
    assert roman_to_int("V") == 5


def test_roman_repetition_adds():
    assert roman_to_int("MMM") == 3 * roman_to_int("M")


def test_roman_subtractive_pair():
    assert roman_to_int("IV") == roman_to_int("V") - roman_to_int("I")


def test_roman_unknown_symbol_counts_zero():
    assert roman_to_int("X?") == roman_to_int("X")


@pytest.mark.parametrize("x", [0, 1])
def test_int_sqrt_small(x):
    assert int_sqrt(x) == x


@pytest.mark.parametrize("x", [2, 4, 8, 15, 16, 99, 100, 2**31 - 1, 10**18])
def test_int_sqrt_bounds(x):
    root = int_sqrt(x)
    assert root * root <= x < (root + 1) ** 2


def test_int_sqrt_negative():
    with pytest.raises(ValueError):
        int_sqrt(-4)