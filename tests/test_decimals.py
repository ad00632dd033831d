from fractions import Fraction

import pytest

from tronkit.decimals import (
    Accuracy,
    apply_decimals,
    from_string,
    power,
    remove_decimals,
    root,
)

TOLERANCE = Fraction(1, 2 ** 250)


def _is_dyadic(value):
    den = value.denominator
    return den & (den - 1) == 0


def test_from_string_exact_binary_value():
    assert from_string("1.5") == Fraction(3, 2)
    assert from_string("-0.25") == Fraction(-1, 4)
    assert from_string("2.5e1") == Fraction(25)


def test_from_string_rounds_to_256_bits():
    value = from_string("0.1")
    assert _is_dyadic(value)
    assert value.numerator.bit_length() <= 256
    assert abs(value - Fraction(1, 10)) <= Fraction(1, 10) / 2 ** 255


@pytest.mark.parametrize("text", ["", "abc", "1_000", " 1", "1e", "Inf"])
def test_from_string_rejects_bad_input(text):
    with pytest.raises(ValueError):
        from_string(text)


def test_power_exact_for_dyadic_values():
    base = Fraction(3, 2)
    assert power(base, 5) == base ** 5
    assert power(3, 4) == Fraction(3) ** 4


def test_power_below_two_returns_value():
    assert power(7, 1) == 7
    assert power(7, 0) == 7


def test_power_result_is_rounded():
    third = power(Fraction(1, 3), 2)
    assert _is_dyadic(third)
    assert abs(third - Fraction(1, 9)) < TOLERANCE


@pytest.mark.parametrize("value, n", [(2, 2), (Fraction(1, 4), 2), (10, 3), (1000, 5)])
def test_root_inverts_power(value, n):
    result = root(value, n)
    assert result > 0
    assert abs(result ** n - value) < value * TOLERANCE


def test_root_of_degree_one():
    assert root(Fraction(5, 4), 1) == Fraction(5, 4)


def test_root_errors():
    with pytest.raises(ValueError):
        root(0, 2)
    with pytest.raises(ValueError):
        root(-8, 3)
    with pytest.raises(ValueError):
        root(5, 0)


def test_apply_and_remove_round_trip():
    value = from_string("1.5")
    amount, accuracy = apply_decimals(value, 6)
    assert accuracy is Accuracy.EXACT
    assert remove_decimals(amount, 6) == value


def test_apply_decimals_truncates():
    assert apply_decimals(from_string("1.25"), 1) == (12, Accuracy.BELOW)
    assert apply_decimals(from_string("-1.25"), 1) == (-12, Accuracy.ABOVE)


def test_apply_decimals_zero_places_matches_one_place():
    assert apply_decimals(Fraction(1, 2), 0) == apply_decimals(Fraction(1, 2), 1)


def test_remove_decimals_is_close():
    result = remove_decimals(1, 1)
    assert _is_dyadic(result)
    assert abs(result - Fraction(1, 10)) < TOLERANCE