"""Binary floating-point helpers with 256 bits of precision for token amounts."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from enum import IntEnum
from fractions import Fraction
from numbers import Real

PRECISION = 256

_NUMBER = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class Accuracy(IntEnum):
    """How a conversion result relates to the exact value."""

    BELOW = -1
    EXACT = 0
    ABOVE = 1


def _round(value: Fraction) -> Fraction:
    """Round to the nearest value with a 256-bit mantissa, ties to even."""
    if value == 0:
        return Fraction(0)
    sign = -1 if value < 0 else 1
    num, den = abs(value.numerator), value.denominator
    exp = num.bit_length() - den.bit_length() - PRECISION
    while True:
        scaled_num = num << -exp if exp < 0 else num
        scaled_den = den << exp if exp > 0 else den
        mantissa, remainder = divmod(scaled_num, scaled_den)
        if mantissa < (1 << PRECISION):
            break
        exp += 1
    twice = 2 * remainder
    if twice > scaled_den or (twice == scaled_den and mantissa & 1):
        mantissa += 1
    scaled = Fraction(mantissa << exp) if exp >= 0 else Fraction(mantissa, 1 << -exp)
    return sign * scaled


def _to_float(value: Real | Decimal) -> Fraction:
    return _round(Fraction(value))


def _mul(a: Fraction, b: Fraction) -> Fraction:
    return _round(a * b)


def _div(a: Fraction, b: Fraction) -> Fraction:
    return _round(a / b)


def _add(a: Fraction, b: Fraction) -> Fraction:
    return _round(a + b)


def _sub(a: Fraction, b: Fraction) -> Fraction:
    return _round(a - b)


def power(value: Real | Decimal, exponent: int) -> Fraction:
    """Multiply *value* by itself ``exponent - 1`` times; exponents below 2 return *value*."""
    base = _to_float(value)
    result = base
    for _ in range(exponent - 1):
        result = _mul(result, base)
    return result


def root(value: Real | Decimal, n: int) -> Fraction:
    """Return the *n*-th root of a positive value by Newton's method."""
    if n < 1:
        raise ValueError(f"root degree must be at least 1, got {n}")
    a = _to_float(value)
    if a <= 0:
        raise ValueError("root requires a positive value")
    limit = power(2, 256)
    n1 = n - 1
    n1f = Fraction(n1)
    rn = _div(Fraction(1), Fraction(n))
    x = Fraction(1)
    while True:
        potx, t2 = _div(Fraction(1), x), a
        b = n1
        while b > 0:
            if b & 1:
                t2 = _mul(t2, potx)
            potx = _mul(potx, potx)
            b >>= 1
        x0, x = x, _mul(rn, _add(_mul(n1f, x), t2))
        if _mul(abs(_sub(x, x0)), limit) < x:
            return x


def from_string(text: str) -> Fraction:
    """Parse a decimal number string, rounded to 256 bits of precision."""
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"invalid number {text!r}")
    return _round(Fraction(Decimal(text)))


def apply_decimals(value: Real | Decimal, places: int) -> tuple[int, Accuracy]:
    """Scale *value* up by ``10**places`` and truncate it to an integer."""
    product = _mul(_to_float(value), power(10, places))
    integer = math.trunc(product)
    if integer == product:
        accuracy = Accuracy.EXACT
    elif integer < product:
        accuracy = Accuracy.BELOW
    else:
        accuracy = Accuracy.ABOVE
    return integer, accuracy


def remove_decimals(value: int, places: int) -> Fraction:
    """Scale an integer amount down by ``10**places``."""
    return _div(Fraction(int(value)), power(10, places))