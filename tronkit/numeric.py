"""Fixed-point decimals with 18 places of precision and banker's rounding."""

from __future__ import annotations

import json
import re
from collections.abc import Sequence
from dataclasses import dataclass

PRECISION = 18
DECIMAL_PRECISION_BITS = 60

_PRECISION_REUSE = 10 ** PRECISION
_FIVE_PRECISION = _PRECISION_REUSE // 2
_MAX_BITS = 255 + DECIMAL_PRECISION_BITS
_PRECISION_MULTIPLIERS = tuple(10 ** (PRECISION - prec) for prec in range(PRECISION + 1))

_INTEGER = re.compile(r"[+-]?[0-9]+")
_HEX_INTEGER = re.compile(r"[+-]?[0-9a-fA-F]+")
_EXPONENT = re.compile(r"[0-9]+\.?[0-9]*e-?[0-9]+")


class DecimalOverflowError(OverflowError):
    """Raised when a decimal result grows beyond the supported bit length."""


def _truncated_div(numerator: int, denominator: int) -> int:
    """Divide, rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _chop_and_round(value: int) -> int:
    """Drop the precision digits, rounding half to even."""
    if value < 0:
        return -_chop_and_round(-value)
    quotient, remainder = divmod(value, _PRECISION_REUSE)
    if remainder == 0 or remainder < _FIVE_PRECISION:
        return quotient
    if remainder > _FIVE_PRECISION:
        return quotient + 1
    return quotient + (quotient & 1)


def _chop_and_round_up(value: int) -> int:
    """Drop the precision digits, rounding toward positive infinity."""
    if value < 0:
        return -(-value // _PRECISION_REUSE)
    quotient, remainder = divmod(value, _PRECISION_REUSE)
    return quotient + 1 if remainder else quotient


def _chop_and_truncate(value: int) -> int:
    """Drop the precision digits, rounding toward zero."""
    return _truncated_div(value, _PRECISION_REUSE)


def _precision_multiplier(prec: int) -> int:
    if prec > PRECISION:
        raise ValueError(f"too much precision, maximum {PRECISION}, provided {prec}")
    if prec < 0:
        raise ValueError(f"precision must not be negative, provided {prec}")
    return _PRECISION_MULTIPLIERS[prec]


@dataclass(frozen=True, order=True, repr=False)
class Dec:
    """A signed decimal stored as an integer scaled by 10**18."""

    raw: int = 0

    @classmethod
    def _checked(cls, value: int) -> Dec:
        if value.bit_length() > _MAX_BITS:
            raise DecimalOverflowError("Int overflow")
        return cls(value)

    @classmethod
    def zero(cls) -> Dec:
        """Return 0."""
        return cls(0)

    @classmethod
    def one(cls) -> Dec:
        """Return 1."""
        return cls(_PRECISION_REUSE)

    @classmethod
    def smallest(cls) -> Dec:
        """Return the smallest positive decimal, 10**-18."""
        return cls(1)

    @classmethod
    def from_int(cls, value: int, prec: int = 0) -> Dec:
        """Build ``value * 10**-prec``; *prec* may be at most 18."""
        return cls(int(value) * _precision_multiplier(prec))

    @classmethod
    def from_str(cls, text: str) -> Dec:
        """Parse ``[-]digits[.digits]`` with at most 18 decimal places."""
        if not text:
            raise ValueError("decimal string is empty")
        negative = text.startswith("-")
        if negative:
            text = text[1:]
        if not text:
            raise ValueError("decimal string is empty")

        parts = text.split(".")
        combined = parts[0]
        decimals = 0
        if len(parts) == 2:
            decimals = len(parts[1])
            if decimals == 0 or not combined:
                raise ValueError("bad decimal length")
            combined += parts[1]
        elif len(parts) > 2:
            raise ValueError("too many periods to be a decimal string")

        if decimals > PRECISION:
            raise ValueError(
                f"too much precision, maximum {PRECISION}, len decimal {decimals}"
            )
        combined += "0" * (PRECISION - decimals)
        if not _INTEGER.fullmatch(combined):
            raise ValueError(f"bad string to integer conversion, combinedStr: {combined}")
        value = int(combined)
        return cls(-value if negative else value)

    @classmethod
    def from_json(cls, text: str | bytes) -> Dec:
        """Decode a decimal from a JSON string value."""
        data = json.loads(text)
        if data is None:
            data = ""
        if not isinstance(data, str):
            raise ValueError("decimal JSON value must be a string")
        return cls.from_str(data)

    def is_zero(self) -> bool:
        """Tell whether the value is zero."""
        return self.raw == 0

    def is_negative(self) -> bool:
        """Tell whether the value is below zero."""
        return self.raw < 0

    def is_positive(self) -> bool:
        """Tell whether the value is above zero."""
        return self.raw > 0

    def __neg__(self) -> Dec:
        return Dec(-self.raw)

    def __abs__(self) -> Dec:
        return Dec(abs(self.raw))

    def __add__(self, other: object) -> Dec:
        if not isinstance(other, Dec):
            return NotImplemented
        return Dec._checked(self.raw + other.raw)

    def __sub__(self, other: object) -> Dec:
        if not isinstance(other, Dec):
            return NotImplemented
        return Dec._checked(self.raw - other.raw)

    def __mul__(self, other: object) -> Dec:
        if not isinstance(other, Dec):
            return NotImplemented
        return Dec._checked(_chop_and_round(self.raw * other.raw))

    def __truediv__(self, other: object) -> Dec:
        if not isinstance(other, Dec):
            return NotImplemented
        return self.quo(other)

    def mul_truncate(self, other: Dec) -> Dec:
        """Multiply, truncating the extra digits."""
        return Dec._checked(_chop_and_truncate(self.raw * other.raw))

    def mul_int(self, value: int) -> Dec:
        """Multiply by a plain integer."""
        return Dec._checked(self.raw * int(value))

    def _scaled_quotient(self, other: Dec) -> int:
        return _truncated_div(self.raw * _PRECISION_REUSE * _PRECISION_REUSE, other.raw)

    def quo(self, other: Dec) -> Dec:
        """Divide, rounding half to even."""
        return Dec._checked(_chop_and_round(self._scaled_quotient(other)))

    def quo_truncate(self, other: Dec) -> Dec:
        """Divide, rounding toward zero."""
        return Dec._checked(_chop_and_truncate(self._scaled_quotient(other)))

    def quo_round_up(self, other: Dec) -> Dec:
        """Divide, rounding toward positive infinity."""
        return Dec._checked(_chop_and_round_up(self._scaled_quotient(other)))

    def quo_int(self, value: int) -> Dec:
        """Divide by a plain integer, rounding toward zero."""
        return Dec(_truncated_div(self.raw, int(value)))

    def is_integer(self) -> bool:
        """Tell whether the fractional digits are all zero."""
        return self.raw % _PRECISION_REUSE == 0

    def round_int(self) -> int:
        """Round to an integer, half to even."""
        return _chop_and_round(self.raw)

    def truncate_int(self) -> int:
        """Drop the fractional part, rounding toward zero."""
        return _chop_and_truncate(self.raw)

    def truncate_dec(self) -> Dec:
        """Drop the fractional part and keep the result as a decimal."""
        return Dec.from_int(self.truncate_int())

    def ceil(self) -> Dec:
        """Return the smallest integer not below the value."""
        quotient = _truncated_div(self.raw, _PRECISION_REUSE)
        remainder = self.raw - quotient * _PRECISION_REUSE
        if remainder <= 0:
            return Dec.from_int(quotient)
        return Dec.from_int(quotient + 1)

    def to_json(self) -> str:
        """Encode as a JSON string value."""
        return json.dumps(str(self))

    def __str__(self) -> str:
        digits = str(abs(self.raw))
        if len(digits) <= PRECISION:
            body = "0." + digits.rjust(PRECISION, "0")
        else:
            point = len(digits) - PRECISION
            body = f"{digits[:point]}.{digits[point:]}"
        return "-" + body if self.raw < 0 else body

    def __repr__(self) -> str:
        return f"Dec('{self}')"


def decs_equal(first: Sequence[Dec], second: Sequence[Dec]) -> bool:
    """Tell whether two sequences hold equal decimals in the same order."""
    return len(first) == len(second) and all(a == b for a, b in zip(first, second))


def min_dec(first: Dec, second: Dec) -> Dec:
    """Return the smaller of two decimals."""
    return first if first < second else second


def max_dec(first: Dec, second: Dec) -> Dec:
    """Return the larger of two decimals."""
    return second if first < second else first


def power(base: Dec, exp: int) -> Dec:
    """Raise *base* to an integer power by repeated squaring."""
    if exp < 0:
        return power(Dec.from_int(1).quo(base), -exp)
    result = Dec.from_int(1)
    while True:
        if exp % 2 == 1:
            result = result * base
        exp >>= 1
        if exp == 0:
            break
        base = base * base
    return result


def dec_from_string(text: str) -> Dec:
    """Parse a non-negative decimal that may use ``e`` notation or start with a dot."""
    if text.startswith("-"):
        raise ValueError(f"can not be negative: {text}")
    if _EXPONENT.search(text):
        tokens = text.split("e")
        mantissa = Dec.from_str(tokens[0])
        exponent = int(tokens[1]) if _INTEGER.fullmatch(tokens[1]) else 0
        return mantissa * power(Dec.from_int(10), exponent)
    if text.startswith("."):
        text = "0" + text
    return Dec.from_str(text)


def _parse_hex(text: str) -> int:
    if not _HEX_INTEGER.fullmatch(text):
        raise ValueError(f"invalid hex number {text!r}")
    return int(text, 16)


def dec_from_hex(text: str) -> Dec:
    """Parse a hex integer, in two halves, into a whole-number decimal."""
    if text.startswith("0x"):
        text = text[2:]
    half = len(text) // 2
    right_text = text[half:]
    right = _parse_hex(right_text)
    if half == 0:
        return Dec.from_int(right)
    left = _parse_hex(text[:half])
    scale = power(Dec.from_int(16), len(right_text))
    return Dec.from_int(left) * scale + Dec.from_int(right)