"""Helpers for converting between bytes and hexadecimal strings."""

from __future__ import annotations

import binascii
from collections.abc import Iterable

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _decode_strict(text: str) -> bytes:
    """Decode hex text, raising ValueError on odd length or bad characters."""
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"invalid hex string {text!r}: {exc}") from exc


def _decode_prefix(text: str) -> bytes:
    """Decode as many leading hex pairs as are valid, stopping at the first bad one."""
    out = bytearray()
    chars = iter(text)
    for high, low in zip(chars, chars):
        if high not in _HEX_DIGITS or low not in _HEX_DIGITS:
            break
        out.append(int(high + low, 16))
    return bytes(out)


def bytes_to_hex_string(data: bytes) -> str:
    """Encode bytes as a hex string with a ``0x`` prefix."""
    return "0x" + bytes(data).hex()


def hex_string_to_bytes(text: str) -> bytes:
    """Decode a hex string, removing every ``0x`` in it; empty input is an error."""
    if not text:
        raise ValueError("empty hex string")
    return _decode_strict(text.replace("0x", ""))


def to_hex(data: bytes) -> str:
    """Return ``0x``-prefixed hex of *data*; empty input gives ``0x0``."""
    return "0x" + (bytes_to_hex(data) or "0")


def to_hex_array(items: Iterable[bytes]) -> list[str]:
    """Apply :func:`to_hex` to every item."""
    return [to_hex(item) for item in items]


def from_hex(text: str) -> bytes:
    """Decode hex that may carry a ``0x`` prefix and may have odd length."""
    if has_0x_prefix(text):
        text = text[2:]
    if len(text) % 2 == 1:
        text = "0" + text
    return hex_to_bytes(text)


def has_0x_prefix(text: str) -> bool:
    """Tell whether *text* starts with ``0x`` or ``0X``."""
    return len(text) >= 2 and text[0] == "0" and text[1] in "xX"


def bytes_to_hex(data: bytes) -> str:
    """Encode bytes as lower-case hex without a prefix."""
    return bytes(data).hex()


def hex_to_bytes(text: str) -> bytes:
    """Decode plain hex text strictly."""
    return _decode_strict(text)


def hex_to_bytes_fixed(text: str, length: int) -> bytes:
    """Decode hex into exactly *length* bytes, cropping or left-padding as needed."""
    decoded = _decode_prefix(text)
    if len(decoded) >= length:
        return decoded[len(decoded) - length:]
    return decoded.rjust(length, b"\x00")


def right_pad_bytes(data: bytes, length: int) -> bytes:
    """Zero-pad *data* on the right up to *length*."""
    data = bytes(data)
    if length <= len(data):
        return data
    return data.ljust(length, b"\x00")


def left_pad_bytes(data: bytes, length: int) -> bytes:
    """Zero-pad *data* on the left up to *length*."""
    data = bytes(data)
    if length <= len(data):
        return data
    return data.rjust(length, b"\x00")


def trim_left_zeroes(data: bytes) -> bytes:
    """Drop leading zero bytes."""
    return bytes(data).lstrip(b"\x00")