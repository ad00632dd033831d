"""Base58 and Base58Check encoding for account addresses."""

from __future__ import annotations

import hashlib

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
ADDRESS_LENGTH = 20
PREFIX_MAINNET = 0x41
_CHECKSUM_LENGTH = 4

_INDEX = {char: value for value, char in enumerate(ALPHABET)}


class Base58Error(ValueError):
    """Raised when Base58 text cannot be decoded or fails its check."""


def _checksum(data: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()[:_CHECKSUM_LENGTH]


def encode(data: bytes) -> str:
    """Encode bytes with the Bitcoin Base58 alphabet."""
    data = bytes(data)
    body = data.lstrip(b"\x00")
    zeros = len(data) - len(body)
    number = int.from_bytes(body, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(ALPHABET[remainder])
    return ALPHABET[0] * zeros + "".join(reversed(digits))


def encode_check(data: bytes) -> str:
    """Append a double-SHA256 checksum and Base58-encode the result."""
    data = bytes(data)
    return encode(data + _checksum(data))


def decode(text: str) -> bytes:
    """Decode Base58 text into bytes."""
    number = 0
    for char in text:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise Base58Error(f"invalid base58 character {char!r}") from None
    zeros = len(text) - len(text.lstrip(ALPHABET[0]))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\x00" * zeros + body


def decode_check(text: str) -> bytes:
    """Decode a Base58Check address and return its 21 bytes (prefix plus address)."""
    decoded = decode(text)
    if len(decoded) < _CHECKSUM_LENGTH:
        raise Base58Error("b58 check error")
    if len(decoded) != ADDRESS_LENGTH + _CHECKSUM_LENGTH + 1:
        raise Base58Error(f"invalid address length: {len(decoded)}")
    if decoded[0] != PREFIX_MAINNET:
        raise Base58Error("invalid prefix")
    payload, checksum = decoded[:-_CHECKSUM_LENGTH], decoded[-_CHECKSUM_LENGTH:]
    if _checksum(payload) != checksum:
        raise Base58Error("b58 check error")
    return payload