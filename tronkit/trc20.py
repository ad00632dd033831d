"""Decoding of TRC20 constant-call results."""

from __future__ import annotations

from tronkit.hexutils import has_0x_prefix, hex_to_bytes

TRANSFER_METHOD_SIGNATURE = "0xa9059cbb"
APPROVE_METHOD_SIGNATURE = "0x095ea7b3"
TRANSFER_EVENT_SIGNATURE = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
NAME_SIGNATURE = "0x06fdde03"
SYMBOL_SIGNATURE = "0x95d89b41"
DECIMALS_SIGNATURE = "0x313ce567"
BALANCE_OF_SIGNATURE = "0x70a08231"

_WORD_HEX = 64
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_UINT64_MASK = (1 << 64) - 1


class TRC20ParseError(ValueError):
    """Raised when a TRC20 call result cannot be decoded."""


def _strip_prefix(data: str) -> str:
    return data[2:] if has_0x_prefix(data) else data


def _parse_signed_hex(text: str) -> int | None:
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits or not set(digits) <= _HEX_DIGITS:
        return None
    return int(text, 16)


def parse_numeric_property(data: str) -> int:
    """Decode a 32-byte hex word into an integer; empty data decodes to 0."""
    data = _strip_prefix(data)
    if len(data) == _WORD_HEX:
        value = _parse_signed_hex(data)
        if value is not None:
            return value
    if not data:
        return 0
    raise TRC20ParseError(f"cannot parse {data}")


def parse_string_property(data: str) -> str:
    """Decode an ABI-encoded string, or a single 32-byte word of UTF-8 text."""
    data = _strip_prefix(data)
    if len(data) > 2 * _WORD_HEX:
        try:
            length = abs(parse_numeric_property(data[_WORD_HEX:2 * _WORD_HEX])) & _UINT64_MASK
        except TRC20ParseError:
            length = None
        if length is not None and 2 * length <= len(data) - 2 * _WORD_HEX:
            try:
                raw = hex_to_bytes(data[2 * _WORD_HEX:2 * _WORD_HEX + 2 * length])
            except ValueError:
                pass
            else:
                return raw.decode("utf-8", errors="replace")
    elif len(data) == _WORD_HEX:
        try:
            raw = hex_to_bytes(data)
        except ValueError:
            pass
        else:
            end = raw.find(b"\x00")
            if end > 0:
                raw = raw[:end]
            try:
                return raw.decode("utf-8")
            except UnicodeDecodeError:
                pass
    raise TRC20ParseError(f"cannot parse {data},")