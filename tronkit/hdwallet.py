"""Hierarchical deterministic key derivation along BIP 32 / BIP 44 paths."""

from __future__ import annotations

import hashlib
import hmac
import re
from dataclasses import dataclass

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
HARDENED_OFFSET = 0x80000000
KEY_LENGTH = 32

# HMAC domain string fixed by BIP 32 for master key generation.
_BIP32_DOMAIN = b"Bitcoin seed"

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT32_MASK = 0xFFFFFFFF
_INTEGER = re.compile(r"[+-]?[0-9]+")


class DerivationError(ValueError):
    """Raised when a derivation path or key cannot be used."""


def _atoi(text: str) -> int:
    """Parse a signed decimal that fits in 64 bits."""
    if not _INTEGER.fullmatch(text):
        raise DerivationError(f"invalid syntax: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise DerivationError(f"value out of range: {text!r}")
    return value


def _hardened_int(field: str) -> int:
    if field.endswith("'"):
        field = field[:-1]
    value = _atoi(field)
    if value < 0:
        raise DerivationError(f"fields must not be negative. got {value}")
    return value & _UINT32_MASK


def _is_hardened(field: str) -> bool:
    return field.endswith("'")


@dataclass(frozen=True)
class Bip44Params:
    """The five levels of a BIP 44 path: purpose'/coin_type'/account'/change/address_index."""

    purpose: int
    coin_type: int
    account: int
    change: bool
    address_index: int

    @classmethod
    def from_path(cls, path: str) -> Bip44Params:
        """Parse and validate a path such as ``44'/195'/0'/0/0``."""
        fields = path.split("/")
        if len(fields) != 5:
            raise DerivationError(f"path length is wrong. Expected 5, got {len(fields)}")
        purpose, coin_type, account, change, address_index = (
            _hardened_int(field) for field in fields
        )
        if fields[0] != "44'":
            raise DerivationError(f"first field in path must be 44', got {fields[0]}")
        if not _is_hardened(fields[1]) or not _is_hardened(fields[2]):
            raise DerivationError(
                "second and third field in path must be hardened (ie. contain the suffix ', "
                f"got {fields[1]} and {fields[2]}"
            )
        if _is_hardened(fields[3]) or _is_hardened(fields[4]):
            raise DerivationError(
                "fourth and fifth field in path must not be hardened (ie. not contain the "
                f"suffix ', got {fields[3]} and {fields[4]}"
            )
        if change not in (0, 1):
            raise DerivationError("change field can only be 0 or 1")
        return cls(purpose, coin_type, account, change > 0, address_index)

    @classmethod
    def fundraiser(cls, account: int, coin_type: int, address_index: int) -> Bip44Params:
        """Build ``44'/coin_type'/account'/0/address_index``."""
        return cls(44, coin_type, account, False, address_index)

    def derivation_path(self) -> list[int]:
        """Return the five path levels as integers."""
        return [
            self.purpose,
            self.coin_type,
            self.account,
            1 if self.change else 0,
            self.address_index,
        ]

    def __str__(self) -> str:
        change = "1" if self.change else "0"
        return f"{self.purpose}'/{self.coin_type}'/{self.account}'/{change}/{self.address_index}"


def _i64(key: bytes, data: bytes) -> tuple[bytes, bytes]:
    digest = hmac.new(key, data, hashlib.sha512).digest()
    return digest[:32], digest[32:]


def _compressed_public_key(private_key: bytes) -> bytes:
    scalar = int.from_bytes(private_key, "big") % CURVE_ORDER
    if scalar == 0:
        raise DerivationError("private key is zero modulo the curve order")
    key = ec.derive_private_key(scalar, ec.SECP256K1())
    return key.public_key().public_bytes(
        serialization.Encoding.X962, serialization.PublicFormat.CompressedPoint
    )


def _add_scalars(a: bytes, b: bytes) -> bytes:
    total = (int.from_bytes(a, "big") + int.from_bytes(b, "big")) % CURVE_ORDER
    return total.to_bytes(KEY_LENGTH, "big")


def _derive_private_key(
    private_key: bytes, chain_code: bytes, index: int, harden: bool
) -> tuple[bytes, bytes]:
    if harden:
        index |= HARDENED_OFFSET
        data = b"\x00" + private_key
    else:
        data = _compressed_public_key(private_key)
    data += index.to_bytes(4, "big")
    tweak, new_chain_code = _i64(chain_code, data)
    return _add_scalars(private_key, tweak), new_chain_code


def compute_masters_from_seed(
    seed: bytes, master_secret: bytes = _BIP32_DOMAIN
) -> tuple[bytes, bytes]:
    """Return the master private key and chain code for *seed*."""
    return _i64(bytes(master_secret), bytes(seed))


def derive_private_key_for_path(private_key: bytes, chain_code: bytes, path: str) -> bytes:
    """Follow a BIP 32 path such as ``44'/195'/0'/0/0`` from a key and chain code."""
    data = bytes(private_key)
    chain = bytes(chain_code)
    if len(data) != KEY_LENGTH or len(chain) != KEY_LENGTH:
        raise DerivationError(
            f"expected a (secp256k1) key of length {KEY_LENGTH}, got length: {len(data)}"
        )
    for part in path.split("/"):
        if not part:
            raise DerivationError("invalid BIP 32 path: empty level")
        harden = part.endswith("'")
        if harden:
            part = part[:-1]
        try:
            index = _atoi(part)
        except DerivationError as exc:
            raise DerivationError(f"invalid BIP 32 path: {exc}") from exc
        if index < 0:
            raise DerivationError("invalid BIP 32 path: index negative ot too large")
        data, chain = _derive_private_key(data, chain, index & _UINT32_MASK, harden)
    return data