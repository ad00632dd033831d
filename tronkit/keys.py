"""secp256k1 key pairs and key derivation from mnemonic phrases."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from tronkit.hdwallet import (
    CURVE_ORDER,
    KEY_LENGTH,
    compute_masters_from_seed,
    derive_private_key_for_path,
)
from tronkit.hexutils import bytes_to_hex_string

TRON_COIN_TYPE = 195
_SEED_ITERATIONS = 2048
_SEED_LENGTH = 64


@dataclass(frozen=True)
class KeyDump:
    """Hex encodings of a key pair, each with a ``0x`` prefix."""

    private_key: str
    public_key_compressed: str
    public_key: str


@dataclass(frozen=True)
class KeyPair:
    """A secp256k1 private key held as 32 big-endian bytes."""

    private_key: bytes

    @classmethod
    def from_private_bytes(cls, data: bytes) -> KeyPair:
        """Build a key pair from big-endian bytes, reduced modulo the curve order."""
        scalar = int.from_bytes(bytes(data), "big") % CURVE_ORDER
        if scalar == 0:
            raise ValueError("private key must not be zero modulo the curve order")
        return cls(scalar.to_bytes(KEY_LENGTH, "big"))

    def _public_bytes(self, fmt: serialization.PublicFormat) -> bytes:
        scalar = int.from_bytes(self.private_key, "big")
        key = ec.derive_private_key(scalar, ec.SECP256K1())
        return key.public_key().public_bytes(serialization.Encoding.X962, fmt)

    def public_key_compressed(self) -> bytes:
        """Return the 33-byte compressed public key."""
        return self._public_bytes(serialization.PublicFormat.CompressedPoint)

    def public_key_uncompressed(self) -> bytes:
        """Return the 65-byte uncompressed public key."""
        return self._public_bytes(serialization.PublicFormat.UncompressedPoint)

    def dump(self) -> KeyDump:
        """Return the private and public keys as hex strings."""
        return KeyDump(
            bytes_to_hex_string(self.private_key),
            bytes_to_hex_string(self.public_key_compressed()),
            bytes_to_hex_string(self.public_key_uncompressed()),
        )


def mnemonic_to_seed(mnemonic: str, passphrase: str = "") -> bytes:
    """Stretch a mnemonic and passphrase into a 64-byte seed."""
    return hashlib.pbkdf2_hmac(
        "sha512",
        mnemonic.encode("utf-8"),
        ("mnemonic" + passphrase).encode("utf-8"),
        _SEED_ITERATIONS,
        _SEED_LENGTH,
    )


def from_mnemonic_seed_and_passphrase(mnemonic: str, passphrase: str, index: int) -> KeyPair:
    """Derive the key at ``44'/195'/0'/0/index`` from a mnemonic and passphrase."""
    seed = mnemonic_to_seed(mnemonic, passphrase)
    master, chain_code = compute_masters_from_seed(seed, b"Bitcoin seed")
    private = derive_private_key_for_path(
        master, chain_code, f"44'/{TRON_COIN_TYPE}'/0'/0/{index}"
    )
    return KeyPair.from_private_bytes(private)