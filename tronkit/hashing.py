"""Fixed-size 32-byte hashes and Keccak-256."""

from __future__ import annotations

from dataclasses import dataclass

from Crypto.Hash import keccak

from tronkit.hexutils import bytes_to_hex_string, hex_string_to_bytes

HASH_LENGTH = 32


@dataclass(frozen=True)
class Hash:
    """A 32-byte hash value."""

    data: bytes = bytes(HASH_LENGTH)

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) != HASH_LENGTH:
            raise ValueError(f"hash must be {HASH_LENGTH} bytes, got {len(data)}")
        object.__setattr__(self, "data", data)

    @classmethod
    def from_bytes(cls, data: bytes) -> Hash:
        """Build a hash from bytes, cropping from the left or zero-padding on the left."""
        tail = bytes(data)[-HASH_LENGTH:]
        return cls(tail.rjust(HASH_LENGTH, b"\x00"))

    @classmethod
    def from_int(cls, value: int) -> Hash:
        """Build a hash from the big-endian bytes of the magnitude of *value*."""
        magnitude = abs(value)
        return cls.from_bytes(magnitude.to_bytes((magnitude.bit_length() + 7) // 8, "big"))

    @classmethod
    def from_hex(cls, text: str) -> Hash:
        """Build a hash from a hex string."""
        return cls.from_bytes(hex_string_to_bytes(text))

    def to_int(self) -> int:
        """Return the hash as an unsigned big-endian integer."""
        return int.from_bytes(self.data, "big")

    def hex(self) -> str:
        """Return ``0x``-prefixed hex of the hash."""
        return bytes_to_hex_string(self.data)

    def terminal_string(self) -> str:
        """Return a shortened form for console output."""
        return f"{self.data[:3].hex()}\u2026{self.data[29:].hex()}"

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.hex()


def keccak256(data: bytes) -> bytes:
    """Return the legacy Keccak-256 digest of *data*."""
    return keccak.new(digest_bits=256, data=bytes(data)).digest()