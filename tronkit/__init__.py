"""Offline helpers for TRON addresses, hex and hashes, decimals, ABI and TRC20 data, and BIP44 keys."""

__version__ = "0.1.0"