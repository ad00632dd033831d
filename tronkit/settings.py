"""Shared defaults, debug switches and error types."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_CONFIG_ACCOUNT_ALIASES_DIR_NAME = "account-keys"
DEFAULT_PASSPHRASE = ""
SECP256K1_PRIVATE_KEY_BYTES_LENGTH = 32
AMOUNT_DECIMAL_POINT = 6
DEFAULT_CONFIG_DIR_NAME = ".tronctl"

ENV_GRPC_DEBUG = "TRONCTL_GRPC_DEBUG"
ENV_TX_DEBUG = "TRONCTL_TX_DEBUG"
ENV_ALL_DEBUG = "TRONCTL_ALL_DEBUG"


class NotAbsPathError(ValueError):
    """Raised when a key path is not absolute."""

    def __init__(self, message: str = "keypath is not absolute path") -> None:
        super().__init__(message)


class BadKeyLengthError(ValueError):
    """Raised when a private key has the wrong length."""

    def __init__(self, message: str = "Invalid private key (wrong length)") -> None:
        super().__init__(message)


class NoPassphraseError(FileNotFoundError):
    """Raised when no passphrase file can be found."""

    def __init__(self, message: str = "found no passphrase file") -> None:
        super().__init__(message)


@dataclass
class Settings:
    """Runtime settings: configuration directory and debug switches."""

    config_dir_name: str = DEFAULT_CONFIG_DIR_NAME
    debug_grpc: bool = False
    debug_transaction: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings, turning on debug flags whose variables are present."""
        env = os.environ if environ is None else environ
        settings = cls(
            debug_grpc=ENV_GRPC_DEBUG in env,
            debug_transaction=ENV_TX_DEBUG in env,
        )
        if ENV_ALL_DEBUG in env:
            settings.enable_all_verbose()
        return settings

    def enable_all_verbose(self) -> None:
        """Turn on every debug flag."""
        self.debug_grpc = True
        self.debug_transaction = True