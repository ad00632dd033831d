# tronkit

Offline helpers for working with TRON accounts and data. Everything here
operates on bytes, strings and numbers; nothing talks to the network.

## Installation

```
pip install tronkit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Purpose |
| --- | --- |
| `tronkit.base58` | `encode` / `decode` with the Bitcoin Base58 alphabet, and `encode_check` / `decode_check` with a double-SHA256 checksum. `decode_check` accepts only 25-byte addresses with the `0x41` prefix and a valid checksum, returns the 21 bytes of prefix plus address, and raises `Base58Error` (a `ValueError`) otherwise. |
| `tronkit.hexutils` | Hex conversion and byte padding: `bytes_to_hex_string`, `hex_string_to_bytes`, `to_hex`, `to_hex_array`, `from_hex`, `has_0x_prefix`, `bytes_to_hex`, `hex_to_bytes`, `hex_to_bytes_fixed`, `left_pad_bytes`, `right_pad_bytes`, `trim_left_zeroes`. |
| `tronkit.hashing` | `Hash`, a frozen 32-byte value (`from_bytes`, `from_int`, `from_hex`, `to_int`, `hex`, `terminal_string`), and `keccak256` (legacy Keccak-256). |
| `tronkit.presentation` | `to_json(payload, pretty)` serialises with sorted keys, bytes as Base64 and HTML-sensitive characters escaped, returning `"{}"` when the value cannot be serialised; `json_pretty_format` indents JSON text by two spaces and returns invalid input unchanged. |
| `tronkit.settings` | `Settings` holds the config directory name and debug switches; `Settings.from_env` turns them on when `TRONCTL_GRPC_DEBUG`, `TRONCTL_TX_DEBUG` or `TRONCTL_ALL_DEBUG` is set. Also the error types `NotAbsPathError`, `BadKeyLengthError` and `NoPassphraseError`. |
| `tronkit.abi` | `json_to_abi` parses a JSON ABI array into `ContractABI`, `Entry` and `Param` objects, with `EntryType` and `StateMutability` enums; unknown names map to `UNKNOWN`. |
| `tronkit.trc20` | `parse_numeric_property` and `parse_string_property` decode TRC20 constant-call results, raising `TRC20ParseError`. The module also holds the standard method selectors such as `DECIMALS_SIGNATURE` and `BALANCE_OF_SIGNATURE`. |
| `tronkit.numeric` | `Dec`, a fixed-point decimal with 18 places and half-to-even rounding, plus `power`, `dec_from_string` (accepts `e` notation), `dec_from_hex`, `min_dec`, `max_dec` and `decs_equal`. Results too large raise `DecimalOverflowError`. |
| `tronkit.decimals` | Exact rational arithmetic rounded to 256-bit binary precision: `apply_decimals` (returns the integer and an `Accuracy`), `remove_decimals`, `power`, `root` and `from_string`. |
| `tronkit.hdwallet` | `Bip44Params` (parse and validate `44'/coin'/account'/change/index` paths), `compute_masters_from_seed` and `derive_private_key_for_path`, raising `DerivationError` on bad paths. |
| `tronkit.keys` | `mnemonic_to_seed`, `from_mnemonic_seed_and_passphrase` (path `44'/195'/0'/0/index`), and `KeyPair` with compressed and uncompressed public keys and a hex `KeyDump`. |

## Examples

Build an address from raw bytes and check it round-trips:

```python
from tronkit.base58 import decode_check, encode_check

raw = bytes([0x41]) + bytes(20)
address = encode_check(raw)
assert decode_check(address) == raw
```

Derive the first account key from a mnemonic:

```python
from tronkit.keys import from_mnemonic_seed_and_passphrase

pair = from_mnemonic_seed_and_passphrase(
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about",
    "",
    0,
)
dump = pair.dump()
print(dump.private_key, dump.public_key_compressed)
```

Fixed-point arithmetic:

```python
from tronkit.numeric import Dec

a = Dec.from_str("1.5")
b = Dec.from_str("0.25")
print(a.quo(b))  # 6.000000000000000000
```

Decode a TRC20 `decimals()` result:

```python
from tronkit.trc20 import parse_numeric_property

assert parse_numeric_property("0x" + "00" * 31 + "06") == 6
```

## What this package does not do

There is no node client in tronkit: it cannot query accounts, blocks or
contracts, build or broadcast transactions, or call TRC20 contracts; it only
decodes results you already have. It does not sign transactions, keep an
encrypted keystore, generate mnemonics, or provide a command-line tool.