"""Contract ABI model built from the JSON ABI format."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class EntryType(IntEnum):
    """Kind of an ABI entry."""

    UNKNOWN = 0
    CONSTRUCTOR = 1
    FUNCTION = 2
    EVENT = 3
    FALLBACK = 4


class StateMutability(IntEnum):
    """State mutability of an ABI entry."""

    UNKNOWN = 0
    PURE = 1
    VIEW = 2
    NONPAYABLE = 3
    PAYABLE = 4


_ENTRY_TYPES = {
    "constructor": EntryType.CONSTRUCTOR,
    "function": EntryType.FUNCTION,
    "event": EntryType.EVENT,
    "fallback": EntryType.FALLBACK,
}

_MUTABILITIES = {
    "pure": StateMutability.PURE,
    "view": StateMutability.VIEW,
    "nonpayable": StateMutability.NONPAYABLE,
    "payable": StateMutability.PAYABLE,
}


@dataclass
class Param:
    """An input or output parameter of an ABI entry."""

    indexed: bool = False
    name: str = ""
    type: str = ""


@dataclass
class Entry:
    """One function, event, constructor or fallback in an ABI."""

    anonymous: bool = False
    constant: bool = False
    name: str = ""
    inputs: list[Param] = field(default_factory=list)
    outputs: list[Param] = field(default_factory=list)
    type: EntryType = EntryType.UNKNOWN
    payable: bool = False
    state_mutability: StateMutability = StateMutability.UNKNOWN


@dataclass
class ContractABI:
    """A contract's full ABI."""

    entries: list[Entry] = field(default_factory=list)


def parse_entry_type(name: str) -> EntryType:
    """Map a JSON entry type name to :class:`EntryType`."""
    return _ENTRY_TYPES.get(name, EntryType.UNKNOWN)


def parse_state_mutability(name: str) -> StateMutability:
    """Map a JSON state mutability name to :class:`StateMutability`."""
    return _MUTABILITIES.get(name, StateMutability.UNKNOWN)


def _lookup(obj: dict[str, Any], key: str) -> Any:
    if key in obj:
        return obj[key]
    lowered = key.lower()
    return next((value for name, value in obj.items() if name.lower() == lowered), None)


def _typed(obj: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = _lookup(obj, key)
    if value is None:
        return default
    if type(value) is not kind:
        raise ValueError(f"cannot unmarshal {type(value).__name__} into field {key!r}")
    return value


def _params(obj: dict[str, Any], key: str) -> list[Param]:
    value = _lookup(obj, key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be an array")
    params = []
    for item in value:
        if item is None:
            params.append(Param())
            continue
        if not isinstance(item, dict):
            raise ValueError(f"elements of {key!r} must be objects")
        params.append(
            Param(
                indexed=_typed(item, "indexed", bool, False),
                name=_typed(item, "name", str, ""),
                type=_typed(item, "type", str, ""),
            )
        )
    return params


def _entry(obj: Any) -> Entry:
    if obj is None:
        return Entry()
    if not isinstance(obj, dict):
        raise ValueError("ABI entries must be objects")
    return Entry(
        anonymous=_typed(obj, "anonymous", bool, False),
        constant=_typed(obj, "constant", bool, False),
        name=_typed(obj, "name", str, ""),
        inputs=_params(obj, "inputs"),
        outputs=_params(obj, "outputs"),
        type=parse_entry_type(_typed(obj, "type", str, "")),
        payable=_typed(obj, "payable", bool, False),
        state_mutability=parse_state_mutability(_typed(obj, "stateMutability", str, "")),
    )


def json_to_abi(text: str) -> ContractABI:
    """Parse a JSON ABI array into a :class:`ContractABI`."""
    data = json.loads(text)
    if data is None:
        return ContractABI()
    if not isinstance(data, list):
        raise ValueError("ABI JSON must be an array")
    return ContractABI(entries=[_entry(item) for item in data])