import json

import pytest

from tronkit.abi import (
    ContractABI,
    Entry,
    EntryType,
    Param,
    StateMutability,
    json_to_abi,
    parse_entry_type,
    parse_state_mutability,
)

SAMPLE = json.dumps(
    [
        {
            "constant": True,
            "inputs": [{"name": "who", "type": "address"}],
            "name": "balanceOf",
            "outputs": [{"name": "", "type": "uint256"}],
            "payable": False,
            "stateMutability": "view",
            "type": "function",
        },
        {
            "anonymous": False,
            "inputs": [
                {"indexed": True, "name": "from", "type": "address"},
                {"indexed": True, "name": "to", "type": "address"},
                {"indexed": False, "name": "value", "type": "uint256"},
            ],
            "name": "Transfer",
            "type": "event",
        },
        {"inputs": [], "payable": True, "stateMutability": "payable", "type": "constructor"},
    ]
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("constructor", EntryType.CONSTRUCTOR),
        ("function", EntryType.FUNCTION),
        ("event", EntryType.EVENT),
        ("fallback", EntryType.FALLBACK),
        ("receive", EntryType.UNKNOWN),
        ("", EntryType.UNKNOWN),
    ],
)
def test_parse_entry_type(name, expected):
    assert parse_entry_type(name) is expected


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("pure", StateMutability.PURE),
        ("view", StateMutability.VIEW),
        ("nonpayable", StateMutability.NONPAYABLE),
        ("payable", StateMutability.PAYABLE),
        ("View", StateMutability.UNKNOWN),
    ],
)
def test_parse_state_mutability(name, expected):
    assert parse_state_mutability(name) is expected


def test_json_to_abi_function():
    abi = json_to_abi(SAMPLE)
    assert len(abi.entries) == 3
    function = abi.entries[0]
    assert function.name == "balanceOf"
    assert function.constant is True
    assert function.type is EntryType.FUNCTION
    assert function.state_mutability is StateMutability.VIEW
    assert function.inputs == [Param(indexed=False, name="who", type="address")]
    assert function.outputs == [Param(name="", type="uint256")]


def test_json_to_abi_event():
    event = json_to_abi(SAMPLE).entries[1]
    assert event.type is EntryType.EVENT
    assert [p.indexed for p in event.inputs] == [True, True, False]
    assert [p.name for p in event.inputs] == ["from", "to", "value"]
    assert event.outputs == []
    assert event.state_mutability is StateMutability.UNKNOWN


def test_json_to_abi_constructor():
    ctor = json_to_abi(SAMPLE).entries[2]
    assert ctor.type is EntryType.CONSTRUCTOR
    assert ctor.payable is True
    assert ctor.name == ""


def test_json_to_abi_null_and_empty():
    assert json_to_abi("null") == ContractABI()
    assert json_to_abi("[]").entries == []
    assert json_to_abi("[null]").entries == [Entry()]


def test_json_to_abi_case_insensitive_keys():
    abi = json_to_abi('[{"Name": "f", "TYPE": "function"}]')
    assert abi.entries[0].name == "f"
    assert abi.entries[0].type is EntryType.FUNCTION


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        '{"name": "f"}',
        '[{"name": 5}]',
        '[{"constant": "yes"}]',
        '[{"inputs": {"name": "x"}}]',
        "[1]",
    ],
)
def test_json_to_abi_errors(text):
    with pytest.raises(ValueError):
        json_to_abi(text)