import json

import pytest

from tronkit.presentation import json_pretty_format, to_json


def test_pretty_format_nested():
    result = json_pretty_format('{"a":1,"b":[1,2]}')
    assert result == '{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ]\n}'


def test_pretty_format_empty_containers():
    assert json_pretty_format('{"a":[],"b":{}}') == '{\n  "a": [],\n  "b": {}\n}'


@pytest.mark.parametrize("bad", ["{", "not json", '{"a":NaN}', ""])
def test_pretty_format_invalid_returned_unchanged(bad):
    assert json_pretty_format(bad) == bad


@pytest.mark.parametrize(
    "text",
    [
        '{"k":"a\\"b, c: {d}","n":[1.5e3,-2,true,null]}',
        '[ {"x" : "y"} , 3 ]',
        '"plain"',
    ],
)
def test_pretty_format_preserves_content(text):
    assert json.loads(json_pretty_format(text)) == json.loads(text)


def test_pretty_format_keeps_number_text():
    assert "1.5e3" in json_pretty_format('{"n":1.5e3}')


def test_pretty_format_drops_leading_keeps_trailing_space():
    result = json_pretty_format("  [1]\n")
    assert result.startswith("[")
    assert result.endswith("]\n")


def test_to_json_compact_sorted():
    assert to_json({"b": 1, "a": 2}, False) == '{"a":2,"b":1}'


def test_to_json_pretty_round_trip():
    payload = {"name": "x", "items": [1, 2, {"z": None}]}
    result = to_json(payload, True)
    assert "\n" in result
    assert json.loads(result) == payload


def test_to_json_unserialisable_gives_empty_object():
    assert to_json(object(), False) == "{}"


def test_to_json_nan_gives_empty_object():
    assert to_json({"v": float("nan")}, False) == "{}"


def test_to_json_escapes_html():
    result = to_json("<a&b>", False)
    assert "<" not in result and ">" not in result and "&" not in result
    assert json.loads(result) == "<a&b>"


def test_to_json_bytes_as_base64():
    result = to_json({"raw": b"\x00\x01"}, False)
    assert json.loads(result) == {"raw": "AAE="}