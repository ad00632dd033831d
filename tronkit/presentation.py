"""JSON formatting helpers for displaying results."""

from __future__ import annotations

import base64
import json
from typing import Any

_WHITESPACE = " \t\r\n"
_INDENT = "  "
_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def _is_valid_json(text: str) -> bool:
    try:
        json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return False
    return True


def _indent(body: str) -> str:
    out: list[str] = []
    depth = 0
    in_string = False
    escaped = False
    pending_newline = False
    for char in body:
        if in_string:
            out.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char in _WHITESPACE:
            continue
        if pending_newline and char not in "]}":
            out.append("\n" + _INDENT * depth)
            pending_newline = False
        if char == '"':
            in_string = True
            out.append(char)
        elif char in "[{":
            out.append(char)
            depth += 1
            pending_newline = True
        elif char in "]}":
            depth -= 1
            if pending_newline:
                pending_newline = False
            else:
                out.append("\n" + _INDENT * depth)
            out.append(char)
        elif char == ",":
            out.append(",\n" + _INDENT * depth)
        elif char == ":":
            out.append(": ")
        else:
            out.append(char)
    return "".join(out)


def json_pretty_format(text: str) -> str:
    """Indent a JSON document by two spaces; invalid input is returned unchanged."""
    if not _is_valid_json(text):
        return text
    body = text.strip(_WHITESPACE)
    trailing = text[len(text.rstrip(_WHITESPACE)):]
    return _indent(body) + trailing


def _default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    raise TypeError(f"cannot serialise {type(value).__name__}")


def to_json(payload: Any, pretty: bool = False) -> str:
    """Serialise *payload* compactly, or indented when *pretty*; ``"{}"`` on failure."""
    try:
        text = json.dumps(
            payload,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
            default=_default,
        )
    except (TypeError, ValueError):
        return "{}"
    text = "".join(_HTML_ESCAPES.get(char, char) for char in text)
    return json_pretty_format(text) if pretty else text