"""Serialise a :class:`JsonValue` tree to compact JSON text."""

from __future__ import annotations

import re
from collections.abc import Iterator

from .value import JsonType, JsonValue

__all__ = ["stringify"]

_NEEDS_ESCAPE = re.compile(r'["\\\x00-\x1f]')
_SHORT_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _escape(match: re.Match[str]) -> str:
    ch = match.group()
    return _SHORT_ESCAPES.get(ch) or f"\\u{ord(ch):04X}"


def _quote(s: str) -> str:
    return '"' + _NEEDS_ESCAPE.sub(_escape, s) + '"'


def _emit(value: JsonValue) -> Iterator[str]:
    kind = value.type
    if kind is JsonType.NULL:
        yield "null"
    elif kind is JsonType.FALSE:
        yield "false"
    elif kind is JsonType.TRUE:
        yield "true"
    elif kind is JsonType.NUMBER:
        yield f"{value.number:.17g}"
    elif kind is JsonType.STRING:
        yield _quote(value.string)
    elif kind is JsonType.ARRAY:
        yield "["
        for i in range(value.array_size()):
            if i:
                yield ","
            yield from _emit(value.array_element(i))
        yield "]"
    else:
        yield "{"
        for i in range(value.object_size()):
            if i:
                yield ","
            yield _quote(value.object_key(i))
            yield ":"
            yield from _emit(value.object_value(i))
        yield "}"


def stringify(value: JsonValue) -> str:
    """Return the compact JSON text for ``value``."""
    return "".join(_emit(value))