"""Parse JSON text into a :class:`JsonValue` tree."""

from __future__ import annotations

import math
import re

from .errors import JsonParseError, ParseErrorCode
from .value import JsonValue

__all__ = ["parse"]

_WHITESPACE = frozenset(" \t\n\r")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}
_PLAIN_RUN = re.compile(r'[^"\\\x00-\x1f]+')


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9" and ch != ""


class _Parser:
    """Recursive-descent parser over a single JSON text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def _error(self, code: ParseErrorCode, position: int | None = None) -> JsonParseError:
        return JsonParseError(code, self.pos if position is None else position)

    def skip_whitespace(self) -> None:
        text = self.text
        while self.pos < len(text) and text[self.pos] in _WHITESPACE:
            self.pos += 1

    def parse_value(self, target: JsonValue) -> None:
        ch = self._peek()
        if ch == "t":
            self._parse_literal("true")
            target.set_boolean(True)
        elif ch == "f":
            self._parse_literal("false")
            target.set_boolean(False)
        elif ch == "n":
            self._parse_literal("null")
            target.set_null()
        elif ch == '"':
            target.set_string(self._parse_string())
        elif ch == "[":
            self._parse_array(target)
        elif ch == "{":
            self._parse_object(target)
        elif ch == "":
            raise self._error(ParseErrorCode.EXPECT_VALUE)
        else:
            target.set_number(self._parse_number())

    def _parse_literal(self, literal: str) -> None:
        if not self.text.startswith(literal, self.pos):
            raise self._error(ParseErrorCode.INVALID_VALUE)
        self.pos += len(literal)

    def _parse_number(self) -> float:
        text = self.text
        start = p = self.pos

        def at(i: int) -> str:
            return text[i] if i < len(text) else ""

        if at(p) == "-":
            p += 1
        if at(p) == "0":
            p += 1
        else:
            if not _is_digit(at(p)):
                raise self._error(ParseErrorCode.INVALID_VALUE, start)
            p += 1
            while _is_digit(at(p)):
                p += 1
        if at(p) == ".":
            p += 1
            if not _is_digit(at(p)):
                raise self._error(ParseErrorCode.INVALID_VALUE, start)
            while _is_digit(at(p)):
                p += 1
        if at(p) in ("e", "E"):
            p += 1
            if at(p) in ("+", "-"):
                p += 1
            if not _is_digit(at(p)):
                raise self._error(ParseErrorCode.INVALID_VALUE, start)
            while _is_digit(at(p)):
                p += 1
        number = float(text[start:p])
        if math.isinf(number):
            raise self._error(ParseErrorCode.NUMBER_TOO_BIG, start)
        self.pos = p
        return number

    def _parse_hex4(self) -> int:
        digits = self.text[self.pos:self.pos + 4]
        if len(digits) < 4 or not all(ch in _HEX_DIGITS for ch in digits):
            raise self._error(ParseErrorCode.INVALID_UNICODE_HEX)
        self.pos += 4
        return int(digits, 16)

    def _parse_unicode_escape(self) -> str:
        high = self._parse_hex4()
        if not 0xD800 <= high <= 0xDBFF:
            return chr(high)
        if self._peek() != "\\" or self._peek(1) != "u":
            raise self._error(ParseErrorCode.INVALID_UNICODE_SURROGATE)
        self.pos += 2
        low = self._parse_hex4()
        if not 0xDC00 <= low <= 0xDFFF:
            raise self._error(ParseErrorCode.INVALID_UNICODE_SURROGATE)
        return chr((((high - 0xD800) << 10) | (low - 0xDC00)) + 0x10000)

    def _parse_string(self) -> str:
        text = self.text
        self.pos += 1  # opening quotation mark
        parts: list[str] = []
        while True:
            run = _PLAIN_RUN.match(text, self.pos)
            if run:
                parts.append(run.group())
                self.pos = run.end()
            if self.pos >= len(text):
                raise self._error(ParseErrorCode.MISS_QUOTATION_MARK)
            ch = text[self.pos]
            if ch == '"':
                self.pos += 1
                return "".join(parts)
            if ch == "\\":
                escape = self._peek(1)
                self.pos += 2
                if escape in _ESCAPES:
                    parts.append(_ESCAPES[escape])
                elif escape == "u":
                    parts.append(self._parse_unicode_escape())
                else:
                    raise self._error(ParseErrorCode.INVALID_STRING_ESCAPE, self.pos - 2)
            else:
                raise self._error(ParseErrorCode.INVALID_STRING_CHAR)

    def _parse_array(self, target: JsonValue) -> None:
        self.pos += 1
        self.skip_whitespace()
        if self._peek() == "]":
            self.pos += 1
            target.set_array(0)
            return
        elements: list[JsonValue] = []
        while True:
            element = JsonValue()
            self.parse_value(element)
            elements.append(element)
            self.skip_whitespace()
            ch = self._peek()
            if ch == ",":
                self.pos += 1
                self.skip_whitespace()
            elif ch == "]":
                self.pos += 1
                target.set_array(len(elements))
                for element in elements:
                    target.push_back().move_from(element)
                return
            else:
                raise self._error(ParseErrorCode.MISS_COMMA_OR_SQUARE_BRACKET)

    def _parse_object(self, target: JsonValue) -> None:
        self.pos += 1
        self.skip_whitespace()
        if self._peek() == "}":
            self.pos += 1
            target.set_object(0)
            return
        members: list[tuple[str, JsonValue]] = []
        while True:
            if self._peek() != '"':
                raise self._error(ParseErrorCode.MISS_KEY)
            key = self._parse_string()
            self.skip_whitespace()
            if self._peek() != ":":
                raise self._error(ParseErrorCode.MISS_COLON)
            self.pos += 1
            self.skip_whitespace()
            member = JsonValue()
            self.parse_value(member)
            members.append((key, member))
            self.skip_whitespace()
            ch = self._peek()
            if ch == ",":
                self.pos += 1
                self.skip_whitespace()
            elif ch == "}":
                self.pos += 1
                target.set_object(len(members))
                for key, member in members:
                    target.set_object_value(key).move_from(member)
                return
            else:
                raise self._error(ParseErrorCode.MISS_COMMA_OR_CURLY_BRACKET)


def parse(text: str) -> JsonValue:
    """Parse a complete JSON text and return its value.

    Raises :class:`JsonParseError` when the text is malformed.
    """
    parser = _Parser(text)
    value = JsonValue()
    parser.skip_whitespace()
    parser.parse_value(value)
    parser.skip_whitespace()
    if parser.pos != len(text):
        raise JsonParseError(ParseErrorCode.ROOT_NOT_SINGULAR, parser.pos)
    return value