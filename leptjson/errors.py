"""Error codes and the exception raised when JSON text cannot be parsed."""

from __future__ import annotations

import enum


class ParseErrorCode(enum.IntEnum):
    """Reasons a JSON text can be rejected by the parser."""

    EXPECT_VALUE = 1
    INVALID_VALUE = 2
    ROOT_NOT_SINGULAR = 3
    NUMBER_TOO_BIG = 4
    MISS_QUOTATION_MARK = 5
    INVALID_STRING_ESCAPE = 6
    INVALID_STRING_CHAR = 7
    INVALID_UNICODE_HEX = 8
    INVALID_UNICODE_SURROGATE = 9
    MISS_COMMA_OR_SQUARE_BRACKET = 10
    MISS_KEY = 11
    MISS_COLON = 12
    MISS_COMMA_OR_CURLY_BRACKET = 13

    @property
    def description(self) -> str:
        """A short human-readable explanation of the code."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ParseErrorCode.EXPECT_VALUE: "expected a value",
    ParseErrorCode.INVALID_VALUE: "invalid value",
    ParseErrorCode.ROOT_NOT_SINGULAR: "extra characters after the root value",
    ParseErrorCode.NUMBER_TOO_BIG: "number out of range",
    ParseErrorCode.MISS_QUOTATION_MARK: "missing closing quotation mark",
    ParseErrorCode.INVALID_STRING_ESCAPE: "invalid escape sequence in string",
    ParseErrorCode.INVALID_STRING_CHAR: "invalid control character in string",
    ParseErrorCode.INVALID_UNICODE_HEX: "invalid hexadecimal digits in \\u escape",
    ParseErrorCode.INVALID_UNICODE_SURROGATE: "invalid unicode surrogate pair",
    ParseErrorCode.MISS_COMMA_OR_SQUARE_BRACKET: "expected ',' or ']' in array",
    ParseErrorCode.MISS_KEY: "expected a string key in object",
    ParseErrorCode.MISS_COLON: "expected ':' after object key",
    ParseErrorCode.MISS_COMMA_OR_CURLY_BRACKET: "expected ',' or '}' in object",
}


class JsonParseError(ValueError):
    """Raised when a JSON text is malformed."""

    def __init__(self, code: ParseErrorCode, position: int) -> None:
        self.code = ParseErrorCode(code)
        self.position = position
        super().__init__(f"{self.code.description} at position {position}")

    def __reduce__(self):
        return (type(self), (self.code, self.position))