# leptjson

A small, strict JSON parser and generator. Parsed documents are held in a
`JsonValue` tree that keeps object members in document order and can be
inspected, edited and written back out as compact JSON text.

The package is made of four modules:

- `leptjson.parser` — `parse(text)` turns a JSON text into a `JsonValue`.
- `leptjson.stringify` — `stringify(value)` turns a `JsonValue` into text.
- `leptjson.value` — the `JsonValue` class and the `JsonType` enum.
- `leptjson.errors` — `JsonParseError` and the `ParseErrorCode` enum.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Parsing

```python
from leptjson.parser import parse
from leptjson.value import JsonType

value = parse('{"name": "lept", "tags": [1, 2, 3]}')
assert value.type is JsonType.OBJECT
assert value.object_key(0) == "name"
assert value.find_value("name").string == "lept"
assert value.find_value("tags").array_size() == 3
assert value.find_value("tags").array_element(0).number == 1.0
```

`type`, `boolean`, `number` and `string` are read-only properties. Reading
`boolean`, `number` or `string` from a value of another type raises
`TypeError`. All numbers are held as Python floats.

The parser accepts exactly one JSON value surrounded by optional whitespace
(space, tab, line feed, carriage return). Object keys may repeat; lookups
by key find the first member with that name.

Invalid input raises `leptjson.errors.JsonParseError`, a subclass of
`ValueError`. Its `code` is a `ParseErrorCode` member that says what went
wrong: `EXPECT_VALUE`, `INVALID_VALUE`, `ROOT_NOT_SINGULAR`,
`NUMBER_TOO_BIG`, `MISS_QUOTATION_MARK`, `INVALID_STRING_ESCAPE`,
`INVALID_STRING_CHAR`, `INVALID_UNICODE_HEX`, `INVALID_UNICODE_SURROGATE`,
`MISS_COMMA_OR_SQUARE_BRACKET`, `MISS_KEY`, `MISS_COLON` or
`MISS_COMMA_OR_CURLY_BRACKET`. Each code has a `description`. The
exception's `position` is the index in the text where the error was found.

```python
from leptjson.errors import JsonParseError, ParseErrorCode
from leptjson.parser import parse

try:
    parse("[1, 2")
except JsonParseError as err:
    assert err.code is ParseErrorCode.MISS_COMMA_OR_SQUARE_BRACKET
```

Numbers too large for a double (such as `1e309`) raise `NUMBER_TOO_BIG`;
numbers too small underflow to zero.

## Generating

```python
from leptjson.parser import parse
from leptjson.stringify import stringify

assert stringify(parse('[ null , 1.5 , "a\\nb" ]')) == '[null,1.5,"a\\nb"]'
```

Output has no whitespace. Numbers are written with 17 significant digits, so
every double survives a round trip unchanged. In strings, `"` and `\` and
the control characters below U+0020 are escaped (`\b`, `\f`, `\n`, `\r`,
`\t`, otherwise `\u00XX`); every other character, including non-ASCII, is
written as is.

## Building values

```python
from leptjson.stringify import stringify
from leptjson.value import JsonValue

doc = JsonValue()
doc.set_object(0)
doc.set_object_value("greeting").set_string("Hello")
items = doc.set_object_value("items")
items.set_array(0)
for n in range(3):
    items.push_back().set_number(n)

assert stringify(doc) == '{"greeting":"Hello","items":[0,1,2]}'
```

A new `JsonValue` is null. The setters `set_null`, `set_boolean`,
`set_number`, `set_string`, `set_array` and `set_object` replace whatever
the value held.

Arrays: `array_size`, `array_element`, `push_back`, `pop_back`,
`insert_element`, `erase_elements` and `clear_array`. Objects:
`object_size`, `object_key`, `object_value`, `find_index`, `find_value`,
`set_object_value` (returns the existing value for a key, or appends a new
null member), `remove_object_value` and `clear_object`. Out-of-range
positions raise `IndexError`.

Arrays and objects track a capacity alongside their size. It starts at the
number given to `set_array` / `set_object`, doubles when an element or
member is added to a full container, grows with `reserve_array` /
`reserve_object`, drops to the size with `shrink_array` / `shrink_object`,
and is left unchanged by clearing.

Values can be deep-copied with `copy_from`, moved with `move_from` (which
resets the source to null) and exchanged with `swap`. Two values compare
equal with `==` when they have the same type and content; object members
are compared by key, regardless of order. `JsonValue` is not hashable.

## What it does not do

The package works on `str` in memory only: it does not read or write files
or streams, has no command-line tool, does not pretty-print, and does not
convert to or from plain Python `dict` and `list` objects.