import pytest

from leptjson.errors import JsonParseError, ParseErrorCode
from leptjson.parser import parse
from leptjson.value import JsonType


def test_parse_null():
    assert parse("null").type is JsonType.NULL


def test_parse_true():
    assert parse("true").type is JsonType.TRUE


def test_parse_false():
    assert parse("false").type is JsonType.FALSE


@pytest.mark.parametrize(
    "expected, text",
    [
        (0.0, "0"),
        (0.0, "-0"),
        (0.0, "-0.0"),
        (1.0, "1"),
        (-1.0, "-1"),
        (1.5, "1.5"),
        (-1.5, "-1.5"),
        (3.1416, "3.1416"),
        (1e10, "1E10"),
        (1e10, "1e10"),
        (1e10, "1E+10"),
        (1e-10, "1E-10"),
        (-1e10, "-1E10"),
        (-1e10, "-1e10"),
        (-1e10, "-1E+10"),
        (-1e-10, "-1E-10"),
        (1.234e10, "1.234E+10"),
        (1.234e-10, "1.234E-10"),
        (0.0, "1e-10000"),
        (1.0000000000000002, "1.0000000000000002"),
        (4.9406564584124654e-324, "4.9406564584124654e-324"),
        (-4.9406564584124654e-324, "-4.9406564584124654e-324"),
        (2.2250738585072009e-308, "2.2250738585072009e-308"),
        (-2.2250738585072009e-308, "-2.2250738585072009e-308"),
        (2.2250738585072014e-308, "2.2250738585072014e-308"),
        (-2.2250738585072014e-308, "-2.2250738585072014e-308"),
        (1.7976931348623157e308, "1.7976931348623157e+308"),
        (-1.7976931348623157e308, "-1.7976931348623157e+308"),
    ],
)
def test_parse_number(expected, text):
    value = parse(text)
    assert value.type is JsonType.NUMBER
    assert value.number == expected


@pytest.mark.parametrize(
    "expected, text",
    [
        ("", '""'),
        ("Hello", '"Hello"'),
        ("Hello\nWorld", '"Hello\\nWorld"'),
        ('" \\ / \b \f \n \r \t', '"\\" \\\\ \\/ \\b \\f \\n \\r \\t"'),
        ("Hello\0World", '"Hello\\u0000World"'),
        ("\x24", '"\\u0024"'),
        ("\u00a2", '"\\u00A2"'),
        ("\u20ac", '"\\u20AC"'),
        ("\U0001d11e", '"\\uD834\\uDD1E"'),
        ("\U0001d11e", '"\\ud834\\udd1e"'),
    ],
)
def test_parse_string(expected, text):
    value = parse(text)
    assert value.type is JsonType.STRING
    assert value.string == expected


def test_parse_empty_array():
    value = parse("[ ]")
    assert value.type is JsonType.ARRAY
    assert value.array_size() == 0


def test_parse_mixed_array():
    value = parse('[ null , false , true , 123 , "abc" ]')
    assert value.type is JsonType.ARRAY
    assert value.array_size() == 5
    types = [value.array_element(i).type for i in range(5)]
    assert types == [
        JsonType.NULL,
        JsonType.FALSE,
        JsonType.TRUE,
        JsonType.NUMBER,
        JsonType.STRING,
    ]
    assert value.array_element(3).number == 123.0
    assert value.array_element(4).string == "abc"


def test_parse_nested_arrays():
    value = parse("[ [ ] , [ 0 ] , [ 0 , 1 ] , [ 0 , 1 , 2 ] ]")
    assert value.array_size() == 4
    for i in range(4):
        inner = value.array_element(i)
        assert inner.type is JsonType.ARRAY
        assert inner.array_size() == i
        for j in range(i):
            element = inner.array_element(j)
            assert element.type is JsonType.NUMBER
            assert element.number == float(j)


def test_parsed_array_capacity_matches_size():
    value = parse("[1, 2, 3]")
    assert value.array_capacity() == value.array_size()


def test_parse_empty_object():
    value = parse(" { } ")
    assert value.type is JsonType.OBJECT
    assert value.object_size() == 0


def test_parse_object():
    value = parse(
        ' { "n" : null , "f" : false , "t" : true , "i" : 123 , '
        '"s" : "abc", "a" : [ 1, 2, 3 ],'
        '"o" : { "1" : 1, "2" : 2, "3" : 3 } } '
    )
    assert value.type is JsonType.OBJECT
    assert value.object_size() == 7
    keys = [value.object_key(i) for i in range(7)]
    assert keys == ["n", "f", "t", "i", "s", "a", "o"]
    assert value.object_value(0).type is JsonType.NULL
    assert value.object_value(1).type is JsonType.FALSE
    assert value.object_value(2).type is JsonType.TRUE
    assert value.object_value(3).number == 123.0
    assert value.object_value(4).string == "abc"
    array = value.object_value(5)
    assert array.array_size() == 3
    for i in range(3):
        assert array.array_element(i).number == i + 1.0
    inner = value.object_value(6)
    assert inner.type is JsonType.OBJECT
    for i in range(3):
        assert inner.object_key(i) == str(i + 1)
        assert inner.object_value(i).number == i + 1.0


def _error_code(text):
    with pytest.raises(JsonParseError) as info:
        parse(text)
    return info.value.code


@pytest.mark.parametrize("text", ["", " "])
def test_expect_value(text):
    assert _error_code(text) is ParseErrorCode.EXPECT_VALUE


@pytest.mark.parametrize(
    "text",
    ["nul", "?", "+0", "+1", ".123", "1.", "INF", "inf", "NAN", "nan", "[1,]", '["a", nul]'],
)
def test_invalid_value(text):
    assert _error_code(text) is ParseErrorCode.INVALID_VALUE


@pytest.mark.parametrize("text", ["null x", "0123", "0x0", "0x123"])
def test_root_not_singular(text):
    assert _error_code(text) is ParseErrorCode.ROOT_NOT_SINGULAR


@pytest.mark.parametrize("text", ["1e309", "-1e309"])
def test_number_too_big(text):
    assert _error_code(text) is ParseErrorCode.NUMBER_TOO_BIG


@pytest.mark.parametrize("text", ['"', '"abc'])
def test_miss_quotation_mark(text):
    assert _error_code(text) is ParseErrorCode.MISS_QUOTATION_MARK


@pytest.mark.parametrize("text", ['"\\v"', '"\\\'"', '"\\0"', '"\\x12"'])
def test_invalid_string_escape(text):
    assert _error_code(text) is ParseErrorCode.INVALID_STRING_ESCAPE


@pytest.mark.parametrize("text", ['"\x01"', '"\x1f"'])
def test_invalid_string_char(text):
    assert _error_code(text) is ParseErrorCode.INVALID_STRING_CHAR


@pytest.mark.parametrize(
    "text",
    [
        '"\\u"',
        '"\\u0"',
        '"\\u01"',
        '"\\u012"',
        '"\\u/000"',
        '"\\uG000"',
        '"\\u0/00"',
        '"\\u0G00"',
        '"\\u00G0"',
        '"\\u000/"',
        '"\\u000G"',
        '"\\u 123"',
    ],
)
def test_invalid_unicode_hex(text):
    assert _error_code(text) is ParseErrorCode.INVALID_UNICODE_HEX


@pytest.mark.parametrize(
    "text",
    ['"\\uD800"', '"\\uDBFF"', '"\\uD800\\\\"', '"\\uD800\\uDBFF"', '"\\uD800\\uE000"'],
)
def test_invalid_unicode_surrogate(text):
    assert _error_code(text) is ParseErrorCode.INVALID_UNICODE_SURROGATE


@pytest.mark.parametrize("text", ["[1", "[1}", "[1 2", "[[]"])
def test_miss_comma_or_square_bracket(text):
    assert _error_code(text) is ParseErrorCode.MISS_COMMA_OR_SQUARE_BRACKET


@pytest.mark.parametrize(
    "text",
    ["{:1,", "{1:1,", "{true:1,", "{false:1,", "{null:1,", "{[]:1,", "{{}:1,", '{"a":1,'],
)
def test_miss_key(text):
    assert _error_code(text) is ParseErrorCode.MISS_KEY


@pytest.mark.parametrize("text", ['{"a"}', '{"a","b"}'])
def test_miss_colon(text):
    assert _error_code(text) is ParseErrorCode.MISS_COLON


@pytest.mark.parametrize("text", ['{"a":1', '{"a":1]', '{"a":1 "b"', '{"a":{}'])
def test_miss_comma_or_curly_bracket(text):
    assert _error_code(text) is ParseErrorCode.MISS_COMMA_OR_CURLY_BRACKET


def test_error_is_value_error_with_position():
    with pytest.raises(ValueError) as info:
        parse("null x")
    assert info.value.position == 5


def test_missing_quote_reported_at_end():
    with pytest.raises(JsonParseError) as info:
        parse('"abc')
    assert info.value.position == 4


@pytest.mark.parametrize(
    "first, second, equal",
    [
        ("true", "true", True),
        ("true", "false", False),
        ("false", "false", True),
        ("null", "null", True),
        ("null", "0", False),
        ("123", "123", True),
        ("123", "456", False),
        ('"abc"', '"abc"', True),
        ('"abc"', '"abcd"', False),
        ("[]", "[]", True),
        ("[]", "null", False),
        ("[1,2,3]", "[1,2,3]", True),
        ("[1,2,3]", "[1,2,3,4]", False),
        ("[[]]", "[[]]", True),
        ("{}", "{}", True),
        ("{}", "null", False),
        ("{}", "[]", False),
        ('{"a":1,"b":2}', '{"a":1,"b":2}', True),
        ('{"a":1,"b":2}', '{"b":2,"a":1}', True),
        ('{"a":1,"b":2}', '{"a":1,"b":3}', False),
        ('{"a":1,"b":2}', '{"a":1,"b":2,"c":3}', False),
        ('{"a":{"b":{"c":{}}}}', '{"a":{"b":{"c":{}}}}', True),
        ('{"a":{"b":{"c":{}}}}', '{"a":{"b":{"c":[]}}}', False),
    ],
)
def test_equal(first, second, equal):
    assert (parse(first) == parse(second)) is equal


def test_copy_of_parsed_value_is_equal():
    original = parse('{"t":true,"f":false,"n":null,"d":1.5,"a":[1,2,3]}')
    copy = parse("null")
    copy.copy_from(original)
    assert copy == original


def test_move_of_parsed_value():
    original = parse('{"t":true,"f":false,"n":null,"d":1.5,"a":[1,2,3]}')
    source = parse("null")
    source.copy_from(original)
    target = parse("null")
    target.move_from(source)
    assert source.type is JsonType.NULL
    assert target == original