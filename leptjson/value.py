"""The mutable JSON value tree."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class JsonType(enum.Enum):
    """The kinds of JSON value."""

    NULL = 0
    FALSE = 1
    TRUE = 2
    NUMBER = 3
    STRING = 4
    ARRAY = 5
    OBJECT = 6


@dataclass
class _Member:
    key: str
    value: "JsonValue"


class JsonValue:
    """A JSON value whose type and contents can be changed in place.

    Arrays and objects keep an explicit capacity that grows by doubling,
    so that reserving and shrinking behave predictably.
    """

    __slots__ = ("_type", "_data", "_capacity")
    __hash__ = None  # mutable

    def __init__(self) -> None:
        self._type = JsonType.NULL
        self._data: Any = None
        self._capacity = 0

    def __repr__(self) -> str:
        if self._type in (JsonType.NUMBER, JsonType.STRING):
            return f"JsonValue({self._type.name}, {self._data!r})"
        if self._type is JsonType.ARRAY:
            return f"JsonValue(ARRAY, {self._data!r})"
        if self._type is JsonType.OBJECT:
            items = {m.key: m.value for m in self._data}
            return f"JsonValue(OBJECT, {items!r})"
        return f"JsonValue({self._type.name})"

    # -- general ------------------------------------------------------------

    @property
    def type(self) -> JsonType:
        """The kind of value currently held."""
        return self._type

    def _expect(self, *types: JsonType) -> None:
        if self._type not in types:
            wanted = " or ".join(t.name for t in types)
            raise TypeError(f"expected a {wanted} value, found {self._type.name}")

    def _reset(self, new_type: JsonType = JsonType.NULL, data: Any = None, capacity: int = 0) -> None:
        self._type = new_type
        self._data = data
        self._capacity = capacity

    def set_null(self) -> None:
        """Discard the contents and become null."""
        self._reset()

    def _clone(self) -> JsonValue:
        clone = JsonValue()
        if self._type is JsonType.ARRAY:
            data: Any = [element._clone() for element in self._data]
        elif self._type is JsonType.OBJECT:
            data = [_Member(m.key, m.value._clone()) for m in self._data]
        else:
            data = self._data
        clone._reset(self._type, data, self._capacity)
        return clone

    def copy_from(self, other: JsonValue) -> None:
        """Replace this value with a deep copy of ``other``."""
        if other is self:
            raise ValueError("cannot copy a value onto itself")
        clone = other._clone()
        self._reset(clone._type, clone._data, clone._capacity)

    def move_from(self, other: JsonValue) -> None:
        """Take over the contents of ``other``, leaving it null."""
        if other is self:
            raise ValueError("cannot move a value onto itself")
        self._reset(other._type, other._data, other._capacity)
        other._reset()

    def swap(self, other: JsonValue) -> None:
        """Exchange contents with ``other``."""
        if other is self:
            return
        mine = (self._type, self._data, self._capacity)
        self._reset(other._type, other._data, other._capacity)
        other._reset(*mine)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        if self._type is not other._type:
            return False
        if self._type in (JsonType.NUMBER, JsonType.STRING):
            return self._data == other._data
        if self._type is JsonType.ARRAY:
            return len(self._data) == len(other._data) and all(
                a == b for a, b in zip(self._data, other._data)
            )
        if self._type is JsonType.OBJECT:
            if len(self._data) != len(other._data):
                return False
            for member in self._data:
                found = other.find_value(member.key)
                if found is None or not member.value == found:
                    return False
            return True
        return True

    # -- scalars ------------------------------------------------------------

    @property
    def boolean(self) -> bool:
        """The boolean held; the value must be true or false."""
        self._expect(JsonType.TRUE, JsonType.FALSE)
        return self._type is JsonType.TRUE

    def set_boolean(self, b: object) -> None:
        """Become true or false according to the truth of ``b``."""
        self._reset(JsonType.TRUE if b else JsonType.FALSE)

    @property
    def number(self) -> float:
        """The number held."""
        self._expect(JsonType.NUMBER)
        return self._data

    def set_number(self, n: float) -> None:
        """Become a number."""
        self._reset(JsonType.NUMBER, float(n))

    @property
    def string(self) -> str:
        """The string held."""
        self._expect(JsonType.STRING)
        return self._data

    def set_string(self, s: str) -> None:
        """Become a string."""
        if not isinstance(s, str):
            raise TypeError("string value must be a str")
        self._reset(JsonType.STRING, s)

    # -- shared container helpers ---------------------------------------------

    @staticmethod
    def _check_capacity(capacity: int) -> int:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        return capacity

    def _grow_for_one(self) -> None:
        if len(self._data) == self._capacity:
            self._capacity = 1 if self._capacity == 0 else self._capacity * 2

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._data):
            raise IndexError(f"index {index} out of range for size {len(self._data)}")

    # -- arrays -------------------------------------------------------------

    def set_array(self, capacity: int = 0) -> None:
        """Become an empty array with room for ``capacity`` elements."""
        self._reset(JsonType.ARRAY, [], self._check_capacity(capacity))

    def array_size(self) -> int:
        """Number of elements in the array."""
        self._expect(JsonType.ARRAY)
        return len(self._data)

    def array_capacity(self) -> int:
        """Number of elements the array has room for."""
        self._expect(JsonType.ARRAY)
        return self._capacity

    def reserve_array(self, capacity: int) -> None:
        """Ensure room for at least ``capacity`` elements."""
        self._expect(JsonType.ARRAY)
        self._capacity = max(self._capacity, capacity)

    def shrink_array(self) -> None:
        """Reduce the capacity to the current size."""
        self._expect(JsonType.ARRAY)
        self._capacity = min(self._capacity, len(self._data))

    def clear_array(self) -> None:
        """Remove every element, keeping the capacity."""
        self._expect(JsonType.ARRAY)
        self.erase_elements(0, len(self._data))

    def array_element(self, index: int) -> JsonValue:
        """The element at ``index``."""
        self._expect(JsonType.ARRAY)
        self._check_index(index)
        return self._data[index]

    def push_back(self) -> JsonValue:
        """Append a null element and return it."""
        self._expect(JsonType.ARRAY)
        self._grow_for_one()
        element = JsonValue()
        self._data.append(element)
        return element

    def pop_back(self) -> None:
        """Remove the last element."""
        self._expect(JsonType.ARRAY)
        if not self._data:
            raise IndexError("pop from an empty array")
        self._data.pop()

    def insert_element(self, index: int) -> JsonValue:
        """Insert a null element before ``index`` and return it."""
        self._expect(JsonType.ARRAY)
        if not 0 <= index <= len(self._data):
            raise IndexError(f"insert position {index} out of range for size {len(self._data)}")
        self._grow_for_one()
        element = JsonValue()
        self._data.insert(index, element)
        return element

    def erase_elements(self, index: int, count: int) -> None:
        """Remove ``count`` elements starting at ``index``."""
        self._expect(JsonType.ARRAY)
        if index < 0 or count < 0 or index + count > len(self._data):
            raise IndexError(
                f"cannot erase {count} elements at {index} from size {len(self._data)}"
            )
        del self._data[index:index + count]

    # -- objects ------------------------------------------------------------

    def set_object(self, capacity: int = 0) -> None:
        """Become an empty object with room for ``capacity`` members."""
        self._reset(JsonType.OBJECT, [], self._check_capacity(capacity))

    def object_size(self) -> int:
        """Number of members in the object."""
        self._expect(JsonType.OBJECT)
        return len(self._data)

    def object_capacity(self) -> int:
        """Number of members the object has room for."""
        self._expect(JsonType.OBJECT)
        return self._capacity

    def reserve_object(self, capacity: int) -> None:
        """Ensure room for at least ``capacity`` members."""
        self._expect(JsonType.OBJECT)
        self._capacity = max(self._capacity, capacity)

    def shrink_object(self) -> None:
        """Reduce the capacity to the current size."""
        self._expect(JsonType.OBJECT)
        self._capacity = min(self._capacity, len(self._data))

    def clear_object(self) -> None:
        """Remove every member, keeping the capacity."""
        self._expect(JsonType.OBJECT)
        self._data.clear()

    def object_key(self, index: int) -> str:
        """The key of the member at ``index``."""
        self._expect(JsonType.OBJECT)
        self._check_index(index)
        return self._data[index].key

    def object_value(self, index: int) -> JsonValue:
        """The value of the member at ``index``."""
        self._expect(JsonType.OBJECT)
        self._check_index(index)
        return self._data[index].value

    def find_index(self, key: str) -> int | None:
        """Position of the first member named ``key``, or None."""
        self._expect(JsonType.OBJECT)
        return next(
            (i for i, member in enumerate(self._data) if member.key == key), None
        )

    def find_value(self, key: str) -> JsonValue | None:
        """Value of the first member named ``key``, or None."""
        index = self.find_index(key)
        return None if index is None else self._data[index].value

    def set_object_value(self, key: str) -> JsonValue:
        """Return the value stored under ``key``, adding a null member if absent."""
        existing = self.find_value(key)
        if existing is not None:
            return existing
        if not isinstance(key, str):
            raise TypeError("object keys must be str")
        self._grow_for_one()
        value = JsonValue()
        self._data.append(_Member(key, value))
        return value

    def remove_object_value(self, index: int) -> None:
        """Remove the member at ``index``."""
        self._expect(JsonType.OBJECT)
        self._check_index(index)
        del self._data[index]