"""Value model and classifiers shared by every rule.

A value handed to a rule is one of: absent (``ABSENT``), null (``None``),
a string, a number, a boolean, an array (``list``/``tuple``) or an object
(any ``Mapping``).

INVARIANT: absent and null are both "not defined", but only they are.
Empty strings, arrays and objects are blank yet defined.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum, StrEnum
from typing import Any, TypeAlias


class _Absent(Enum):
    """Marker type for a value that is missing entirely."""

    ABSENT = "ABSENT"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent.ABSENT

Value: TypeAlias = Any


class TypeName(StrEnum):
    """Type names accepted by ``type_of``."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


def is_defined(value: Value) -> bool:
    return value is not ABSENT and value is not None


def is_string(value: Value) -> bool:
    return isinstance(value, str)


def is_boolean(value: Value) -> bool:
    return isinstance(value, bool)


def is_number(value: Value) -> bool:
    """True for ints and floats other than NaN. Booleans are not numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def is_integer(value: Value) -> bool:
    """True for numbers with no fractional part (``2.0`` counts)."""
    if not is_number(value):
        return False
    if isinstance(value, float) and math.isinf(value):
        return False
    return value % 1 == 0


def is_array(value: Value) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Value) -> bool:
    # Sequences never satisfy Mapping, but keep the array check first.
    if is_array(value):
        return False
    return isinstance(value, Mapping)


def is_blank(value: Value) -> bool:
    """Check whether *value* carries no content.

    Not-defined values, whitespace-only strings, and empty arrays and
    objects are blank. Numbers and booleans never are (``0`` and
    ``False`` included).
    """
    if not is_defined(value):
        return True
    if is_string(value):
        return value.strip() == ""
    if is_number(value) or is_boolean(value):
        return False
    if is_array(value) or is_object(value):
        return len(value) == 0
    return False


_CLASSIFIERS = {
    TypeName.STRING: is_string,
    TypeName.NUMBER: is_number,
    TypeName.INTEGER: is_integer,
    TypeName.BOOLEAN: is_boolean,
    TypeName.ARRAY: is_array,
    TypeName.OBJECT: is_object,
}


def is_type(value: Value, type_name: TypeName | str) -> bool:
    """Classify *value* against *type_name*.

    Raises:
        ValueError: If *type_name* is not a known ``TypeName``.
    """
    return _CLASSIFIERS[TypeName(type_name)](value)
