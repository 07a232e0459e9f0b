"""Constructors for typed values and conversions between SQL types."""

from __future__ import annotations

import math
import re

from minidb.common import DatabaseError, ExceptionType
from minidb.type_id import (
    DECIMAL_MAX,
    DECIMAL_MIN,
    INT8_MAX,
    INT8_MIN,
    INT16_MAX,
    INT16_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    CmpBool,
    TypeId,
)
from minidb.value import Value

_OUT_OF_RANGE = "Numeric value out of range."
_TIMESTAMP_FORMAT = "Timestamp format error."
_TIMESTAMP_RANGE = "Timestamp value out of range."

_NUMERIC_SOURCES = frozenset(
    {
        TypeId.TINYINT,
        TypeId.SMALLINT,
        TypeId.INTEGER,
        TypeId.BIGINT,
        TypeId.DECIMAL,
        TypeId.VARCHAR,
    }
)

# Types each target type can be converted from.
_COERCABLE_FROM = {
    TypeId.TINYINT: _NUMERIC_SOURCES,
    TypeId.SMALLINT: _NUMERIC_SOURCES,
    TypeId.INTEGER: _NUMERIC_SOURCES,
    TypeId.BIGINT: _NUMERIC_SOURCES,
    TypeId.DECIMAL: _NUMERIC_SOURCES,
    TypeId.VARCHAR: frozenset(
        {
            TypeId.BOOLEAN,
            TypeId.TINYINT,
            TypeId.SMALLINT,
            TypeId.INTEGER,
            TypeId.BIGINT,
            TypeId.DECIMAL,
            TypeId.VARCHAR,
        }
    ),
    TypeId.TIMESTAMP: frozenset({TypeId.TIMESTAMP, TypeId.VARCHAR}),
    TypeId.BOOLEAN: frozenset({TypeId.BOOLEAN, TypeId.VARCHAR}),
}

# Name used in syntax errors, allowed range, and the width of the text parser.
_INTEGER_TARGETS = {
    TypeId.TINYINT: ("tinyint", INT8_MIN, INT8_MAX, 32),
    TypeId.SMALLINT: ("smallint", INT16_MIN, INT16_MAX, 32),
    TypeId.INTEGER: ("integer", INT32_MIN, INT32_MAX, 32),
    TypeId.BIGINT: ("bigint", INT64_MIN, INT64_MAX, 64),
}

_SPACE = "[ \t\n\v\f\r]*"
_INT_PREFIX = re.compile(_SPACE + r"([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    _SPACE
    + r"([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

_DIGIT_POSITIONS = frozenset(range(29)) - {4, 7, 10, 13, 16, 19, 26}
_DIGITS = frozenset("0123456789")
_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DAYS_IN_MONTH_LEAP = (0, 31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _out_of_range(message: str = _OUT_OF_RANGE) -> DatabaseError:
    return DatabaseError(message, ExceptionType.OUT_OF_RANGE)


def tinyint_value(value) -> Value:
    """Return a TINYINT value."""
    return Value(TypeId.TINYINT, value)


def smallint_value(value) -> Value:
    """Return a SMALLINT value."""
    return Value(TypeId.SMALLINT, value)


def integer_value(value) -> Value:
    """Return an INTEGER value."""
    return Value(TypeId.INTEGER, value)


def bigint_value(value) -> Value:
    """Return a BIGINT value."""
    return Value(TypeId.BIGINT, value)


def timestamp_value(value) -> Value:
    """Return a TIMESTAMP value."""
    return Value(TypeId.TIMESTAMP, value)


def decimal_value(value) -> Value:
    """Return a DECIMAL value."""
    return Value(TypeId.DECIMAL, value)


def boolean_value(value) -> Value:
    """Return a BOOLEAN value from a comparison result, a bool or an int."""
    if isinstance(value, CmpBool):
        if value is CmpBool.CMP_NULL:
            return Value(TypeId.BOOLEAN)
        return Value(TypeId.BOOLEAN, value is CmpBool.CMP_TRUE)
    return Value(TypeId.BOOLEAN, value)


def varchar_value(value) -> Value:
    """Return a VARCHAR value; None gives NULL."""
    return Value(TypeId.VARCHAR, value)


def null_value(type_id: TypeId) -> Value:
    """Return the NULL value of a type."""
    type_id = TypeId(type_id)
    if type_id in (
        TypeId.BOOLEAN,
        TypeId.TINYINT,
        TypeId.SMALLINT,
        TypeId.INTEGER,
        TypeId.BIGINT,
        TypeId.DECIMAL,
        TypeId.VARCHAR,
    ):
        return Value(type_id)
    raise DatabaseError(
        "Attempting to create invalid null type", ExceptionType.UNKNOWN_TYPE
    )


def zero_value(type_id: TypeId) -> Value:
    """Return the zero value of a type."""
    zeros = {
        TypeId.BOOLEAN: False,
        TypeId.TINYINT: 0,
        TypeId.SMALLINT: 0,
        TypeId.INTEGER: 0,
        TypeId.BIGINT: 0,
        TypeId.DECIMAL: 0.0,
        TypeId.VARCHAR: "0",
    }
    type_id = TypeId(type_id)
    if type_id not in zeros:
        raise DatabaseError(
            "Unknown type for GetZeroValueType", ExceptionType.UNKNOWN_TYPE
        )
    return Value(type_id, zeros[type_id])


def _not_coercable(value: Value, target: TypeId) -> DatabaseError:
    return DatabaseError(f"{value.to_string()} is not coercable to {target.name}.")


def _parse_int_prefix(text: str, bits: int, name: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise DatabaseError(f"Invalid input syntax for {name}: '{text}'")
    number = int(match.group(1))
    if not -(2 ** (bits - 1)) <= number < 2 ** (bits - 1):
        raise _out_of_range()
    return number


def _parse_float_prefix(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise DatabaseError(f"Invalid input syntax for decimal: '{text}'")
    number = float(match.group(1))
    if math.isinf(number):
        raise _out_of_range()
    return number


def _cast_integer(value: Value, target: TypeId) -> Value:
    if value.type_id not in _COERCABLE_FROM[target]:
        raise _not_coercable(value, target)
    if value.is_null():
        return Value(target)
    name, low, high, bits = _INTEGER_TARGETS[target]
    if value.type_id is TypeId.VARCHAR:
        number = _parse_int_prefix(value.data, bits, name)
    elif value.type_id is TypeId.DECIMAL:
        x = value.data
        if math.isnan(x) or x > float(high) or x < float(low):
            raise _out_of_range()
        number = int(x)
    else:
        number = value.data
    if not low <= number <= high:
        raise _out_of_range()
    return Value(target, number)


def cast_as_bigint(value: Value) -> Value:
    """Convert a value to BIGINT."""
    return _cast_integer(value, TypeId.BIGINT)


def cast_as_integer(value: Value) -> Value:
    """Convert a value to INTEGER."""
    return _cast_integer(value, TypeId.INTEGER)


def cast_as_smallint(value: Value) -> Value:
    """Convert a value to SMALLINT."""
    return _cast_integer(value, TypeId.SMALLINT)


def cast_as_tinyint(value: Value) -> Value:
    """Convert a value to TINYINT."""
    return _cast_integer(value, TypeId.TINYINT)


def cast_as_decimal(value: Value) -> Value:
    """Convert a value to DECIMAL."""
    if value.type_id not in _COERCABLE_FROM[TypeId.DECIMAL]:
        raise _not_coercable(value, TypeId.DECIMAL)
    if value.is_null():
        return Value(TypeId.DECIMAL)
    if value.type_id is TypeId.VARCHAR:
        number = _parse_float_prefix(value.data)
        if number > DECIMAL_MAX or number < DECIMAL_MIN:
            raise _out_of_range()
        return Value(TypeId.DECIMAL, number)
    return Value(TypeId.DECIMAL, float(value.data))


def cast_as_varchar(value: Value) -> Value:
    """Convert a value to its VARCHAR text."""
    if value.type_id not in _COERCABLE_FROM[TypeId.VARCHAR]:
        raise _not_coercable(value, TypeId.VARCHAR)
    if value.is_null():
        return Value(TypeId.VARCHAR)
    return Value(TypeId.VARCHAR, value.to_string())


def _parse_timestamp(text: str) -> int:
    """Encode 'YYYY-MM-DD HH:MM:SS[.ffffff]+TZ' as a packed integer."""
    if len(text) == 22:
        text = text[:19] + ".000000" + text[19:22]
    if len(text) != 29:
        raise DatabaseError(_TIMESTAMP_FORMAT)
    if (
        text[10] != " "
        or text[4] != "-"
        or text[7] != "-"
        or text[13] != ":"
        or text[16] != ":"
        or text[19] != "."
        or text[26] not in "+-"
    ):
        raise DatabaseError(_TIMESTAMP_FORMAT)
    if any(text[i] not in _DIGITS for i in _DIGIT_POSITIONS):
        raise DatabaseError(_TIMESTAMP_FORMAT)

    year = int(text[0:4])
    month = int(text[5:7])
    day = int(text[8:10])
    hour = int(text[11:13])
    minute = int(text[14:16])
    second = int(text[17:19])
    micro = int(text[20:26])
    tz = int(text[26:29])

    if hour > 23 or minute > 59 or second > 59 or day == 0 or month == 0 or month > 12 or day > 31:
        raise _out_of_range(_TIMESTAMP_RANGE)
    leap = (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
    days = _DAYS_IN_MONTH_LEAP if leap else _DAYS_IN_MONTH
    if day > days[month]:
        raise _out_of_range(_TIMESTAMP_RANGE)
    if tz > 26 or tz < -12:
        raise DatabaseError(_TIMESTAMP_FORMAT)
    timezone = tz + 12

    packed = month
    packed = packed * 32 + day
    packed = packed * 27 + timezone
    packed = packed * 10000 + year
    packed = packed * 100000 + hour * 3600 + minute * 60 + second
    packed = packed * 1000000 + micro
    return packed


def cast_as_timestamp(value: Value) -> Value:
    """Convert a value to TIMESTAMP."""
    if value.type_id not in _COERCABLE_FROM[TypeId.TIMESTAMP]:
        raise _not_coercable(value, TypeId.TIMESTAMP)
    if value.is_null():
        return Value(TypeId.TIMESTAMP)
    if value.type_id is TypeId.TIMESTAMP:
        return Value(TypeId.TIMESTAMP, value.data)
    return Value(TypeId.TIMESTAMP, _parse_timestamp(value.data))


def cast_as_boolean(value: Value) -> Value:
    """Convert a value to BOOLEAN."""
    if value.type_id not in _COERCABLE_FROM[TypeId.BOOLEAN]:
        raise _not_coercable(value, TypeId.BOOLEAN)
    if value.is_null():
        return Value(TypeId.BOOLEAN)
    if value.type_id is TypeId.BOOLEAN:
        return Value(TypeId.BOOLEAN, value.data)
    text = value.data.lower()
    if text in ("true", "1", "t"):
        return Value(TypeId.BOOLEAN, True)
    if text in ("false", "0", "f"):
        return Value(TypeId.BOOLEAN, False)
    raise DatabaseError("Boolean value format error.")