"""Typed SQL values with null handling and checked arithmetic."""

from __future__ import annotations

import math
from typing import Callable, Optional

from minidb.common import DatabaseError, ExceptionType
from minidb.type_id import (
    BOOLEAN_NULL,
    DECIMAL_NULL,
    INT8_MAX,
    INT8_MIN,
    INT8_NULL,
    INT16_MAX,
    INT16_MIN,
    INT16_NULL,
    INT32_MAX,
    INT32_MIN,
    INT32_NULL,
    INT64_MAX,
    INT64_MIN,
    INT64_NULL,
    TIMESTAMP_NULL,
    TypeId,
    type_id_to_string,
)

_SIZES = {
    TypeId.BOOLEAN: 1,
    TypeId.TINYINT: 1,
    TypeId.SMALLINT: 2,
    TypeId.INTEGER: 4,
    TypeId.BIGINT: 8,
    TypeId.DECIMAL: 8,
    TypeId.TIMESTAMP: 8,
    TypeId.VARCHAR: 0,
}

# Values an integer column may hold (the lowest representable value is NULL).
_INTEGER_RANGES = {
    TypeId.TINYINT: (INT8_MIN, INT8_MAX),
    TypeId.SMALLINT: (INT16_MIN, INT16_MAX),
    TypeId.INTEGER: (INT32_MIN, INT32_MAX),
    TypeId.BIGINT: (INT64_MIN, INT64_MAX),
}

_INTEGER_NULLS = {
    TypeId.TINYINT: INT8_NULL,
    TypeId.SMALLINT: INT16_NULL,
    TypeId.INTEGER: INT32_NULL,
    TypeId.BIGINT: INT64_NULL,
}

_NUMERIC = frozenset(_INTEGER_RANGES) | {TypeId.DECIMAL}

_OUT_OF_RANGE = "Numeric value out of range."


def type_size(type_id: TypeId) -> int:
    """Return the storage size of a type in bytes (0 for variable length)."""
    try:
        return _SIZES[TypeId(type_id)]
    except (KeyError, ValueError):
        raise DatabaseError("Unknown type.", ExceptionType.UNKNOWN_TYPE) from None


def val_mod(x: float, y: float) -> float:
    """Floating-point remainder whose quotient is truncated toward zero."""
    return x - math.trunc(x / y) * y


def _trunc_div(x: int, y: int) -> int:
    quotient = abs(x) // abs(y)
    return quotient if (x >= 0) == (y >= 0) else -quotient


def _mismatch(message: str) -> DatabaseError:
    return DatabaseError(message, ExceptionType.MISMATCH_TYPE)


def _coerce(type_id: TypeId, data):
    """Validate data for type_id and return it in canonical form (None is NULL)."""
    if data is None:
        return None
    if type_id is TypeId.INVALID:
        raise _mismatch("an INVALID value carries no data")
    if type_id is TypeId.BOOLEAN:
        if isinstance(data, bool):
            return data
        if isinstance(data, int):
            if data == BOOLEAN_NULL:
                return None
            if data in (0, 1):
                return bool(data)
            raise DatabaseError("Boolean value out of range.", ExceptionType.OUT_OF_RANGE)
        raise _mismatch(f"cannot store {type(data).__name__} as BOOLEAN")
    if type_id in _INTEGER_RANGES:
        if isinstance(data, bool) or not isinstance(data, int):
            raise _mismatch(f"cannot store {type(data).__name__} as {type_id.name}")
        null = _INTEGER_NULLS[type_id]
        if data == null:
            return None
        low, high = _INTEGER_RANGES[type_id]
        if not low <= data <= high:
            raise DatabaseError(_OUT_OF_RANGE, ExceptionType.OUT_OF_RANGE)
        return data
    if type_id is TypeId.DECIMAL:
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            raise _mismatch(f"cannot store {type(data).__name__} as DECIMAL")
        value = float(data)
        return None if value == DECIMAL_NULL else value
    if type_id is TypeId.VARCHAR:
        if not isinstance(data, str):
            raise _mismatch(f"cannot store {type(data).__name__} as VARCHAR")
        return data
    if type_id is TypeId.TIMESTAMP:
        if isinstance(data, bool) or not isinstance(data, int):
            raise _mismatch(f"cannot store {type(data).__name__} as TIMESTAMP")
        if data == TIMESTAMP_NULL:
            return None
        if not 0 <= data < TIMESTAMP_NULL:
            raise DatabaseError("Timestamp value out of range.", ExceptionType.OUT_OF_RANGE)
        return data
    raise DatabaseError("Unknown type.", ExceptionType.UNKNOWN_TYPE)


class Value:
    """An immutable SQL value: a type and its data, where None data is NULL."""

    __slots__ = ("_type_id", "_data")

    def __init__(self, type_id: TypeId, data=None) -> None:
        try:
            tid = TypeId(type_id)
        except ValueError:
            raise DatabaseError("Unknown type.", ExceptionType.UNKNOWN_TYPE) from None
        self._type_id = tid
        self._data = _coerce(tid, data)

    @property
    def type_id(self) -> TypeId:
        return self._type_id

    @property
    def data(self):
        return self._data

    def is_null(self) -> bool:
        """Return True if the value is SQL NULL."""
        return self._data is None

    def is_integer(self) -> bool:
        """Return True if the value has one of the integer types."""
        return self._type_id in _INTEGER_RANGES

    def _result_type(self, other: "Value") -> TypeId:
        for operand in (self, other):
            if operand._type_id not in _NUMERIC:
                raise DatabaseError(
                    f"{operand._type_id.name} does not support arithmetic",
                    ExceptionType.INCOMPATIBLE_TYPE,
                )
        if TypeId.DECIMAL in (self._type_id, other._type_id):
            return TypeId.DECIMAL
        if type_size(self._type_id) >= type_size(other._type_id):
            return self._type_id
        return other._type_id

    def _combine(
        self,
        other: "Value",
        int_op: Callable[[int, int], int],
        float_op: Callable[[float, float], float],
        checks_zero: bool,
    ) -> "Value":
        result_type = self._result_type(other)
        if self.is_null() or other.is_null():
            return Value(result_type)
        x, y = self._data, other._data
        if checks_zero and y == 0:
            raise DatabaseError("Division by zero.", ExceptionType.DIVIDE_BY_ZERO)
        if result_type is TypeId.DECIMAL:
            return Value(TypeId.DECIMAL, float_op(float(x), float(y)))
        result = int_op(x, y)
        low, high = _INTEGER_RANGES[result_type]
        if not low <= result <= high:
            raise DatabaseError(_OUT_OF_RANGE, ExceptionType.OUT_OF_RANGE)
        return Value(result_type, result)

    def add(self, other: "Value") -> "Value":
        """Return self + other in the wider of the two types."""
        return self._combine(other, lambda x, y: x + y, lambda x, y: x + y, False)

    def subtract(self, other: "Value") -> "Value":
        """Return self - other in the wider of the two types."""
        return self._combine(other, lambda x, y: x - y, lambda x, y: x - y, False)

    def multiply(self, other: "Value") -> "Value":
        """Return self * other in the wider of the two types."""
        return self._combine(other, lambda x, y: x * y, lambda x, y: x * y, False)

    def divide(self, other: "Value") -> "Value":
        """Return self / other; integer division truncates toward zero."""
        return self._combine(other, _trunc_div, lambda x, y: x / y, True)

    def modulo(self, other: "Value") -> "Value":
        """Return the remainder of self / other, signed like the dividend."""
        return self._combine(
            other, lambda x, y: x - y * _trunc_div(x, y), val_mod, True
        )

    def to_string(self) -> str:
        """Return the value as text."""
        if self.is_null():
            return "NULL"
        if self._type_id is TypeId.BOOLEAN:
            return "true" if self._data else "false"
        return str(self._data)

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._type_id is other._type_id and self._data == other._data

    def __hash__(self) -> int:
        return hash((self._type_id, self._data))

    def __repr__(self) -> str:
        return f"Value({type_id_to_string(self._type_id)}, {self._data!r})"