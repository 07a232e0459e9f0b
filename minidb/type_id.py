"""SQL type identifiers, three-valued comparison results and value limits."""

from __future__ import annotations

import enum
import sys


class TypeId(enum.IntEnum):
    """Every SQL type the engine knows."""

    INVALID = 0
    BOOLEAN = 1
    TINYINT = 2
    SMALLINT = 3
    INTEGER = 4
    BIGINT = 5
    DECIMAL = 6
    VARCHAR = 7
    TIMESTAMP = 8


class CmpBool(enum.IntEnum):
    """Result of a SQL comparison: false, true or unknown (NULL)."""

    CMP_FALSE = 0
    CMP_TRUE = 1
    CMP_NULL = 2


def cmp_bool(flag: bool) -> CmpBool:
    """Turn a Python boolean into a comparison result."""
    return CmpBool.CMP_TRUE if flag else CmpBool.CMP_FALSE


def type_id_to_string(type_id: TypeId) -> str:
    """Return the display name of a type."""
    return TypeId(type_id).name


DBL_LOWEST = -sys.float_info.max
FLT_LOWEST = -3.4028234663852886e38

INT8_MIN = -(2 ** 7) + 1
INT16_MIN = -(2 ** 15) + 1
INT32_MIN = -(2 ** 31) + 1
INT64_MIN = -(2 ** 63) + 1
DECIMAL_MIN = FLT_LOWEST
TIMESTAMP_MIN = 0
DATE_MIN = 0
BOOLEAN_MIN = 0

INT8_MAX = 2 ** 7 - 1
INT16_MAX = 2 ** 15 - 1
INT32_MAX = 2 ** 31 - 1
INT64_MAX = 2 ** 63 - 1
UINT64_MAX = 2 ** 64 - 2
DECIMAL_MAX = sys.float_info.max
TIMESTAMP_MAX = 11231999986399999999
DATE_MAX = 2 ** 31 - 1
BOOLEAN_MAX = 1

VALUE_NULL = 2 ** 32 - 1
INT8_NULL = -(2 ** 7)
INT16_NULL = -(2 ** 15)
INT32_NULL = -(2 ** 31)
INT64_NULL = -(2 ** 63)
DATE_NULL = 0
TIMESTAMP_NULL = 2 ** 64 - 1
DECIMAL_NULL = DBL_LOWEST
BOOLEAN_NULL = -(2 ** 7)

VARCHAR_MAX_LEN = 2 ** 32 - 1
# TEXT is VARCHAR of this length.
TEXT_MAX_LEN = 1000000000

# A variable-length object whose length prefix is this value is NULL.
OBJECTLENGTH_NULL = -1