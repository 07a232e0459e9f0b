import pytest

from minidb.common import DatabaseError, ExceptionType
from minidb.type_id import (
    BOOLEAN_NULL,
    INT8_MAX,
    INT32_MAX,
    INT32_MIN,
    INT32_NULL,
    TypeId,
)
from minidb.value import Value, type_size, val_mod


def test_null_sentinel_is_null():
    assert Value(TypeId.INTEGER, INT32_NULL).is_null()
    assert Value(TypeId.BOOLEAN, BOOLEAN_NULL).is_null()
    assert Value(TypeId.VARCHAR).is_null()
    assert not Value(TypeId.INTEGER, 0).is_null()


def test_null_values_compare_equal_to_plain_null():
    assert Value(TypeId.INTEGER, INT32_NULL) == Value(TypeId.INTEGER)


def test_is_integer():
    assert Value(TypeId.SMALLINT, 3).is_integer()
    assert Value(TypeId.BIGINT, 3).is_integer()
    assert not Value(TypeId.DECIMAL, 3.0).is_integer()
    assert not Value(TypeId.VARCHAR, "3").is_integer()


def test_constructor_rejects_out_of_range():
    with pytest.raises(DatabaseError) as info:
        Value(TypeId.TINYINT, INT8_MAX + 1)
    assert info.value.kind is ExceptionType.OUT_OF_RANGE


def test_constructor_rejects_wrong_type():
    with pytest.raises(DatabaseError) as info:
        Value(TypeId.INTEGER, "seven")
    assert info.value.kind is ExceptionType.MISMATCH_TYPE


def test_add_widens_to_larger_type_and_commutes():
    small = Value(TypeId.TINYINT, 100)
    big = Value(TypeId.INTEGER, 100)
    left = small.add(big)
    right = big.add(small)
    assert left.type_id is TypeId.INTEGER
    assert left == right


def test_add_then_subtract_round_trip():
    a = Value(TypeId.BIGINT, 123456789)
    b = Value(TypeId.INTEGER, -98765)
    assert a.add(b).subtract(b) == a


def test_add_overflow_raises():
    with pytest.raises(DatabaseError) as info:
        Value(TypeId.INTEGER, INT32_MAX).add(Value(TypeId.INTEGER, 1))
    assert info.value.kind is ExceptionType.OUT_OF_RANGE


def test_subtract_underflow_raises():
    with pytest.raises(DatabaseError) as info:
        Value(TypeId.INTEGER, INT32_MIN).subtract(Value(TypeId.INTEGER, 1))
    assert info.value.kind is ExceptionType.OUT_OF_RANGE


def test_multiply_overflow_raises():
    with pytest.raises(DatabaseError):
        Value(TypeId.TINYINT, INT8_MAX).multiply(Value(TypeId.TINYINT, 2))


def test_integer_division_truncates_toward_zero():
    result = Value(TypeId.INTEGER, -7).divide(Value(TypeId.INTEGER, 2))
    assert result == Value(TypeId.INTEGER, -3)


@pytest.mark.parametrize("x,y", [(17, 5), (-17, 5), (17, -5), (-17, -5), (0, 3)])
def test_divide_and_modulo_reconstruct_dividend(x, y):
    a, b = Value(TypeId.INTEGER, x), Value(TypeId.INTEGER, y)
    q, r = a.divide(b), a.modulo(b)
    assert q.multiply(b).add(r) == a
    assert abs(r.data) < abs(y)


def test_divide_by_zero_raises():
    with pytest.raises(DatabaseError) as info:
        Value(TypeId.INTEGER, 5).divide(Value(TypeId.INTEGER, 0))
    assert info.value.kind is ExceptionType.DIVIDE_BY_ZERO


def test_decimal_modulo_by_zero_raises():
    with pytest.raises(DatabaseError) as info:
        Value(TypeId.DECIMAL, 5.0).modulo(Value(TypeId.DECIMAL, 0.0))
    assert info.value.kind is ExceptionType.DIVIDE_BY_ZERO


def test_decimal_mixed_with_integer_gives_decimal():
    result = Value(TypeId.INTEGER, 3).multiply(Value(TypeId.DECIMAL, 0.5))
    assert result.type_id is TypeId.DECIMAL
    assert result == Value(TypeId.DECIMAL, 0.5).multiply(Value(TypeId.INTEGER, 3))


def test_null_propagates_through_arithmetic():
    result = Value(TypeId.SMALLINT).add(Value(TypeId.BIGINT, 4))
    assert result.is_null()
    assert result.type_id is TypeId.BIGINT


def test_arithmetic_on_varchar_raises():
    with pytest.raises(DatabaseError) as info:
        Value(TypeId.VARCHAR, "a").add(Value(TypeId.INTEGER, 1))
    assert info.value.kind is ExceptionType.INCOMPATIBLE_TYPE


def test_val_mod_follows_dividend_sign():
    assert val_mod(5.5, 2.0) == pytest.approx(1.5)
    assert val_mod(-5.5, 2.0) == pytest.approx(-1.5)


def test_type_sizes_are_ordered():
    assert type_size(TypeId.TINYINT) == type_size(TypeId.BOOLEAN)
    assert type_size(TypeId.TINYINT) < type_size(TypeId.SMALLINT) < type_size(TypeId.INTEGER)
    assert type_size(TypeId.INTEGER) < type_size(TypeId.BIGINT)
    assert type_size(TypeId.BIGINT) == type_size(TypeId.DECIMAL) == type_size(TypeId.TIMESTAMP)


def test_type_size_of_invalid_raises():
    with pytest.raises(DatabaseError) as info:
        type_size(TypeId.INVALID)
    assert info.value.kind is ExceptionType.UNKNOWN_TYPE


def test_to_string():
    assert Value(TypeId.INTEGER, 42).to_string() == str(42)
    assert Value(TypeId.VARCHAR, "hello").to_string() == "hello"
    assert Value(TypeId.BOOLEAN, True).to_string() == "true"
    assert Value(TypeId.INTEGER).to_string() == "NULL"