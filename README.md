# minidb

Building blocks for a small relational database engine, in plain Python with no dependencies.

- `minidb.type_id` defines `TypeId` (BOOLEAN, TINYINT, SMALLINT, INTEGER, BIGINT, DECIMAL, VARCHAR, TIMESTAMP) and `CmpBool`, the three-valued comparison result. It also holds `cmp_bool` and `type_id_to_string`, together with the minimum, maximum and NULL limits of each type.
- `minidb.value.Value` is an immutable typed SQL value in which `None` stands for NULL. `add`, `subtract`, `multiply`, `divide` and `modulo` return their result in the wider of the two operand types, or in DECIMAL if either operand is DECIMAL. Integer results are checked for overflow. Integer division truncates toward zero. Any NULL operand gives a NULL result. `type_size` and `val_mod` are helpers in the same module.
- `minidb.value_factory` builds values with `tinyint_value`, `integer_value`, `boolean_value`, `null_value`, `zero_value` and related functions. It converts between types with the `cast_as_*` functions. Among them, `cast_as_timestamp` parses `YYYY-MM-DD HH:MM:SS[.ffffff]+TZ` text into a packed integer.
- `minidb.lru_replacer.LRUReplacer` keeps track of unpinned frames and gives up the one that was unpinned longest ago.
- `minidb.matrix.RowMatrix` is a zero-initialised row-major matrix. `add_matrices`, `multiply_matrices` and `gemm_matrices` raise `ValueError` when the shapes do not match.
- `minidb.string_util` holds string helpers: `split`, `split_on`, `prefix_lines`, `format_size`, `bold`, ASCII `upper` and `lower`, and others.
- `minidb.common` defines `DatabaseError`, tagged with an `ExceptionType`, along with shared constants such as `PAGE_SIZE`.

## Installation

```
pip install .
```

## Examples

Typed values and casts raise `minidb.common.DatabaseError` on overflow, division by zero or bad input:

```python
from minidb.common import DatabaseError
from minidb.value_factory import integer_value, tinyint_value, cast_as_tinyint, varchar_value, cast_as_boolean

total = integer_value(40).add(tinyint_value(2))
print(total.to_string())      # 42
print(total.type_id.name)     # INTEGER

print(cast_as_boolean(varchar_value("T")).to_string())  # true

try:
    cast_as_tinyint(integer_value(1000))
except DatabaseError as err:
    print(err.kind.name)      # OUT_OF_RANGE
```

Choosing an eviction victim:

```python
from minidb.lru_replacer import LRUReplacer

replacer = LRUReplacer(3)
for frame in (1, 2, 3):
    replacer.unpin(frame)
replacer.pin(1)
print(replacer.victim())  # 2
print(len(replacer))      # 1
```

Matrices:

```python
from minidb.matrix import RowMatrix, gemm_matrices

a = RowMatrix(2, 2); a.import_values([1, 2, 3, 4])
b = RowMatrix(2, 2); b.import_values([1, 0, 0, 1])
c = RowMatrix(2, 2); c.import_values([1, 1, 1, 1])
print(gemm_matrices(a, b, c))  # RowMatrix(2, 2, [[2, 3], [4, 5]])
```

## What the package does not do

The package has no storage. It does not read or write pages on disk, it has no buffer pool that uses `LRUReplacer`, and it has no tables, schemas, transactions, locking or query execution. `Value` objects live only in memory. The package offers no serialisation format for them and no command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```