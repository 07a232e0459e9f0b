"""Dense row-major matrices with addition, multiplication and GEMM."""

from __future__ import annotations

from typing import Iterable


class RowMatrix:
    """A rows x cols matrix stored row by row, initialised to zero."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self.rows = rows
        self.cols = cols
        self._data = [[0] * cols for _ in range(rows)]

    def _check(self, i: int, j: int) -> None:
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"element ({i}, {j}) outside {self.rows}x{self.cols} matrix")

    def get(self, i: int, j: int):
        """Return the element at row i, column j."""
        self._check(i, j)
        return self._data[i][j]

    def set(self, i: int, j: int, value) -> None:
        """Set the element at row i, column j."""
        self._check(i, j)
        self._data[i][j] = value

    def import_values(self, values: Iterable) -> None:
        """Fill the matrix from a flat sequence in row-major order."""
        flat = list(values)
        if len(flat) != self.rows * self.cols:
            raise ValueError(
                f"expected {self.rows * self.cols} values, got {len(flat)}"
            )
        self._data = [flat[r * self.cols:(r + 1) * self.cols] for r in range(self.rows)]

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RowMatrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def __repr__(self) -> str:
        return f"RowMatrix({self.rows}, {self.cols}, {self._data!r})"


def add_matrices(mat1: RowMatrix, mat2: RowMatrix) -> RowMatrix:
    """Return mat1 + mat2; raise ValueError if the shapes differ."""
    if mat1.shape != mat2.shape:
        raise ValueError(f"cannot add {mat1.shape} and {mat2.shape} matrices")
    result = RowMatrix(mat1.rows, mat1.cols)
    result.import_values(
        mat1.get(i, j) + mat2.get(i, j)
        for i in range(mat1.rows)
        for j in range(mat1.cols)
    )
    return result


def multiply_matrices(mat1: RowMatrix, mat2: RowMatrix) -> RowMatrix:
    """Return mat1 * mat2; raise ValueError if the inner dimensions differ."""
    if mat1.cols != mat2.rows:
        raise ValueError(f"cannot multiply {mat1.shape} by {mat2.shape} matrix")
    result = RowMatrix(mat1.rows, mat2.cols)
    result.import_values(
        sum((mat1.get(i, k) * mat2.get(k, j) for k in range(mat1.cols)), 0)
        for i in range(mat1.rows)
        for j in range(mat2.cols)
    )
    return result


def gemm_matrices(mat_a: RowMatrix, mat_b: RowMatrix, mat_c: RowMatrix) -> RowMatrix:
    """Return mat_a * mat_b + mat_c; raise ValueError on a shape mismatch."""
    return add_matrices(multiply_matrices(mat_a, mat_b), mat_c)