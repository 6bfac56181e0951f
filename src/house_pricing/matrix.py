"""
Dense matrix primitive used by the regression engine.

Provides a small owned 2D container with bounds-checked accessors and the
three operations needed to solve the normal equations: transpose, multiply
and inverse (Gauss-Jordan elimination with partial pivoting).
"""

import numpy as np
from typing import Iterable, Sequence, Tuple

# Pivots smaller than this are treated as zero during inversion
SINGULAR_TOLERANCE = 1e-10


class MatrixError(ValueError):
    """Base class for matrix operation errors."""


class DimensionMismatchError(MatrixError):
    """Inner dimensions of a matrix product disagree."""


class NotSquareError(MatrixError):
    """Inversion attempted on a non-square matrix."""


class SingularMatrixError(MatrixError):
    """Matrix has no inverse (or is numerically indistinguishable from singular)."""


class Matrix:
    """
    Dense rows x cols grid of real numbers, zero-initialised on creation.

    Each matrix owns its storage; operations always return new matrices.

    Attributes:
        rows: Number of rows
        cols: Number of columns
    """

    def __init__(self, rows: int, cols: int):
        if rows < 0 or cols < 0:
            raise ValueError(f"Matrix dimensions must be non-negative, got {rows}x{cols}.")
        self.rows = rows
        self.cols = cols
        self._data = np.zeros((rows, cols), dtype=float)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """
        Create a matrix from a sequence of equal-length rows.

        Args:
            rows: Row values, e.g. `[[1, 2], [3, 4]]`

        Returns:
            matrix: New `Matrix` holding a copy of the values
        """
        n_rows = len(rows)
        n_cols = len(rows[0]) if n_rows > 0 else 0
        for i, row in enumerate(rows):
            if len(row) != n_cols:
                raise ValueError(
                    f"Row {i} has {len(row)} values, expected {n_cols}."
                )
        matrix = cls(n_rows, n_cols)
        if n_rows > 0:
            matrix._data[:, :] = np.asarray(rows, dtype=float)
        return matrix

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "Matrix":
        """Create a matrix from a 2D `numpy` array (values are copied)."""
        array = np.asarray(array, dtype=float)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {array.ndim} dimension(s).")
        matrix = cls(*array.shape)
        matrix._data[:, :] = array
        return matrix

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        matrix = cls(n, n)
        np.fill_diagonal(matrix._data, 1.0)
        return matrix

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def _check_index(self, i: int, j: int):
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(
                f"Index ({i}, {j}) out of bounds for {self.rows}x{self.cols} matrix."
            )

    def __getitem__(self, index: Tuple[int, int]) -> float:
        i, j = index
        self._check_index(i, j)
        return float(self._data[i, j])

    def __setitem__(self, index: Tuple[int, int], value: float):
        i, j = index
        self._check_index(i, j)
        self._data[i, j] = value

    def row(self, i: int) -> Tuple[float, ...]:
        self._check_index(i, 0)
        return tuple(float(v) for v in self._data[i, :])

    def column(self, j: int) -> Tuple[float, ...]:
        self._check_index(0, j)
        return tuple(float(v) for v in self._data[:, j])

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the values as a 2D `numpy` array."""
        return self._data.copy()

    def tolist(self) -> list:
        return self._data.tolist()

    def allclose(self, other: "Matrix", atol: float = 1e-8) -> bool:
        """
        Check element-wise equality within an absolute tolerance.

        Matrices with different shapes are never close.
        """
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=atol))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __iter__(self) -> Iterable[Tuple[float, ...]]:
        for i in range(self.rows):
            yield self.row(i)

    def __repr__(self):
        return f"Matrix(rows={self.rows}, cols={self.cols}, data={self.tolist()})"


def transpose(matrix: Matrix) -> Matrix:
    """
    Return the transpose of a matrix.

    Args:
        matrix: Matrix of shape (rows, cols)

    Returns:
        result: Matrix of shape (cols, rows) with `result[j, i] == matrix[i, j]`
    """
    result = Matrix(matrix.cols, matrix.rows)
    result._data[:, :] = matrix._data.T
    return result


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product `a @ b`.

    Args:
        a: Matrix of shape (n, m)
        b: Matrix of shape (m, p)

    Returns:
        result: Matrix of shape (n, p)

    Raises:
        DimensionMismatchError: If `a.cols != b.rows`
    """
    if a.cols != b.rows:
        raise DimensionMismatchError(
            f"Cannot multiply {a.rows}x{a.cols} matrix by {b.rows}x{b.cols} matrix: "
            f"inner dimensions {a.cols} and {b.rows} do not match."
        )
    result = Matrix(a.rows, b.cols)
    result._data[:, :] = a._data @ b._data
    return result


def inverse(matrix: Matrix) -> Matrix:
    """
    Invert a square matrix by Gauss-Jordan elimination on `[A | I]`.

    For each pivot column the row with the largest absolute value at or
    below the diagonal is swapped into place (the first such row wins a
    tie). A pivot with magnitude below `SINGULAR_TOLERANCE` after the swap
    means the matrix cannot be inverted.

    Args:
        matrix: Square matrix of shape (n, n)

    Returns:
        result: Inverse of shape (n, n)

    Raises:
        NotSquareError: If the matrix is not square
        SingularMatrixError: If a pivot falls below `SINGULAR_TOLERANCE`
    """
    n = matrix.rows
    if n != matrix.cols:
        raise NotSquareError(
            f"Matrix must be square for inversion, got {matrix.rows}x{matrix.cols}."
        )

    augmented = np.zeros((n, 2 * n), dtype=float)
    augmented[:, :n] = matrix._data
    augmented[:, n:] = np.eye(n)

    for i in range(n):
        # argmax returns the first maximum, so ties keep the upper row
        max_row = i + int(np.argmax(np.abs(augmented[i:, i])))
        if max_row != i:
            augmented[[i, max_row], :] = augmented[[max_row, i], :]

        pivot = augmented[i, i]
        if abs(pivot) < SINGULAR_TOLERANCE:
            raise SingularMatrixError(
                f"Matrix is singular and cannot be inverted "
                f"(pivot {pivot:.3e} in column {i})."
            )

        augmented[i, :] /= pivot

        for k in range(n):
            if k != i:
                factor = augmented[k, i]
                augmented[k, :] -= factor * augmented[i, :]

    result = Matrix(n, n)
    result._data[:, :] = augmented[:, n:]
    return result
