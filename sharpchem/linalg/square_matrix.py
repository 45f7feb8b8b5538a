################################################################################
#
#  Copyright (C) 2022-2026 Elijah Creed Fedele
#  This file is part of SharpChem
#
#  SPDX-License-Identifier: Apache-2.0
#  See LICENSE for more information.
#
################################################################################

from __future__ import annotations

import contextlib
import decimal
import logging
import numbers
from decimal import Decimal
from fractions import Fraction
from typing import Any
from typing import Iterator
from typing import List
from typing import Sequence

import numpy as np
from numpy.typing import DTypeLike
from numpy.typing import NDArray

from sharpchem.config.decimal_params import DecimalParams

from .decimal_scalar import ONE
from .decimal_scalar import ZERO
from .decimal_scalar import Scalar
from .decimal_scalar import from_fraction
from .decimal_scalar import is_zero
from .decimal_scalar import to_decimal
from .elimination import EliminationResult
from .elimination import GaussianElimination
from .matrix_errors import InvalidValueError
from .validation import require_flat
from .validation import require_index
from .validation import require_length
from .validation import require_same_size
from .validation import require_size
from .validation import require_square_grid
from .validation import square_array


_LOG: logging.Logger = logging.getLogger(__name__)


class SquareMatrix:
    """N x N grid of fixed-precision decimal cells.

    Responsibility:
        Provide the linear-algebra substrate for the Gaussian and
        thermodynamic routines: construction, bounds-checked access,
        arithmetic, and structural queries over exact decimal cells.

    Data contract:
        - size is fixed at construction and never changes.
        - Every cell is a finite Decimal normalized through the matrix's
          DecimalParams context.
        - Each instance owns its rows exclusively. Constructors copy their
          input and accessors return copies.

    Arithmetic:
        - Operators never mutate operands; results are new matrices using
          the left operand's DecimalParams.
        - A + B, A - B, k * A, A @ B, and A * B (Hadamard) map to add,
          subtract, scale, multiply, and hadamard.

    Validation order:
        - Every operation validates before mutating or computing.
        - set_row/set_column check the index first, then the length, then
          the values.
    """

    __slots__ = ("_size", "_cells", "_params", "_context")

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    # numpy scalars on the left of an operator defer to __rmul__
    __array_ufunc__ = None

    def __init__(
        self,
        size: int,
        fill: Scalar = 0,
        params: DecimalParams | None = None,
    ) -> None:
        self._size: int = require_size(size)
        self._params: DecimalParams = params if params is not None else DecimalParams()
        self._params.validate()
        self._context: decimal.Context = self._params.context()
        value: Decimal = to_decimal(fill, self._context, "fill")
        self._cells: List[List[Decimal]] = [
            [value for _ in range(self._size)] for _ in range(self._size)
        ]

    ############################################################################
    # Construction
    ############################################################################

    @classmethod
    def zero(cls, size: int, params: DecimalParams | None = None) -> SquareMatrix:
        """Return a size x size matrix of zeros."""
        return cls(size, ZERO, params)

    @classmethod
    def filled(
        cls, size: int, value: Scalar, params: DecimalParams | None = None
    ) -> SquareMatrix:
        """Return a size x size matrix with every cell set to value."""
        return cls(size, value, params)

    @classmethod
    def identity(cls, size: int, params: DecimalParams | None = None) -> SquareMatrix:
        """Return the size x size identity matrix."""
        matrix: SquareMatrix = cls(size, ZERO, params)
        for i in range(matrix._size):
            matrix._cells[i][i] = ONE
        return matrix

    @classmethod
    def from_grid(
        cls,
        grid: Sequence[Sequence[Scalar]],
        params: DecimalParams | None = None,
    ) -> SquareMatrix:
        """Return a matrix holding a copy of a square grid."""
        size: int = require_square_grid(grid)
        matrix: SquareMatrix = cls(size, ZERO, params)
        for i, row in enumerate(grid):
            for j, value in enumerate(row):
                matrix._cells[i][j] = to_decimal(
                    value, matrix._context, f"grid[{i}][{j}]"
                )
        return matrix

    @classmethod
    def from_flat(
        cls,
        size: int,
        flat_values: Sequence[Scalar],
        params: DecimalParams | None = None,
    ) -> SquareMatrix:
        """Return a matrix reshaped row-major from size * size values."""
        size = require_size(size)
        require_flat(flat_values, size)
        matrix: SquareMatrix = cls(size, ZERO, params)
        for index, value in enumerate(flat_values):
            row: int = index // size
            col: int = index % size
            matrix._cells[row][col] = to_decimal(
                value, matrix._context, f"flat_values[{index}]"
            )
        return matrix

    @classmethod
    def from_numpy(
        cls, array: Any, params: DecimalParams | None = None
    ) -> SquareMatrix:
        """Return a matrix from a 2D square array-like."""
        values: NDArray[Any] = square_array(array)
        size: int = int(values.shape[0])
        matrix: SquareMatrix = cls(size, ZERO, params)
        for i in range(size):
            for j in range(size):
                matrix._cells[i][j] = to_decimal(
                    values[i, j], matrix._context, f"array[{i}, {j}]"
                )
        return matrix

    def copy(self) -> SquareMatrix:
        """Return an independent copy."""
        return self._new([list(row) for row in self._cells])

    ############################################################################
    # Access
    ############################################################################

    @property
    def size(self) -> int:
        return self._size

    @property
    def params(self) -> DecimalParams:
        return self._params

    def get(self, i: int, j: int) -> Decimal:
        row: int = require_index(i, self._size, "row")
        col: int = require_index(j, self._size, "column")
        return self._cells[row][col]

    def set(self, i: int, j: int, value: Scalar) -> None:
        row: int = require_index(i, self._size, "row")
        col: int = require_index(j, self._size, "column")
        self._cells[row][col] = to_decimal(value, self._context)

    def __getitem__(self, key: tuple[int, int]) -> Decimal:
        i, j = self._split_key(key)
        return self.get(i, j)

    def __setitem__(self, key: tuple[int, int], value: Scalar) -> None:
        i, j = self._split_key(key)
        self.set(i, j, value)

    def get_row(self, r: int) -> List[Decimal]:
        """Return a copy of row r in column order."""
        row: int = require_index(r, self._size, "row")
        return list(self._cells[row])

    def set_row(self, r: int, values: Sequence[Scalar]) -> None:
        """Overwrite row r with values."""
        row: int = require_index(r, self._size, "row")
        require_length(values, self._size, "row values")
        converted: List[Decimal] = [
            to_decimal(value, self._context, f"row values[{k}]")
            for k, value in enumerate(values)
        ]
        self._cells[row] = converted

    def get_column(self, c: int) -> List[Decimal]:
        """Return a copy of column c in row order."""
        col: int = require_index(c, self._size, "column")
        return [self._cells[i][col] for i in range(self._size)]

    def set_column(self, c: int, values: Sequence[Scalar]) -> None:
        """Overwrite column c with values."""
        col: int = require_index(c, self._size, "column")
        require_length(values, self._size, "column values")
        converted: List[Decimal] = [
            to_decimal(value, self._context, f"column values[{k}]")
            for k, value in enumerate(values)
        ]
        for i in range(self._size):
            self._cells[i][col] = converted[i]

    def rows(self) -> List[List[Decimal]]:
        return [list(row) for row in self._cells]

    def to_lists(self) -> List[List[Decimal]]:
        return self.rows()

    def to_numpy(self, dtype: DTypeLike = object) -> NDArray[Any]:
        """Export the cells as an (N, N) array.

        The default object dtype keeps the exact Decimal cells. Pass float
        for floating-point consumers.
        """
        array: NDArray[Any] = np.array(self._cells, dtype=dtype)
        return array.reshape((self._size, self._size))

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[List[Decimal]]:
        for row in self._cells:
            yield list(row)

    ############################################################################
    # Arithmetic
    ############################################################################

    def add(self, other: SquareMatrix) -> SquareMatrix:
        self._require_peer(other, "add")
        require_same_size(self._size, other._size, "add")
        ctx: decimal.Context = self._context
        with _finite_results("add"):
            cells: List[List[Decimal]] = [
                [
                    ctx.add(self._cells[i][j], other._cells[i][j])
                    for j in range(self._size)
                ]
                for i in range(self._size)
            ]
        return self._new(cells)

    def subtract(self, other: SquareMatrix) -> SquareMatrix:
        self._require_peer(other, "subtract")
        require_same_size(self._size, other._size, "subtract")
        ctx: decimal.Context = self._context
        with _finite_results("subtract"):
            cells: List[List[Decimal]] = [
                [
                    ctx.subtract(self._cells[i][j], other._cells[i][j])
                    for j in range(self._size)
                ]
                for i in range(self._size)
            ]
        return self._new(cells)

    def scale(self, k: Scalar) -> SquareMatrix:
        ctx: decimal.Context = self._context
        factor: Decimal = to_decimal(k, ctx, "scale factor")
        with _finite_results("scale"):
            cells: List[List[Decimal]] = [
                [ctx.multiply(factor, value) for value in row] for row in self._cells
            ]
        return self._new(cells)

    def negate(self) -> SquareMatrix:
        return self.scale(-ONE)

    def multiply(self, other: SquareMatrix) -> SquareMatrix:
        """Return the matrix product self x other."""
        self._require_peer(other, "multiply")
        require_same_size(self._size, other._size, "multiply")
        ctx: decimal.Context = self._context
        size: int = self._size
        result: List[List[Decimal]] = [[ZERO for _ in range(size)] for _ in range(size)]
        with _finite_results("multiply"):
            for i in range(size):
                for j in range(size):
                    acc: Decimal = ZERO
                    for k in range(size):
                        acc = ctx.add(
                            acc, ctx.multiply(self._cells[i][k], other._cells[k][j])
                        )
                    result[i][j] = acc
        return self._new(result)

    def hadamard(self, other: SquareMatrix) -> SquareMatrix:
        """Return the elementwise product."""
        self._require_peer(other, "hadamard")
        require_same_size(self._size, other._size, "hadamard")
        ctx: decimal.Context = self._context
        with _finite_results("hadamard"):
            cells: List[List[Decimal]] = [
                [
                    ctx.multiply(self._cells[i][j], other._cells[i][j])
                    for j in range(self._size)
                ]
                for i in range(self._size)
            ]
        return self._new(cells)

    def kronecker(self, other: SquareMatrix) -> SquareMatrix:
        """Return the Kronecker product with size self.size * other.size.

        Block (p, q) of the result is self[p, q] * other, so
        result[p * n + r][q * n + s] = self[p][q] * other[r][s] where n is
        other.size.
        """
        self._require_peer(other, "kronecker")
        ctx: decimal.Context = self._context
        block: int = other._size
        size: int = self._size * block
        result: List[List[Decimal]] = [[ZERO for _ in range(size)] for _ in range(size)]
        with _finite_results("kronecker"):
            for p in range(self._size):
                for q in range(self._size):
                    a_pq: Decimal = self._cells[p][q]
                    for r in range(block):
                        for s in range(block):
                            result[p * block + r][q * block + s] = ctx.multiply(
                                a_pq, other._cells[r][s]
                            )
        return self._new(result)

    def transpose(self) -> SquareMatrix:
        return self._new(
            [[self._cells[i][j] for i in range(self._size)] for j in range(self._size)]
        )

    def trace(self) -> Decimal:
        ctx: decimal.Context = self._context
        acc: Decimal = ZERO
        with _finite_results("trace"):
            for i in range(self._size):
                acc = ctx.add(acc, self._cells[i][i])
        return acc

    def determinant(self) -> Decimal:
        """Return the determinant, exact until a single final rounding."""
        exact: Fraction = GaussianElimination.determinant(self._cells)
        with _finite_results("determinant"):
            result: Decimal = from_fraction(exact, self._context)
        _LOG.debug("Determinant of %dx%d matrix: %s", self._size, self._size, result)
        return result

    ############################################################################
    # Structural predicates
    ############################################################################

    def is_identity(self) -> bool:
        for i in range(self._size):
            for j in range(self._size):
                expected: Decimal = ONE if i == j else ZERO
                if self._cells[i][j] != expected:
                    return False
        return True

    def is_upper_triangular(self) -> bool:
        """True when every cell below the main diagonal is zero."""
        return all(
            is_zero(self._cells[i][j])
            for i in range(self._size)
            for j in range(i)
        )

    def is_lower_triangular(self) -> bool:
        """True when every cell above the main diagonal is zero."""
        return all(
            is_zero(self._cells[i][j])
            for i in range(self._size)
            for j in range(i + 1, self._size)
        )

    def is_diagonal(self) -> bool:
        return self.is_upper_triangular() and self.is_lower_triangular()

    def is_symmetric(self) -> bool:
        return all(
            self._cells[i][j] == self._cells[j][i]
            for i in range(self._size)
            for j in range(i + 1, self._size)
        )

    def is_invertible(self) -> bool:
        """True when the determinant is exactly non-zero.

        Elimination runs on exact rationals, so no tolerance applies.
        """
        result: EliminationResult = GaussianElimination.reduce(self._cells)
        return result.singular_column is None

    ############################################################################
    # Operators
    ############################################################################

    def __add__(self, other: object) -> SquareMatrix:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> SquareMatrix:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> SquareMatrix:
        if isinstance(other, SquareMatrix):
            return self.hadamard(other)
        if _is_operator_scalar(other):
            return self.scale(other)  # type: ignore[arg-type]
        return NotImplemented

    def __rmul__(self, other: object) -> SquareMatrix:
        if _is_operator_scalar(other):
            return self.scale(other)  # type: ignore[arg-type]
        return NotImplemented

    def __matmul__(self, other: object) -> SquareMatrix:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> SquareMatrix:
        return self.negate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self._size == other._size and self._cells == other._cells

    def __repr__(self) -> str:
        body: str = ", ".join(
            "[" + ", ".join(str(value) for value in row) + "]" for row in self._cells
        )
        return f"SquareMatrix(size={self._size}, rows=[{body}])"

    ############################################################################
    # Internals
    ############################################################################

    def _new(self, cells: List[List[Decimal]]) -> SquareMatrix:
        # Takes ownership of cells, which must already be context-normalized
        matrix: SquareMatrix = object.__new__(SquareMatrix)
        matrix._size = len(cells)
        matrix._cells = cells
        matrix._params = self._params
        matrix._context = self._params.context()
        return matrix

    @staticmethod
    def _require_peer(other: object, operation: str) -> None:
        if not isinstance(other, SquareMatrix):
            raise TypeError(
                f"{operation} requires a SquareMatrix operand, "
                f"got {type(other).__name__}"
            )

    @staticmethod
    def _split_key(key: object) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("SquareMatrix indices must be a (row, column) pair")
        return key[0], key[1]


@contextlib.contextmanager
def _finite_results(operation: str) -> Iterator[None]:
    try:
        yield
    except decimal.Overflow as exc:
        raise InvalidValueError(
            f"{operation} result exceeds the decimal exponent range"
        ) from exc


def _is_operator_scalar(value: object) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (Decimal, numbers.Real))


################################################################################
# Named operations
################################################################################


def zero(size: int, params: DecimalParams | None = None) -> SquareMatrix:
    return SquareMatrix.zero(size, params)


def filled(
    size: int, value: Scalar, params: DecimalParams | None = None
) -> SquareMatrix:
    return SquareMatrix.filled(size, value, params)


def from_grid(
    grid: Sequence[Sequence[Scalar]], params: DecimalParams | None = None
) -> SquareMatrix:
    return SquareMatrix.from_grid(grid, params)


def from_flat(
    size: int, flat_values: Sequence[Scalar], params: DecimalParams | None = None
) -> SquareMatrix:
    return SquareMatrix.from_flat(size, flat_values, params)


def identity(size: int, params: DecimalParams | None = None) -> SquareMatrix:
    return SquareMatrix.identity(size, params)


def add(lhs: SquareMatrix, rhs: SquareMatrix) -> SquareMatrix:
    return lhs.add(rhs)


def subtract(lhs: SquareMatrix, rhs: SquareMatrix) -> SquareMatrix:
    return lhs.subtract(rhs)


def scale(k: Scalar, matrix: SquareMatrix) -> SquareMatrix:
    return matrix.scale(k)


def multiply(lhs: SquareMatrix, rhs: SquareMatrix) -> SquareMatrix:
    return lhs.multiply(rhs)


def hadamard(lhs: SquareMatrix, rhs: SquareMatrix) -> SquareMatrix:
    return lhs.hadamard(rhs)


def kronecker(lhs: SquareMatrix, rhs: SquareMatrix) -> SquareMatrix:
    return lhs.kronecker(rhs)
