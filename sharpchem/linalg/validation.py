################################################################################
#
#  Copyright (C) 2022-2026 Elijah Creed Fedele
#  This file is part of SharpChem
#
#  SPDX-License-Identifier: Apache-2.0
#  See LICENSE for more information.
#
################################################################################

"""Validation helpers for square matrix inputs."""

from __future__ import annotations

import numbers
from typing import Any
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from .matrix_errors import DimensionMismatchError
from .matrix_errors import IndexOutOfRangeError
from .matrix_errors import InvalidDimensionError


def require_size(size: object, name: str = "size") -> int:
    """Return the size as an int, rejecting negative or non-integer values."""
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise InvalidDimensionError(
            f"{name} must be an int, got {type(size).__name__}"
        )
    value: int = int(size)
    if value < 0:
        raise InvalidDimensionError(f"{name} must be non-negative, got {value}")
    return value


def require_index(index: object, size: int, axis: str) -> int:
    """Return the index as an int when it lies in [0, size)."""
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise IndexOutOfRangeError(
            f"{axis} index must be an int, got {type(index).__name__}"
        )
    value: int = int(index)
    if not 0 <= value < size:
        raise IndexOutOfRangeError(
            f"{axis} index {value} out of range for size {size}"
        )
    return value


def require_length(values: Sequence[Any], expected: int, name: str) -> None:
    """Ensure a sequence holds exactly the expected number of values."""
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise DimensionMismatchError(f"{name} must be a sequence of values")
    if len(values) != expected:
        raise DimensionMismatchError(
            f"{name} must have {expected} values, got {len(values)}"
        )


def require_same_size(lhs_size: int, rhs_size: int, operation: str) -> None:
    """Ensure two matrix operands share a size."""
    if lhs_size != rhs_size:
        raise DimensionMismatchError(
            f"{operation} requires equal sizes, got ({lhs_size}, {rhs_size})"
        )


def require_square_grid(grid: Sequence[Sequence[Any]]) -> int:
    """Return the size of a square grid, rejecting ragged or oblong input."""
    if isinstance(grid, (str, bytes)) or not isinstance(grid, Sequence):
        raise DimensionMismatchError("grid must be a sequence of rows")
    size: int = len(grid)
    for row_index, row in enumerate(grid):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise DimensionMismatchError(f"grid row {row_index} must be a sequence")
        if len(row) != size:
            raise DimensionMismatchError(
                f"bounds not equal ({size},{len(row)}) at row {row_index}"
            )
    return size


def require_flat(flat_values: Sequence[Any], size: int) -> None:
    """Ensure a flat sequence can be reshaped into a size x size grid."""
    if isinstance(flat_values, (str, bytes)) or not isinstance(flat_values, Sequence):
        raise DimensionMismatchError("flat values must be a sequence")
    expected: int = size * size
    if len(flat_values) != expected:
        raise DimensionMismatchError(
            f"flat values must have {expected} elements for size {size}, "
            f"got {len(flat_values)}"
        )


def square_array(values: Any, name: str = "array") -> NDArray[Any]:
    """Return a 2D square object array from array-like input."""
    array: NDArray[Any] = np.asarray(values, dtype=object)
    if array.ndim != 2:
        raise DimensionMismatchError(f"{name} must be 2D, got {array.ndim}D")
    if array.shape[0] != array.shape[1]:
        raise DimensionMismatchError(
            f"{name} must be square, got shape {tuple(array.shape)}"
        )
    return array
