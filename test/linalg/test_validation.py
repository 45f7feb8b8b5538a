################################################################################
#
#  Copyright (C) 2022-2026 Elijah Creed Fedele
#  This file is part of SharpChem
#
#  SPDX-License-Identifier: Apache-2.0
#  See LICENSE for more information.
#
################################################################################

"""Tests for square matrix input validation helpers."""

from __future__ import annotations

import numpy as np
import pytest

from sharpchem.linalg.matrix_errors import DimensionMismatchError
from sharpchem.linalg.matrix_errors import IndexOutOfRangeError
from sharpchem.linalg.matrix_errors import InvalidDimensionError
from sharpchem.linalg.matrix_errors import SquareMatrixError
from sharpchem.linalg.validation import require_flat
from sharpchem.linalg.validation import require_index
from sharpchem.linalg.validation import require_length
from sharpchem.linalg.validation import require_same_size
from sharpchem.linalg.validation import require_size
from sharpchem.linalg.validation import require_square_grid
from sharpchem.linalg.validation import square_array


def test_require_size() -> None:
    """Sizes must be non-negative ints."""
    assert require_size(0) == 0
    assert require_size(np.int64(4)) == 4
    for bad in (-1, 1.0, "3", None, False):
        with pytest.raises(InvalidDimensionError):
            require_size(bad)


def test_require_index() -> None:
    """Indices must lie in [0, size)."""
    assert require_index(2, 3, "row") == 2
    for bad in (-1, 3, 10, True, 1.0):
        with pytest.raises(IndexOutOfRangeError):
            require_index(bad, 3, "row")


def test_index_message_names_axis() -> None:
    """The failing axis and bounds appear in the message."""
    with pytest.raises(IndexOutOfRangeError, match="column index 5 out of range"):
        require_index(5, 3, "column")


def test_require_length_and_same_size() -> None:
    """Length and size disagreements are dimension mismatches."""
    require_length([1, 2], 2, "values")
    with pytest.raises(DimensionMismatchError, match="values must have 3 values"):
        require_length([1, 2], 3, "values")
    require_same_size(2, 2, "add")
    with pytest.raises(DimensionMismatchError, match=r"add requires equal sizes"):
        require_same_size(2, 3, "add")


def test_require_square_grid() -> None:
    """Grids must be sequences of equal-length rows."""
    assert require_square_grid([[1, 2], [3, 4]]) == 2
    assert require_square_grid([]) == 0
    for bad in ([[1, 2]], [[1], [2, 3]], "ab", [[1, 2], "ab"], 5):
        with pytest.raises(DimensionMismatchError):
            require_square_grid(bad)  # type: ignore[arg-type]


def test_require_flat() -> None:
    """Flat input must hold size squared values."""
    require_flat([1, 2, 3, 4], 2)
    require_flat([], 0)
    with pytest.raises(DimensionMismatchError):
        require_flat([1, 2, 3], 2)
    with pytest.raises(DimensionMismatchError):
        require_flat("abcd", 2)


def test_square_array() -> None:
    """Array-likes must be 2D and square."""
    assert square_array([[1, 2], [3, 4]]).shape == (2, 2)
    assert square_array(np.zeros((0, 0))).shape == (0, 0)
    with pytest.raises(DimensionMismatchError):
        square_array([[1, 2, 3]])
    with pytest.raises(DimensionMismatchError):
        square_array([1, 2, 3, 4])


def test_errors_share_a_base() -> None:
    """Every taxonomy member derives from SquareMatrixError."""
    for error in (InvalidDimensionError, DimensionMismatchError, IndexOutOfRangeError):
        assert issubclass(error, SquareMatrixError)
    assert issubclass(IndexOutOfRangeError, IndexError)
