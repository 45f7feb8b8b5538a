################################################################################
#
#  Copyright (C) 2022-2026 Elijah Creed Fedele
#  This file is part of SharpChem
#
#  SPDX-License-Identifier: Apache-2.0
#  See LICENSE for more information.
#
################################################################################

"""Tests for exact Gaussian elimination."""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

from sharpchem.linalg.elimination import EliminationResult
from sharpchem.linalg.elimination import GaussianElimination


def _grid(rows: list[list[str]]) -> list[list[Decimal]]:
    return [[Decimal(value) for value in row] for row in rows]


def test_reduce_produces_upper_triangular_form() -> None:
    """reduce zeroes everything below the diagonal."""
    result: EliminationResult = GaussianElimination.reduce(
        _grid([["2", "1", "1"], ["4", "-6", "0"], ["-2", "7", "2"]])
    )
    assert result.singular_column is None
    for i in range(3):
        for j in range(i):
            assert result.upper[i][j] == 0
    assert result.determinant == Fraction(-16)


def test_partial_pivoting_swaps_largest_row() -> None:
    """The largest magnitude candidate becomes the pivot."""
    result: EliminationResult = GaussianElimination.reduce(
        _grid([["1", "0"], ["3", "1"]])
    )
    assert result.swaps == 1
    assert result.upper[0] == [Fraction(3), Fraction(1)]
    assert result.determinant == Fraction(1)


def test_zero_pivot_requires_swap() -> None:
    """A zero on the diagonal is pivoted away and flips the sign."""
    result: EliminationResult = GaussianElimination.reduce(
        _grid([["0", "2"], ["3", "4"]])
    )
    assert result.swaps == 1
    assert result.determinant == Fraction(-6)


def test_singular_column_is_reported() -> None:
    """Elimination stops at the first column without a pivot."""
    result: EliminationResult = GaussianElimination.reduce(
        _grid([["1", "2"], ["2", "4"]])
    )
    assert result.singular_column == 1
    assert result.determinant == 0


def test_decimal_cells_stay_exact() -> None:
    """Decimal fractions are eliminated without rounding."""
    determinant: Fraction = GaussianElimination.determinant(
        _grid([["0.1", "0.2"], ["0.3", "0.7"]])
    )
    assert determinant == Fraction(1, 100)


def test_empty_grid() -> None:
    """The 0 x 0 determinant is 1."""
    result: EliminationResult = GaussianElimination.reduce([])
    assert result.determinant == 1
    assert result.upper == []
    assert result.singular_column is None
