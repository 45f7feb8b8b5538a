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

import logging
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import List
from typing import Sequence

from .decimal_scalar import to_fraction


_LOG: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EliminationResult:
    """Outcome of reducing a square matrix to upper-triangular form.

    Attributes:
        upper: Upper-triangular rows, exact rationals
        determinant: Exact determinant of the input
        swaps: Number of row interchanges performed
        singular_column: First column with no usable pivot, or None
    """

    upper: List[List[Fraction]]
    determinant: Fraction
    swaps: int
    singular_column: int | None


class GaussianElimination:
    """Exact Gaussian elimination for decimal matrices.

    Responsibility:
        Reduce a square decimal grid to upper-triangular form and report its
        determinant without any rounding.

    Purpose:
        Back the invertibility predicate with an exact zero test. Every
        finite decimal has an exact rational value, so elimination runs on
        Fraction images of the cells and no tolerance is needed.

    Inputs/outputs:
        - Input: square grid of finite Decimal cells (validated by caller).
        - Output: EliminationResult with exact rationals.

    Determinism and edge cases:
        - Partial pivoting picks the largest magnitude candidate at or below
          the diagonal, lowest row index winning ties.
        - A column with no non-zero candidate makes the determinant exactly
          zero; elimination stops there.
        - The 0x0 grid has determinant 1.
    """

    @staticmethod
    def reduce(grid: Sequence[Sequence[Decimal]]) -> EliminationResult:
        size: int = len(grid)
        rows: List[List[Fraction]] = [
            [to_fraction(value) for value in row] for row in grid
        ]
        swaps: int = 0
        for col in range(size):
            pivot_row: int = GaussianElimination._pivot_row(rows, col)
            if rows[pivot_row][col] == 0:
                _LOG.debug("No pivot in column %d of %dx%d matrix", col, size, size)
                return EliminationResult(
                    upper=rows,
                    determinant=Fraction(0),
                    swaps=swaps,
                    singular_column=col,
                )
            if pivot_row != col:
                rows[col], rows[pivot_row] = rows[pivot_row], rows[col]
                swaps += 1
            pivot: Fraction = rows[col][col]
            for row in range(col + 1, size):
                factor: Fraction = rows[row][col] / pivot
                if factor == 0:
                    continue
                rows[row][col] = Fraction(0)
                for k in range(col + 1, size):
                    rows[row][k] -= factor * rows[col][k]

        determinant: Fraction = Fraction(-1 if swaps % 2 else 1)
        for i in range(size):
            determinant *= rows[i][i]
        return EliminationResult(
            upper=rows,
            determinant=determinant,
            swaps=swaps,
            singular_column=None,
        )

    @staticmethod
    def determinant(grid: Sequence[Sequence[Decimal]]) -> Fraction:
        return GaussianElimination.reduce(grid).determinant

    @staticmethod
    def _pivot_row(rows: Sequence[Sequence[Fraction]], col: int) -> int:
        best_row: int = col
        best_abs: Fraction = abs(rows[col][col])
        for row in range(col + 1, len(rows)):
            candidate: Fraction = abs(rows[row][col])
            if candidate > best_abs:
                best_row = row
                best_abs = candidate
        return best_row
