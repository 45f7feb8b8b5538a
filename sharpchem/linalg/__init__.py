################################################################################
#
#  Copyright (C) 2022-2026 Elijah Creed Fedele
#  This file is part of SharpChem
#
#  SPDX-License-Identifier: Apache-2.0
#  See LICENSE for more information.
#
################################################################################

"""Square matrix core with fixed-precision decimal cells."""

from __future__ import annotations

from sharpchem.linalg.matrix_errors import DimensionMismatchError
from sharpchem.linalg.matrix_errors import IndexOutOfRangeError
from sharpchem.linalg.matrix_errors import InvalidDimensionError
from sharpchem.linalg.matrix_errors import InvalidValueError
from sharpchem.linalg.matrix_errors import SquareMatrixError
from sharpchem.linalg.square_matrix import SquareMatrix
from sharpchem.linalg.square_matrix import add
from sharpchem.linalg.square_matrix import filled
from sharpchem.linalg.square_matrix import from_flat
from sharpchem.linalg.square_matrix import from_grid
from sharpchem.linalg.square_matrix import hadamard
from sharpchem.linalg.square_matrix import identity
from sharpchem.linalg.square_matrix import kronecker
from sharpchem.linalg.square_matrix import multiply
from sharpchem.linalg.square_matrix import scale
from sharpchem.linalg.square_matrix import subtract
from sharpchem.linalg.square_matrix import zero


__all__ = [
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    "InvalidDimensionError",
    "InvalidValueError",
    "SquareMatrix",
    "SquareMatrixError",
    "add",
    "filled",
    "from_flat",
    "from_grid",
    "hadamard",
    "identity",
    "kronecker",
    "multiply",
    "scale",
    "subtract",
    "zero",
]
