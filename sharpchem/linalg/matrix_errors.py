################################################################################
#
#  Copyright (C) 2022-2026 Elijah Creed Fedele
#  This file is part of SharpChem
#
#  SPDX-License-Identifier: Apache-2.0
#  See LICENSE for more information.
#
################################################################################

"""Exceptions raised by the square matrix core."""

from __future__ import annotations


class SquareMatrixError(Exception):
    """Base class for square matrix failures."""


class InvalidDimensionError(SquareMatrixError, ValueError):
    """Raised when a requested matrix size is negative or not an integer."""


class DimensionMismatchError(SquareMatrixError, ValueError):
    """Raised when operand sizes or supplied sequence lengths disagree."""


class IndexOutOfRangeError(SquareMatrixError, IndexError):
    """Raised when a row, column, or cell index falls outside [0, size)."""


class InvalidValueError(SquareMatrixError, ValueError):
    """Raised when a cell value cannot become a finite decimal."""
