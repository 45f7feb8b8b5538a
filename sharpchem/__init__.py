################################################################################
#
#  Copyright (C) 2022-2026 Elijah Creed Fedele
#  This file is part of SharpChem
#
#  SPDX-License-Identifier: Apache-2.0
#  See LICENSE for more information.
#
################################################################################

"""
SharpChem numeric core
"""

from __future__ import annotations

from sharpchem.config.decimal_params import DecimalParams
from sharpchem.linalg.square_matrix import SquareMatrix


__all__ = [
    "DecimalParams",
    "SquareMatrix",
]
