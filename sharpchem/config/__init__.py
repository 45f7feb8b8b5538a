################################################################################
#
#  Copyright (C) 2022-2026 Elijah Creed Fedele
#  This file is part of SharpChem
#
#  SPDX-License-Identifier: Apache-2.0
#  See LICENSE for more information.
#
################################################################################

"""Configuration for the SharpChem numeric core."""

from __future__ import annotations

from sharpchem.config.decimal_params import DecimalParams
from sharpchem.config.decimal_params import DecimalParamsError
from sharpchem.config.params_yaml import load_decimal_params
from sharpchem.config.params_yaml import parse_decimal_params


__all__ = [
    "DecimalParams",
    "DecimalParamsError",
    "load_decimal_params",
    "parse_decimal_params",
]
