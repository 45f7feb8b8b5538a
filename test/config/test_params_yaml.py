################################################################################
#
#  Copyright (C) 2022-2026 Elijah Creed Fedele
#  This file is part of SharpChem
#
#  SPDX-License-Identifier: Apache-2.0
#  See LICENSE for more information.
#
################################################################################

"""Tests for YAML loading of decimal parameters."""

from __future__ import annotations

import decimal
import logging
from pathlib import Path

import pytest

from sharpchem.config.decimal_params import DecimalParams
from sharpchem.config.decimal_params import DecimalParamsError
from sharpchem.config.params_yaml import load_decimal_params
from sharpchem.config.params_yaml import parse_decimal_params


def test_parse_flat_mapping() -> None:
    """Top-level fields are read directly."""
    params: DecimalParams = parse_decimal_params(
        "precision: 10\nrounding: ROUND_HALF_UP\n"
    )
    assert params == DecimalParams(precision=10, rounding=decimal.ROUND_HALF_UP)


def test_parse_nested_section() -> None:
    """Fields may be grouped under a decimal key."""
    params: DecimalParams = parse_decimal_params("decimal:\n  precision: 16\n")
    assert params.precision == 16
    assert params.rounding == decimal.ROUND_HALF_EVEN


def test_parse_empty_documents() -> None:
    """Empty documents and sections yield defaults."""
    assert parse_decimal_params("") == DecimalParams.defaults()
    assert parse_decimal_params("decimal:\n") == DecimalParams.defaults()


def test_parse_rejects_invalid_documents() -> None:
    """Malformed YAML and non-mapping documents raise DecimalParamsError."""
    with pytest.raises(DecimalParamsError):
        parse_decimal_params("precision: [1")
    with pytest.raises(DecimalParamsError):
        parse_decimal_params("- 1\n- 2\n")
    with pytest.raises(DecimalParamsError):
        parse_decimal_params("decimal: 5\n")
    with pytest.raises(DecimalParamsError):
        parse_decimal_params("precision: 0\n")
    with pytest.raises(DecimalParamsError):
        parse_decimal_params("precision: 8\nscale: 2\n")


def test_load_from_file(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """load_decimal_params reads a file and logs the result."""
    config_path: Path = tmp_path / "sharpchem.yaml"
    config_path.write_text(
        "decimal:\n  precision: 20\n  rounding: ROUND_DOWN\n", encoding="utf-8"
    )
    with caplog.at_level(logging.INFO, logger="sharpchem.config.params_yaml"):
        params: DecimalParams = load_decimal_params(config_path)
    assert params == DecimalParams(precision=20, rounding=decimal.ROUND_DOWN)
    assert "Loaded decimal params" in caplog.text


def test_load_missing_file(tmp_path: Path) -> None:
    """Unreadable files surface as DecimalParamsError."""
    with pytest.raises(DecimalParamsError):
        load_decimal_params(tmp_path / "missing.yaml")
