################################################################################
#
#  Copyright (C) 2022-2026 Elijah Creed Fedele
#  This file is part of SharpChem
#
#  SPDX-License-Identifier: Apache-2.0
#  See LICENSE for more information.
#
################################################################################

"""YAML loading for decimal configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any
from typing import Mapping

import yaml

from .decimal_params import DecimalParams
from .decimal_params import DecimalParamsError


_LOG: logging.Logger = logging.getLogger(__name__)

# Optional top-level key grouping the decimal settings
DECIMAL_SECTION: str = "decimal"


def parse_decimal_params(text: str) -> DecimalParams:
    """Parse decimal parameters from a YAML document.

    The document is either a flat mapping of DecimalParams fields or a
    mapping with those fields nested under a ``decimal`` key. An empty
    document yields the defaults.
    """
    try:
        document: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DecimalParamsError(f"invalid YAML: {exc}") from exc

    if document is None:
        return DecimalParams.defaults()
    if not isinstance(document, Mapping):
        raise DecimalParamsError("YAML document must be a mapping")

    section: Any = document
    if DECIMAL_SECTION in document:
        section = document[DECIMAL_SECTION]
        if section is None:
            return DecimalParams.defaults()
        if not isinstance(section, Mapping):
            raise DecimalParamsError(f"'{DECIMAL_SECTION}' must be a mapping")

    return DecimalParams.from_dict(section)


def load_decimal_params(path: str | Path) -> DecimalParams:
    """Load decimal parameters from a YAML file."""
    file_path: Path = Path(path)
    try:
        text: str = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DecimalParamsError(f"cannot read {file_path}: {exc}") from exc

    params: DecimalParams = parse_decimal_params(text)
    _LOG.info(
        "Loaded decimal params from %s (precision=%d, rounding=%s)",
        file_path,
        params.precision,
        params.rounding,
    )
    return params
