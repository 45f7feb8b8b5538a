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

import decimal
from dataclasses import dataclass
from dataclasses import replace
from typing import Any
from typing import Mapping


# Significant digits kept by every cell, matching a 96-bit decimal mantissa
DECIMAL_PRECISION: int = 28

# Rounding applied when a result exceeds the precision
DECIMAL_ROUNDING: str = decimal.ROUND_HALF_EVEN

ROUNDING_MODES: frozenset[str] = frozenset(
    {
        decimal.ROUND_CEILING,
        decimal.ROUND_DOWN,
        decimal.ROUND_FLOOR,
        decimal.ROUND_HALF_DOWN,
        decimal.ROUND_HALF_EVEN,
        decimal.ROUND_HALF_UP,
        decimal.ROUND_UP,
        decimal.ROUND_05UP,
    }
)


class DecimalParamsError(Exception):
    """Raised when decimal configuration validation fails."""


@dataclass(frozen=True, slots=True)
class DecimalParams:
    """Fixed-precision decimal policy shared by the cells of a matrix.

    Responsibility:
        Define the precision and rounding that every matrix cell and every
        arithmetic result is normalized through.

    Purpose:
        Keep thermodynamic calculations exact to a fixed number of decimal
        significant digits instead of inheriting binary floating-point error
        or the mutable thread-global decimal context.

    Data contract:
        - precision: significant decimal digits, 1 <= precision <= MAX_PREC.
        - rounding: one of the decimal module rounding mode names.

    Determinism and edge cases:
        - context() always returns a fresh Context, so callers may mutate it
          without affecting other matrices.
        - InvalidOperation, DivisionByZero and Overflow are trapped, so NaN
          and Infinity never enter a matrix silently.
        - Underflow is not trapped. A result below the smallest exponent
          becomes subnormal or flushes to zero, and stays finite.
    """

    precision: int = DECIMAL_PRECISION
    rounding: str = DECIMAL_ROUNDING

    @staticmethod
    def defaults() -> DecimalParams:
        """Return a stable default parameter set."""
        params: DecimalParams = DecimalParams()
        params.validate()
        return params

    @classmethod
    def from_dict(cls, params: Mapping[str, object]) -> DecimalParams:
        """Construct parameters from a mapping, rejecting unknown keys."""
        if not isinstance(params, Mapping):
            raise DecimalParamsError("params must be a mapping")
        unknown_keys: list[str] = sorted(
            str(key) for key in set(params.keys()) - set(cls._field_order())
        )
        if unknown_keys:
            raise DecimalParamsError(f"unknown parameter: {unknown_keys[0]}")
        defaults: DecimalParams = cls.defaults()
        result: DecimalParams = cls(
            precision=cls._as_int(
                "precision", params.get("precision", defaults.precision)
            ),
            rounding=cls._as_str("rounding", params.get("rounding", defaults.rounding)),
        )
        result.validate()
        return result

    def validate(self) -> None:
        """Validate parameters and raise DecimalParamsError on failure."""
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise DecimalParamsError("precision must be an int")
        if self.precision < 1:
            raise DecimalParamsError("precision must be >= 1")
        if self.precision > decimal.MAX_PREC:
            raise DecimalParamsError(f"precision must be <= {decimal.MAX_PREC}")
        if self.rounding not in ROUNDING_MODES:
            raise DecimalParamsError(
                f"rounding must be one of {sorted(ROUNDING_MODES)}, "
                f"got {self.rounding!r}"
            )

    def context(self) -> decimal.Context:
        """Return a new decimal context implementing this policy."""
        return decimal.Context(
            prec=self.precision,
            rounding=self.rounding,
            traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
        )

    def replace(self, **overrides: Any) -> DecimalParams:
        """Return a modified copy of the parameters."""
        params: DecimalParams = replace(self, **overrides)
        params.validate()
        return params

    def as_dict(self) -> dict[str, object]:
        """Return a YAML-serializable dict representation."""
        return {
            "precision": self.precision,
            "rounding": self.rounding,
        }

    @staticmethod
    def _as_int(name: str, value: object) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DecimalParamsError(f"{name} must be an int")
        return int(value)

    @staticmethod
    def _as_str(name: str, value: object) -> str:
        if not isinstance(value, str):
            raise DecimalParamsError(f"{name} must be a string")
        return value

    @staticmethod
    def _field_order() -> list[str]:
        return [
            "precision",
            "rounding",
        ]
