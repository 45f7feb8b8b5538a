################################################################################
#
#  Copyright (C) 2022-2026 Elijah Creed Fedele
#  This file is part of SharpChem
#
#  SPDX-License-Identifier: Apache-2.0
#  See LICENSE for more information.
#
################################################################################

"""Fixed-precision decimal scalar helpers."""

from __future__ import annotations

import decimal
import logging
import math
import numbers
from decimal import Decimal
from fractions import Fraction
from typing import Union

from .matrix_errors import InvalidValueError


_LOG: logging.Logger = logging.getLogger(__name__)

# Additive identity
ZERO: Decimal = Decimal(0)

# Multiplicative identity
ONE: Decimal = Decimal(1)

# Values accepted wherever a matrix cell is written
Scalar = Union[Decimal, int, float, str, Fraction]


def to_decimal(value: object, context: decimal.Context, name: str = "value") -> Decimal:
    """Coerce a scalar into a finite decimal rounded by the context.

    Floats go through their shortest repr so 0.1 becomes Decimal("0.1")
    rather than the exact binary expansion. Negative zero is normalized to
    zero.
    """
    if isinstance(value, bool):
        raise InvalidValueError(f"{name} must be numeric, got bool")

    result: Decimal
    try:
        if isinstance(value, Decimal):
            _require_finite_decimal(value, name)
            result = context.plus(value)
        elif isinstance(value, numbers.Integral):
            result = context.create_decimal(int(value))
        elif isinstance(value, numbers.Rational):
            result = context.divide(
                Decimal(int(value.numerator)), Decimal(int(value.denominator))
            )
        elif isinstance(value, numbers.Real):
            as_float: float = float(value)
            if not math.isfinite(as_float):
                raise InvalidValueError(f"{name} must be finite, got {as_float!r}")
            _LOG.debug("Coercing float %r into a decimal cell", as_float)
            result = context.create_decimal(repr(as_float))
        elif isinstance(value, str):
            result = context.create_decimal(value.strip())
        else:
            raise InvalidValueError(
                f"{name} must be a decimal-compatible number, "
                f"got {type(value).__name__}"
            )
    except decimal.DecimalException as exc:
        raise InvalidValueError(f"{name} is not a valid decimal: {value!r}") from exc

    _require_finite_decimal(result, name)
    if result.is_zero():
        return ZERO
    return result


def to_fraction(value: Decimal) -> Fraction:
    """Return the exact rational value of a finite decimal."""
    return Fraction(value)


def from_fraction(value: Fraction, context: decimal.Context) -> Decimal:
    """Round a rational into the context precision."""
    if value.denominator == 1:
        return context.create_decimal(value.numerator)
    return context.divide(Decimal(value.numerator), Decimal(value.denominator))


def is_zero(value: Decimal) -> bool:
    """Return True for an exact decimal zero of any sign or exponent."""
    return value.is_zero()


def _require_finite_decimal(value: Decimal, name: str) -> None:
    if not value.is_finite():
        raise InvalidValueError(f"{name} must be finite, got {value!r}")
