"""
Numeric Input Validation

Guards for the amounts and rates entering the tax engine. Every value is
normalised to Decimal so rounding never depends on binary float artefacts.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal, InvalidOperation
from numbers import Integral, Number
from typing import Any


class InvalidInputError(ValueError):
    """Raised when an amount or rate is not a finite number."""
    pass


def to_finite_decimal(value: Any, field: str) -> Decimal:
    """
    Convert a numeric input to Decimal, rejecting NaN and Infinity.

    Floats go through str() so that 18.0 and Decimal("18") compare equal
    and 0.1 stays 0.1 instead of its binary expansion.

    Args:
        value: int, float, Decimal or numeric string
        field: Name used in the error message (e.g. "subtotal")

    Returns:
        Finite Decimal

    Raises:
        InvalidInputError: For bools, non-numeric values, NaN and +/-Infinity
    """
    # bool is an int subclass; True as a subtotal is always a caller bug
    if isinstance(value, bool):
        raise InvalidInputError(f"{field} must be a number, got bool")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, (float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidInputError(f"{field} must be a number, got {value!r}") from None
    elif isinstance(value, Integral):
        # numpy integers coming out of DataFrames
        result = Decimal(int(value))
    elif isinstance(value, Number):
        try:
            result = Decimal(str(float(value)))
        except (TypeError, ValueError):
            raise InvalidInputError(f"{field} must be a number, got {value!r}") from None
    else:
        raise InvalidInputError(f"{field} must be a number, got {type(value).__name__}")

    if not result.is_finite():
        raise InvalidInputError(f"{field} must be finite, got {value!r}")

    return result
