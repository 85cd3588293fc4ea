"""
Tax Configuration

Environment-driven defaults for the tax engine.

    DEFAULT_TAX_RATE   percentage used when no region rate is known (default: 18)
    DEFAULT_TAX_CODE   tax code used to pick the component calculator (default: GST)

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import os
from dataclasses import dataclass
from decimal import Decimal

from lib.validators import InvalidInputError, to_finite_decimal

DEFAULT_TAX_RATE = Decimal("18")  # 9% CGST + 9% SGST
DEFAULT_TAX_CODE = "GST"


@dataclass(frozen=True)
class TaxConfig:
    """Resolved tax defaults."""
    default_rate: Decimal = DEFAULT_TAX_RATE
    default_tax_code: str = DEFAULT_TAX_CODE


def load_tax_config() -> TaxConfig:
    """
    Build a TaxConfig from the environment.

    Raises:
        InvalidInputError: If DEFAULT_TAX_RATE is not a finite, non-negative number
    """
    raw_rate = os.getenv("DEFAULT_TAX_RATE")
    if raw_rate is None or not raw_rate.strip():
        rate = DEFAULT_TAX_RATE
    else:
        rate = to_finite_decimal(raw_rate, "DEFAULT_TAX_RATE")
        if rate < 0:
            raise InvalidInputError(f"DEFAULT_TAX_RATE must be >= 0, got {raw_rate!r}")

    tax_code = os.getenv("DEFAULT_TAX_CODE", DEFAULT_TAX_CODE).strip().upper() or DEFAULT_TAX_CODE

    return TaxConfig(default_rate=rate, default_tax_code=tax_code)
