"""
Tax Engine - Order Tax Breakdown

Computes the tax on an order subtotal and splits it into two equal-rate
components (e.g. CGST + SGST under one 18% GST rate):

1. total       = round(subtotal * rate / 100)
2. component_a = round(subtotal * (rate / 2) / 100)
3. component_b = total - component_a

The second component absorbs the rounding remainder, so the split is exact.

ROUNDING POLICY:
- All arithmetic in Decimal, never binary floats
- ROUND_HALF_UP (half away from zero) to whole minor units
- Negative subtotals mirror positive ones (refunds/credit notes)

The engine is pure: no I/O, no shared mutable state. Safe to call from any
number of threads.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional, Union

from core.config import load_tax_config
from lib.validators import to_finite_decimal
from modules.tax.tax_breakdown import TaxBreakdown
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

Number = Union[int, float, Decimal]

HUNDRED = Decimal(100)
TWO = Decimal(2)
WORKING_PRECISION = 60


def working_precision(amount: Decimal, pct: Decimal) -> int:
    """
    Context precision for subtotal * rate.

    Covers every coefficient digit of the exact product (plus one for the
    halving) and every integer digit quantize() has to produce, so
    arbitrarily large finite inputs neither round early nor overflow.
    """
    coefficient_digits = len(amount.as_tuple().digits) + len(pct.as_tuple().digits) + 2
    integer_digits = amount.adjusted() + pct.adjusted() + 5
    return max(WORKING_PRECISION, coefficient_digits, integer_digits)


def round_minor(amount: Decimal) -> int:
    """Round a Decimal amount to whole minor units, half away from zero."""
    return int(amount.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _normalise_amount(value: Decimal):
    """Integral subtotals are reported back as int."""
    if value == value.to_integral_value():
        return int(value)
    return value


class TaxEngine:
    """
    Stateless tax breakdown calculator.

    Holds only the default rate; every call reads its arguments and
    returns a fresh TaxBreakdown.
    """

    def __init__(self, default_rate: Optional[Number] = None):
        if default_rate is None:
            default_rate = load_tax_config().default_rate
        self.default_rate = to_finite_decimal(default_rate, "default_rate")

    def compute_breakdown(self, subtotal: Number, rate: Optional[Number] = None) -> TaxBreakdown:
        """
        Compute the tax breakdown for a pre-tax subtotal.

        Args:
            subtotal: Pre-tax amount in minor currency units
            rate: Percentage rate; the engine's default rate when omitted

        Returns:
            TaxBreakdown with component_a + component_b == total

        Raises:
            InvalidInputError: If subtotal or rate is NaN, Infinity or not a number
        """
        if rate is None:
            rate = self.default_rate
        return self.compute_breakdown_with_rate(subtotal, rate)

    def compute_breakdown_with_rate(self, subtotal: Number, rate: Number) -> TaxBreakdown:
        """Same as compute_breakdown, with the rate mandatory."""
        return compute_breakdown_with_rate(subtotal, rate)


def compute_breakdown(subtotal: Number, rate: Optional[Number] = None) -> TaxBreakdown:
    """Compute a tax breakdown; rate defaults to DEFAULT_TAX_RATE from the environment."""
    if rate is None:
        rate = load_tax_config().default_rate
    return compute_breakdown_with_rate(subtotal, rate)


def compute_breakdown_with_rate(subtotal: Number, rate: Number) -> TaxBreakdown:
    """Compute a tax breakdown with an explicit rate."""
    amount = to_finite_decimal(subtotal, "subtotal")
    pct = to_finite_decimal(rate, "rate")

    with localcontext() as ctx:
        ctx.prec = working_precision(amount, pct)
        total = round_minor(amount * pct / HUNDRED)
        half_rate = pct / TWO
        component_a = round_minor(amount * half_rate / HUNDRED)

    component_b = total - component_a

    breakdown = TaxBreakdown(
        rate=pct,
        subtotal=_normalise_amount(amount),
        component_a=component_a,
        component_b=component_b,
        total=component_a + component_b,
    )
    logger.debug(f"Tax {pct}% on {amount}: {component_a} + {component_b} = {breakdown.total}")
    return breakdown
