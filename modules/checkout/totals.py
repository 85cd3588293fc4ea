"""
Checkout Totals

Order arithmetic around the tax engine. All amounts are integer minor
currency units.

    total = max(subtotal + shipping + tax - discount, 0)

Tax is charged on the pre-discount subtotal, matching existing order records.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional

from core.config import load_tax_config
from core.hashing import calculate_sha256
from lib.validators import InvalidInputError, to_finite_decimal
from modules.tax.calculators import TaxCalculator, get_calculator
from modules.tax.engine import Number, round_minor
from modules.tax.tax_breakdown import TaxBreakdown
from utils.logging_config import setup_logger

logger = setup_logger(__name__)


class DiscountType(str, Enum):
    """How a discount code's value is interpreted."""

    PERCENTAGE = "percentage"
    FIXED_AMOUNT = "fixed_amount"
    FREE_SHIPPING = "free_shipping"  # waives shipping; nothing off the cart


def calculate_discount_amount(
    cart_total: int,
    discount_type: DiscountType,
    value: Number
) -> int:
    """
    Discount for a cart, in minor units.

    Percentage discounts are rounded half-up; any discount is capped at the
    cart total so an order can never be discounted below zero. Free-shipping
    codes take nothing off the cart.

    Args:
        cart_total: Cart subtotal in minor units
        discount_type: DiscountType or its string value
        value: Percentage (10 = 10%) or fixed amount in minor units, >= 0

    Raises:
        InvalidInputError: For negative or non-finite values or an unknown discount type
    """
    cart = to_finite_decimal(cart_total, "cart_total")
    amount = to_finite_decimal(value, "value")

    try:
        discount_type = DiscountType(discount_type)
    except ValueError:
        raise InvalidInputError(f"Unknown discount type: {discount_type!r}") from None

    if amount < 0:
        raise InvalidInputError(f"Discount value must be >= 0, got {value!r}")

    if discount_type == DiscountType.PERCENTAGE:
        discount = round_minor(cart * amount / Decimal(100))
    elif discount_type == DiscountType.FIXED_AMOUNT:
        discount = round_minor(amount)
    else:
        discount = 0

    return int(min(Decimal(discount), cart))


@dataclass(frozen=True)
class OrderTotals:
    """Totals persisted on an order."""
    subtotal: int
    shipping_total: int
    discount_total: int
    tax_total: int
    total: int
    tax: TaxBreakdown


def calculate_order_totals(
    subtotal: int,
    tax_rate: Optional[Number] = None,
    shipping_total: int = 0,
    discount_total: int = 0,
    tax_code: Optional[str] = None
) -> OrderTotals:
    """
    Compute the totals of an order.

    Args:
        subtotal: Sum of line items in minor units
        tax_rate: Percentage; DEFAULT_TAX_RATE when omitted
        shipping_total: Shipping charge in minor units
        discount_total: Discount in minor units (see calculate_discount_amount)
        tax_code: Selects the calculator; DEFAULT_TAX_CODE when omitted

    Returns:
        OrderTotals with a non-negative grand total
    """
    config = load_tax_config()
    if tax_rate is None:
        tax_rate = config.default_rate
    calculator = get_calculator(tax_code or config.default_tax_code)

    breakdown = calculator.calculate(subtotal, tax_rate)

    shipping = round_minor(to_finite_decimal(shipping_total, "shipping_total"))
    discount = round_minor(to_finite_decimal(discount_total, "discount_total"))
    gross = breakdown.subtotal + shipping + breakdown.total - discount

    if gross < 0:
        logger.info(f"Discount {discount} exceeds order value {gross + discount}, total clamped to 0")

    return OrderTotals(
        subtotal=breakdown.subtotal,
        shipping_total=shipping,
        discount_total=discount,
        tax_total=breakdown.total,
        total=max(int(gross), 0),
        tax=breakdown,
    )


def build_tax_metadata(
    breakdown: TaxBreakdown,
    calculator: Optional[TaxCalculator] = None,
    calculated_at: Optional[datetime] = None
) -> Dict[str, Any]:
    """
    Tax section of an order's metadata.

    Example (GST, 18% on 10000):
        {
            "tax_rate": Decimal("18"),
            "tax_breakdown": {
                "subtotal": 10000, "cgst": 900, "sgst": 900, "total": 1800,
                "calculated_at": "2026-01-15T10:00:00+00:00",
            },
            "calculation_hash": "sha256:...",
        }

    The hash seals rate, subtotal, components and total; calculated_at is
    left out so a recomputation produces the same seal.
    """
    if calculator is None:
        calculator = get_calculator(load_tax_config().default_tax_code)
    if calculated_at is None:
        calculated_at = datetime.now(timezone.utc)

    tax_breakdown = {"subtotal": breakdown.subtotal}
    tax_breakdown.update(calculator.labelled_components(breakdown))
    tax_breakdown["total"] = breakdown.total
    tax_breakdown["calculated_at"] = calculated_at.isoformat()

    return {
        "tax_rate": breakdown.rate,
        "tax_code": calculator.get_tax_code(),
        "tax_breakdown": tax_breakdown,
        "calculation_hash": seal_breakdown(breakdown),
    }


def seal_breakdown(breakdown: TaxBreakdown) -> str:
    """SHA256 seal of a breakdown's values."""
    return calculate_sha256(breakdown.to_dict())
