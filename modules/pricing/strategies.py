"""
Pricing Strategies

Interchangeable pricing algorithms for catalogue and quote prices. Prices
here are major currency units (e.g. 199.99), rounded half-up to 2 places;
the order tax itself is computed in minor units by modules.tax.engine.

Usage:
    from modules.pricing.strategies import PricingInput, calculate_price

    output = calculate_price(
        PricingInput(base_price=100, quantity=2, discount_percent=20),
        "percentage_discount",
    )

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from utils.logging_config import setup_logger

logger = setup_logger(__name__)

CENT = Decimal("0.01")
HUNDRED = Decimal(100)


def round_price(value: Decimal) -> Decimal:
    """Round to 2 decimal places, half up."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


class PricingInput(BaseModel):
    """Input for a pricing calculation."""

    base_price: Decimal = Field(..., gt=0)
    quantity: int = Field(1, ge=1)
    discount_percent: Optional[Decimal] = Field(None, ge=0, le=100)
    discount_amount: Optional[Decimal] = Field(None, ge=0)
    tax_rate: Optional[Decimal] = Field(None, ge=0, description="Percentage, 18 = 18%")


class PricingOutput(BaseModel):
    """Result of a pricing calculation."""

    subtotal: Decimal
    discount: Decimal
    taxable_amount: Decimal
    tax: Decimal
    total: Decimal


class PricingStrategy(ABC):
    """Base class for pricing strategies."""

    name: str = ""
    description: str = ""

    @abstractmethod
    def discount_for(self, subtotal: Decimal, pricing_input: PricingInput) -> Decimal:
        """Unrounded discount to apply to the subtotal."""
        pass

    def validate(self, pricing_input: PricingInput) -> Tuple[bool, Optional[str]]:
        """
        Check strategy-specific constraints.

        Returns:
            (valid, error message or None)
        """
        return True, None

    def calculate(self, pricing_input: PricingInput) -> PricingOutput:
        """Run the strategy and round every figure to cents."""
        subtotal = pricing_input.base_price * pricing_input.quantity
        discount = self.discount_for(subtotal, pricing_input)
        taxable_amount = subtotal - discount
        tax = taxable_amount * (pricing_input.tax_rate or Decimal(0)) / HUNDRED
        total = taxable_amount + tax

        return PricingOutput(
            subtotal=round_price(subtotal),
            discount=round_price(discount),
            taxable_amount=round_price(taxable_amount),
            tax=round_price(tax),
            total=round_price(total),
        )


class StandardPricingStrategy(PricingStrategy):
    """No discount, standard pricing."""

    name = "standard"
    description = "No discount, standard pricing"

    def discount_for(self, subtotal, pricing_input):
        return Decimal(0)


class PercentageDiscountStrategy(PricingStrategy):
    """Percentage off the subtotal."""

    name = "percentage_discount"
    description = "Apply percentage-based discount"

    def discount_for(self, subtotal, pricing_input):
        percent = pricing_input.discount_percent or Decimal(0)
        return subtotal * percent / HUNDRED

    def validate(self, pricing_input):
        percent = pricing_input.discount_percent
        if percent is not None and not (0 <= percent <= 100):
            return False, "Discount percent must be between 0 and 100"
        return True, None


class FixedDiscountStrategy(PricingStrategy):
    """Fixed amount off, never more than the subtotal."""

    name = "fixed_discount"
    description = "Apply fixed amount discount"

    def discount_for(self, subtotal, pricing_input):
        amount = pricing_input.discount_amount or Decimal(0)
        return min(amount, subtotal)

    def validate(self, pricing_input):
        if pricing_input.discount_amount is not None and pricing_input.discount_amount < 0:
            return False, "Discount amount must be positive"
        return True, None


class TieredPricingStrategy(PricingStrategy):
    """Bulk discount by quantity."""

    name = "tiered_pricing"
    description = "Apply tiered/bulk discounts based on quantity"

    # (minimum quantity, percent off), highest tier first
    TIERS: List[Tuple[int, Decimal]] = [
        (100, Decimal(20)),
        (50, Decimal(15)),
        (25, Decimal(10)),
        (10, Decimal(5)),
    ]

    def tier_percent(self, quantity: int) -> Decimal:
        for min_quantity, percent in self.TIERS:
            if quantity >= min_quantity:
                return percent
        return Decimal(0)

    def discount_for(self, subtotal, pricing_input):
        return subtotal * self.tier_percent(pricing_input.quantity) / HUNDRED

    def validate(self, pricing_input):
        if pricing_input.quantity < 1:
            return False, "Quantity must be at least 1"
        return True, None


PRICING_STRATEGIES: Dict[str, PricingStrategy] = {
    strategy.name: strategy
    for strategy in (
        PercentageDiscountStrategy(),
        FixedDiscountStrategy(),
        TieredPricingStrategy(),
        StandardPricingStrategy(),
    )
}


def get_pricing_strategy(name: str) -> Optional[PricingStrategy]:
    """Strategy registered under ``name``, or None."""
    return PRICING_STRATEGIES.get(name)


def calculate_price(pricing_input: PricingInput, strategy_name: str = "standard") -> PricingOutput:
    """
    Calculate a price with the named strategy.

    Raises:
        ValueError: If the strategy is unknown or rejects the input
    """
    strategy = get_pricing_strategy(strategy_name)
    if strategy is None:
        available = ", ".join(sorted(PRICING_STRATEGIES))
        raise ValueError(f"Unknown pricing strategy: {strategy_name}. Available: {available}")

    valid, error = strategy.validate(pricing_input)
    if not valid:
        raise ValueError(error)

    output = strategy.calculate(pricing_input)
    logger.debug(f"{strategy.name}: {pricing_input.quantity} x {pricing_input.base_price} -> {output.total}")
    return output
