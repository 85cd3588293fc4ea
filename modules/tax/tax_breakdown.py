"""
Tax Breakdown Value Type

Result of a single tax computation. Amounts are integer minor currency
units (cents/paise); the rate is a percentage (18 means 18%).

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Any, Union

Amount = Union[int, Decimal]


@dataclass(frozen=True)
class TaxBreakdown:
    """
    Tax on a pre-tax subtotal, split into two components.

    component_a is rounded on its own (half the rate); component_b is the
    remainder, so component_a + component_b == total always holds.
    """
    rate: Decimal
    subtotal: Amount
    component_a: int
    component_b: int
    total: int

    def __post_init__(self):
        if self.component_a + self.component_b != self.total:
            raise ValueError(
                f"Inexact split: {self.component_a} + {self.component_b} != {self.total}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rate": self.rate,
            "subtotal": self.subtotal,
            "component_a": self.component_a,
            "component_b": self.component_b,
            "total": self.total,
        }
