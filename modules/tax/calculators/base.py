"""
Abstract Base Class for Tax Calculators

Each tax code (GST, VAT, HST, ...) gets a calculator that runs the shared
tax engine and decides how the two breakdown components are reported on
invoices and in order records.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Type, Tuple

from modules.tax.engine import compute_breakdown_with_rate, Number
from modules.tax.tax_breakdown import TaxBreakdown


class TaxCalculator(ABC):
    """
    Base class for tax-code specific calculators.

    The arithmetic is identical for every code (see modules.tax.engine);
    subclasses only differ in naming and in how components are labelled.
    """

    @abstractmethod
    def get_tax_code(self) -> str:
        """
        Return the tax code handled by this calculator.

        Returns:
            Tax code (e.g., "GST", "VAT")
        """
        pass

    @abstractmethod
    def get_tax_name(self) -> str:
        """
        Return the human-readable name of this tax.

        Returns:
            Tax name (e.g., "Goods and Services Tax")
        """
        pass

    @abstractmethod
    def component_labels(self) -> Tuple[str, ...]:
        """
        Labels of the reported tax lines.

        Two labels map component_a and component_b separately; a single
        label reports the whole total on one line.
        """
        pass

    def calculate(self, subtotal: Number, rate: Number) -> TaxBreakdown:
        """
        Calculate the tax breakdown for a subtotal.

        Args:
            subtotal: Pre-tax amount in minor currency units
            rate: Percentage rate

        Returns:
            TaxBreakdown from the shared engine
        """
        return compute_breakdown_with_rate(subtotal, rate)

    def labelled_components(self, breakdown: TaxBreakdown) -> Dict[str, int]:
        """
        Map the breakdown onto this tax code's reporting lines.

        Example (GST):
            {"cgst": 900, "sgst": 900}
        """
        labels = self.component_labels()
        if len(labels) == 1:
            return {labels[0]: breakdown.total}
        return {
            labels[0]: breakdown.component_a,
            labels[1]: breakdown.component_b,
        }


# Registry of available calculators
_CALCULATOR_REGISTRY: Dict[str, Type[TaxCalculator]] = {}


def register_calculator(tax_code: str):
    """
    Decorator to register a tax calculator class.

    Usage:
        @register_calculator("GST")
        class GSTCalculator(TaxCalculator):
            ...
    """
    def decorator(cls: Type[TaxCalculator]):
        _CALCULATOR_REGISTRY[tax_code.upper()] = cls
        return cls
    return decorator


def get_calculator(tax_code: str) -> TaxCalculator:
    """
    Factory method to get a tax calculator instance.

    Args:
        tax_code: Tax code, case-insensitive (e.g., "GST", "vat")

    Returns:
        Instance of the matching TaxCalculator subclass

    Raises:
        ValueError: If the tax code is not supported
    """
    code = tax_code.strip().upper()

    if code not in _CALCULATOR_REGISTRY:
        available = ", ".join(sorted(_CALCULATOR_REGISTRY.keys()))
        raise ValueError(
            f"Tax calculator for '{tax_code}' not found. "
            f"Available: {available}"
        )

    return _CALCULATOR_REGISTRY[code]()


def list_available_tax_codes() -> List[str]:
    """Sorted list of registered tax codes."""
    return sorted(_CALCULATOR_REGISTRY.keys())
