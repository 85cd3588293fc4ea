"""
Single-Line Consumption Taxes (VAT, HST)

Regions billed under VAT or the Canadian HST report one tax line on the
invoice. The engine still produces both components; only the total is shown.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from typing import Tuple

from modules.tax.calculators.base import TaxCalculator, register_calculator


@register_calculator("VAT")
class VATCalculator(TaxCalculator):
    """Value Added Tax, reported as a single line."""

    def get_tax_code(self) -> str:
        return "VAT"

    def get_tax_name(self) -> str:
        return "Value Added Tax"

    def component_labels(self) -> Tuple[str, ...]:
        return ("vat",)


@register_calculator("HST")
class HSTCalculator(TaxCalculator):
    """Harmonized Sales Tax (Canada), reported as a single line."""

    def get_tax_code(self) -> str:
        return "HST"

    def get_tax_name(self) -> str:
        return "Harmonized Sales Tax"

    def component_labels(self) -> Tuple[str, ...]:
        return ("hst",)
