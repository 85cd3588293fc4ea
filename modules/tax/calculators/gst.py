"""
Indian GST Calculator (CGST + SGST)

Intra-state supplies carry one GST rate shared equally between the
Central (CGST) and State (SGST) governments:
- 18% GST = 9% CGST + 9% SGST
- CGST is rounded on its own, SGST takes the remainder
- Amounts in paise

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from typing import Tuple

from modules.tax.calculators.base import TaxCalculator, register_calculator


@register_calculator("GST")
class GSTCalculator(TaxCalculator):
    """Tax calculator for GST split into CGST and SGST."""

    def get_tax_code(self) -> str:
        return "GST"

    def get_tax_name(self) -> str:
        return "Goods and Services Tax"

    def component_labels(self) -> Tuple[str, ...]:
        return ("cgst", "sgst")
