"""
Tax Calculator System

Tax-code specific calculators (GST, VAT, HST) on top of the shared engine.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from .base import TaxCalculator, get_calculator, list_available_tax_codes
from .gst import GSTCalculator
from .vat import VATCalculator, HSTCalculator

__all__ = [
    "TaxCalculator",
    "GSTCalculator",
    "VATCalculator",
    "HSTCalculator",
    "get_calculator",
    "list_available_tax_codes",
]
