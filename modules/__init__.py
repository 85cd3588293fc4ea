"""
Modules Package

Business logic consumed by the order/checkout backend.

Modules:
- tax: Tax breakdown engine, regions, calculators, ledger reconciliation
- checkout: Discounts, order totals, order tax metadata
- pricing: Pricing strategies

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['tax', 'checkout', 'pricing']
