"""
Tax Module

Deterministic order tax computation.

Features:
- Exact two-component split (CGST/SGST style) with Decimal rounding
- Regional tax settings with a configurable default rate
- Tax-code specific calculators (GST, VAT, HST)
- Ledger reconciliation of stored breakdowns

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['engine', 'tax_breakdown', 'calculators', 'regions', 'ledger']
