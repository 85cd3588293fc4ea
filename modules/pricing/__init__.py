"""
Pricing Module

Interchangeable pricing strategies (standard, discounts, bulk tiers).

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['strategies']
