"""
Checkout Module

Discounts, order totals and the tax metadata stored on orders.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

__all__ = ['totals']
