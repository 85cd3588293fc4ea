"""
Property-Based Tests - Tax Breakdown Invariants

Uses hypothesis to verify the arithmetic invariants of the tax engine.

Invariants:
1. component_a + component_b == total, exactly
2. total == subtotal * rate / 100 rounded half away from zero
3. The two components differ by at most one minor unit
4. Negating the subtotal negates every amount
5. Identical inputs give identical breakdowns

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import math
from decimal import Decimal
from fractions import Fraction

from hypothesis import given, strategies as st, settings

from modules.tax.engine import compute_breakdown, compute_breakdown_with_rate
from modules.tax.ledger import breakdowns_to_frame, reconcile


# Subtotals in minor units, up to 10 billion rupees in paise
subtotal_strategy = st.integers(min_value=0, max_value=10 ** 12)

# Percentage rates with up to 3 decimals, including > 100 (compound taxes)
rate_strategy = st.one_of(
    st.integers(min_value=0, max_value=200),
    st.decimals(
        min_value=Decimal("0"),
        max_value=Decimal("1000"),
        places=3,
        allow_nan=False,
        allow_infinity=False
    ),
)


def half_up(value: Fraction) -> int:
    """Independent oracle: round half away from zero on an exact fraction."""
    if value >= 0:
        return math.floor(value + Fraction(1, 2))
    return -math.floor(-value + Fraction(1, 2))


@given(subtotal=subtotal_strategy, rate=rate_strategy)
@settings(max_examples=300)
def test_invariant_exact_split(subtotal, rate):
    """Invariant 1: no minor unit is lost or gained by rounding."""
    breakdown = compute_breakdown(subtotal, rate)
    assert breakdown.component_a + breakdown.component_b == breakdown.total


@given(subtotal=subtotal_strategy, rate=rate_strategy)
@settings(max_examples=300)
def test_invariant_total_matches_exact_rounding(subtotal, rate):
    """Invariant 2: total equals the exactly rounded tax."""
    breakdown = compute_breakdown_with_rate(subtotal, rate)

    exact_tax = Fraction(subtotal) * Fraction(Decimal(rate)) / 100
    assert breakdown.total == half_up(exact_tax)

    exact_half = Fraction(subtotal) * Fraction(Decimal(rate)) / 2 / 100
    assert breakdown.component_a == half_up(exact_half)


@given(subtotal=subtotal_strategy, rate=rate_strategy)
@settings(max_examples=200)
def test_invariant_components_balanced(subtotal, rate):
    """Invariant 3: the split stays within one minor unit of even."""
    breakdown = compute_breakdown(subtotal, rate)
    assert abs(breakdown.component_a - breakdown.component_b) <= 1


@given(subtotal=subtotal_strategy, rate=rate_strategy)
@settings(max_examples=200)
def test_invariant_sign_symmetry(subtotal, rate):
    """Invariant 4: refunds mirror sales."""
    sale = compute_breakdown(subtotal, rate)
    refund = compute_breakdown(-subtotal, rate)

    assert refund.total == -sale.total
    assert refund.component_a == -sale.component_a
    assert refund.component_b == -sale.component_b


@given(subtotal=subtotal_strategy, rate=rate_strategy)
@settings(max_examples=100)
def test_invariant_idempotent(subtotal, rate):
    """Invariant 5: the engine is a pure function."""
    assert compute_breakdown(subtotal, rate) == compute_breakdown(subtotal, rate)


@given(
    entries=st.lists(
        st.tuples(subtotal_strategy, st.integers(min_value=0, max_value=100)),
        min_size=1,
        max_size=20
    )
)
@settings(max_examples=30, deadline=None)
def test_invariant_engine_output_always_reconciles(entries):
    """A ledger written by the engine never shows mismatches."""
    frame = breakdowns_to_frame(
        compute_breakdown(subtotal, rate) for subtotal, rate in entries
    )
    assert reconcile(frame).empty
