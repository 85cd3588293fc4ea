"""
Ledger Reconciliation

Checks stored tax breakdowns (e.g. exported from order records) against a
fresh computation. Because the engine is deterministic, any difference
means a record was computed with other rounding or edited afterwards.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from typing import Iterable, List

import pandas as pd

from lib.validators import InvalidInputError
from modules.tax.engine import compute_breakdown_with_rate
from modules.tax.tax_breakdown import TaxBreakdown
from utils.logging_config import setup_logger, get_perf_logger, log_dataframe_info

logger = setup_logger(__name__)

LEDGER_COLUMNS: List[str] = ["rate", "subtotal", "component_a", "component_b", "total"]


def breakdowns_to_frame(breakdowns: Iterable[TaxBreakdown]) -> pd.DataFrame:
    """One row per breakdown, columns as in LEDGER_COLUMNS."""
    rows = [breakdown.to_dict() for breakdown in breakdowns]
    return pd.DataFrame(rows, columns=LEDGER_COLUMNS)


def reconcile(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Find ledger rows that do not match the engine.

    A row is flagged when its components do not sum to its total, or when
    recomputing (subtotal, rate) gives different amounts.

    Args:
        frame: DataFrame with the LEDGER_COLUMNS

    Returns:
        The offending rows plus expected_component_a, expected_component_b,
        expected_total and an ``issue`` column. Empty when the ledger is clean.

    Raises:
        KeyError: If a required column is missing
        InvalidInputError: If a row holds a non-finite subtotal or rate
    """
    missing = [col for col in LEDGER_COLUMNS if col not in frame.columns]
    if missing:
        raise KeyError(f"Ledger is missing columns: {', '.join(missing)}")

    log_dataframe_info(logger, frame, "Tax ledger")

    result_columns = list(frame.columns) + [
        "expected_component_a", "expected_component_b", "expected_total", "issue"
    ]
    flagged = []

    with get_perf_logger(logger, "reconcile tax ledger", threshold_ms=2000):
        for index, row in frame.iterrows():
            try:
                expected = compute_breakdown_with_rate(row["subtotal"], row["rate"])
            except InvalidInputError as e:
                raise InvalidInputError(f"Ledger row {index}: {e}") from e

            if row["component_a"] + row["component_b"] != row["total"]:
                issue = "inexact split"
            elif (
                row["component_a"] != expected.component_a
                or row["component_b"] != expected.component_b
                or row["total"] != expected.total
            ):
                issue = "drift"
            else:
                continue

            record = row.to_dict()
            record.update({
                "expected_component_a": expected.component_a,
                "expected_component_b": expected.component_b,
                "expected_total": expected.total,
                "issue": issue,
            })
            flagged.append((index, record))

    mismatches = pd.DataFrame(
        [record for _, record in flagged],
        index=[index for index, _ in flagged],
        columns=result_columns,
    )

    if mismatches.empty:
        logger.info(f"Tax ledger reconciled: {len(frame)} rows, no mismatches")
    else:
        logger.warning(f"Tax ledger: {len(mismatches)} of {len(frame)} rows do not reconcile")

    return mismatches
