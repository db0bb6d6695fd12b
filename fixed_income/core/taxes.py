"""Withholding schedules applied to investment gains on redemption."""

from __future__ import annotations

import math
from typing import Tuple

# Short-term transaction tax (IOF) as a percent of the gain, for days 1..30.
TRANSACTION_TAX_TABLE: Tuple[int, ...] = (
    96, 93, 90, 86, 83, 80, 76, 73, 70, 66,
    63, 60, 56, 53, 50, 46, 43, 40, 36, 33,
    30, 26, 23, 20, 16, 13, 10, 6, 3, 0,
)

# (upper bound in months, percent); anything above the last bound pays the floor.
INCOME_TAX_BRACKETS: Tuple[Tuple[int, float], ...] = (
    (180, 22.5),
    (360, 20.0),
    (720, 17.5),
)
INCOME_TAX_FLOOR_PCT = 15.0

DAYS_PER_MONTH = 30


def income_tax_percent_by_horizon(months: float) -> float:
    """Declining income tax percent for a holding period given in months."""
    for upper_bound, percent in INCOME_TAX_BRACKETS:
        if months <= upper_bound:
            return percent
    return INCOME_TAX_FLOOR_PCT


def transaction_tax_percent_by_days(days: float) -> float:
    """IOF percent of the gain for a redemption after ``days`` days; zero from day 30 on."""
    if days <= 0 or days >= len(TRANSACTION_TAX_TABLE):
        return 0
    index = max(0, min(len(TRANSACTION_TAX_TABLE) - 1, math.floor(days) - 1))
    return TRANSACTION_TAX_TABLE[index]


def approximate_days(months: int) -> int:
    # no calendar arithmetic: every month counts as 30 days
    return months * DAYS_PER_MONTH
