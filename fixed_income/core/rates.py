"""Rate conversion and compound growth with monthly contributions."""

from __future__ import annotations

import math


def annual_to_monthly_rate(annual_pct: float) -> float:
    """Equivalent monthly compounding rate for an annual percentage (100 = 100%)."""
    return (1 + annual_pct / 100) ** (1 / 12) - 1


def compound_factor(rate: float, n: int) -> float:
    """(1 + rate)^n, saturating to inf instead of raising on very long horizons."""
    try:
        return (1 + rate) ** n
    except OverflowError:
        return math.inf


def future_value_with_contributions(
    principal: float,
    monthly_contribution: float,
    n: int,
    monthly_rate: float,
) -> float:
    """
    Future value of ``principal`` plus ``n`` end-of-month contributions.

        FV = P * (1 + r)^n + M * ((1 + r)^n - 1) / r

    With r == 0 there is no growth and the annuity term degenerates to M * n.
    """
    if monthly_rate == 0:
        return principal + monthly_contribution * n

    growth = compound_factor(monthly_rate, n)
    return principal * growth + monthly_contribution * (growth - 1) / monthly_rate
