from __future__ import annotations

import logging
import math
from typing import List, Sequence

from fixed_income.core.instruments import resolve_instruments
from fixed_income.core.rates import (
    annual_to_monthly_rate,
    compound_factor,
    future_value_with_contributions,
)
from fixed_income.core.taxes import (
    DAYS_PER_MONTH,
    approximate_days,
    income_tax_percent_by_horizon,
    transaction_tax_percent_by_days,
)
from fixed_income.models import (
    Instrument,
    ProjectionInput,
    ProjectionResult,
    ResultRow,
)

logger = logging.getLogger(__name__)


def project_instrument(projection_input: ProjectionInput, instrument: Instrument) -> ResultRow:
    """
    Project a single instrument over the whole horizon.

    Order of operations:
      1) Convert the annual rate to a monthly one and grow principal + end-of-month contributions.
      2) Gross return = future value - everything contributed.
      3) IOF on the gross return (only below 30 approximated days).
      4) Income tax on what is left after IOF, taxable instruments only.
      5) Deflate the net return by the inflation accumulated over the horizon.
    """
    months = projection_input.horizonMonths
    principal = projection_input.principal
    monthly = projection_input.monthlyContribution

    rm = annual_to_monthly_rate(instrument.annualRatePct)
    future_value = future_value_with_contributions(principal, monthly, months, rm)
    total_contributed = principal + monthly * months
    gross = future_value - total_contributed

    days = approximate_days(months)
    iof_pct = transaction_tax_percent_by_days(days) if days < DAYS_PER_MONTH else 0
    iof_amount = max(0.0, gross * iof_pct / 100)

    ir_pct = income_tax_percent_by_horizon(months) if instrument.isTaxable else 0.0
    ir_amount = max(0.0, (gross - iof_amount) * ir_pct / 100)

    net = gross - iof_amount - ir_amount

    monthly_inflation = annual_to_monthly_rate(projection_input.annualInflationPct)
    inflation_factor = compound_factor(monthly_inflation, months)
    real_net = net / inflation_factor

    return ResultRow(
        instrument=instrument,
        annualRatePct=instrument.annualRatePct,
        futureValue=future_value,
        totalContributed=total_contributed,
        grossReturn=gross,
        transactionTaxAmount=iof_amount,
        incomeTaxPct=ir_pct,
        incomeTaxAmount=ir_amount,
        netReturn=net,
        inflationAdjustedNetReturn=real_net,
    )


def max_net_return(rows: Sequence[ResultRow]) -> float:
    # NaN rows (inf - inf on saturated horizons) cannot be compared; skip them
    return max((row.netReturn for row in rows if not math.isnan(row.netReturn)), default=0.0)


def project(projection_input: ProjectionInput) -> ProjectionResult:
    """Project every instrument, in the fixed table order, for one set of inputs."""
    rows: List[ResultRow] = [
        project_instrument(projection_input, instrument)
        for instrument in resolve_instruments(projection_input)
    ]
    best = max_net_return(rows)

    logger.debug(
        "projected %d instruments over %d months (max net return %.2f)",
        len(rows),
        projection_input.horizonMonths,
        best,
    )
    return ProjectionResult(rows=rows, maxNetReturn=best)


__all__ = [
    "project",
    "project_instrument",
    "max_net_return",
    "resolve_instruments",
    "annual_to_monthly_rate",
    "future_value_with_contributions",
    "income_tax_percent_by_horizon",
    "transaction_tax_percent_by_days",
]
