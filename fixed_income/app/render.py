"""Turn projection results into table cells and chart bars for the page."""

from __future__ import annotations

import math
from typing import List

from fixed_income.app.config import Config
from fixed_income.models import ProjectionResult, ResultRow
from fixed_income.schemas.projection import ChartBar, TableRow


def format_brl(value: float) -> str:
    """Format a value as Brazilian currency: R$ 12.345,67 (negatives as -R$ 12.345,67)."""
    sign = "-" if value < 0 else ""
    formatted = f"{abs(value):,.2f}"
    return sign + "R$ " + formatted.replace(",", "X").replace(".", ",").replace("X", ".")


def format_rate(value: float) -> str:
    return f"{value:.2f}"


def format_pct(value: float) -> str:
    return f"{value:.2f}%"


def table_row(row: ResultRow) -> TableRow:
    return TableRow(
        label=row.instrument.label,
        annualRate=format_rate(row.annualRatePct),
        futureValue=format_brl(row.futureValue),
        totalContributed=format_brl(row.totalContributed),
        grossReturn=format_brl(row.grossReturn),
        transactionTax=format_brl(row.transactionTaxAmount),
        incomeTaxPct=format_pct(row.incomeTaxPct),
        incomeTax=format_brl(row.incomeTaxAmount),
        netReturn=format_brl(row.netReturn),
        inflationAdjustedNetReturn=format_brl(row.inflationAdjustedNetReturn),
    )


def bar_height(
    net_return: float,
    max_net_return: float,
    max_height: int = Config.CHART_MAX_BAR_HEIGHT,
    min_height: int = Config.CHART_MIN_BAR_HEIGHT,
) -> int:
    """Bar height proportional to net_return / max_net_return, never below min_height."""
    if not (net_return > 0 and max_net_return > 0):
        return min_height
    scaled = net_return / max_net_return * max_height
    if math.isnan(scaled):
        # inf / inf: the row saturated along with the best one
        return max_height
    # round half up, like the page's Math.round
    return max(min_height, math.floor(min(scaled, max_height) + 0.5))


def chart_bars(
    result: ProjectionResult,
    max_height: int = Config.CHART_MAX_BAR_HEIGHT,
    min_height: int = Config.CHART_MIN_BAR_HEIGHT,
) -> List[ChartBar]:
    return [
        ChartBar(
            label=row.instrument.name.split(" ")[0],
            height=bar_height(row.netReturn, result.maxNetReturn, max_height, min_height),
            title=f"{row.instrument.name}: {format_brl(row.netReturn)}",
        )
        for row in result.rows
    ]


def table_rows(result: ProjectionResult) -> List[TableRow]:
    return [table_row(row) for row in result.rows]
