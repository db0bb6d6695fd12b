"""Data contracts for the projection endpoint."""

from __future__ import annotations

import math
import re
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fixed_income.models import AnnualRates, ProjectionInput, ResultRow


_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def coerce_number(value: Any) -> float:
    """
    Parse a form value the way the page reads its inputs: a leading number is
    kept ("10000 reais" -> 10000), anything unparseable or non-finite becomes 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if not match:
            return 0.0
        value = match.group(1)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def coerce_months(value: Any) -> int:
    """Whole months, truncated toward zero ("36 meses" -> 36), never below one."""
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        return max(1, int(match.group(1))) if match else 1
    return max(1, int(coerce_number(value)))


class ProjectionRequest(BaseModel):
    """Raw fields of the simulator form, keyed by their input ids."""

    model_config = ConfigDict(extra="ignore")

    principal: float = 0.0
    monthly: float = 0.0
    months: int = 1
    inflation: float = 0.0
    cdi: float = 0.0
    cdb_nom: float = 0.0
    cdb_pct_cdi: float = 0.0
    lci: float = 0.0
    selic: float = 0.0
    poupanca: float = 0.0
    ipca_real: float = 0.0
    ipca: float = 0.0

    @field_validator(
        "principal",
        "monthly",
        "inflation",
        "cdi",
        "cdb_nom",
        "cdb_pct_cdi",
        "lci",
        "selic",
        "poupanca",
        "ipca_real",
        "ipca",
        mode="before",
    )
    @classmethod
    def _coerce_float(cls, value: Any) -> float:
        return coerce_number(value)

    @field_validator("months", mode="before")
    @classmethod
    def _coerce_months(cls, value: Any) -> int:
        return coerce_months(value)

    def to_projection_input(self) -> ProjectionInput:
        return ProjectionInput(
            principal=self.principal,
            monthlyContribution=self.monthly,
            horizonMonths=self.months,
            annualInflationPct=self.inflation,
            annualRatesPct=AnnualRates(
                cdi=self.cdi,
                cdbNominal=self.cdb_nom,
                cdbPctOfCdi=self.cdb_pct_cdi,
                lci=self.lci,
                selic=self.selic,
                poupanca=self.poupanca,
                ipcaRealPct=self.ipca_real,
                ipcaPct=self.ipca,
            ),
        )


class TableRow(BaseModel):
    """One formatted line of the comparison table."""

    label: str
    annualRate: str
    futureValue: str
    totalContributed: str
    grossReturn: str
    transactionTax: str
    incomeTaxPct: str
    incomeTax: str
    netReturn: str
    inflationAdjustedNetReturn: str


class ChartBar(BaseModel):
    label: str
    height: int = Field(..., ge=0)
    title: str


class ProjectionResponse(BaseModel):
    input: ProjectionInput
    rows: List[ResultRow]
    maxNetReturn: float
    table: List[TableRow]
    chart: List[ChartBar]
