from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AnnualRates(BaseModel):
    """Annual rates in percent (13.15 means 13.15% a.a.)."""

    model_config = ConfigDict(extra="forbid")

    cdi: float = 0.0
    cdbNominal: float = 0.0
    cdbPctOfCdi: float = 0.0  # CDB paying this percent of the CDI; 0 => use cdbNominal
    lci: float = 0.0
    selic: float = 0.0
    poupanca: float = 0.0
    ipcaRealPct: float = 0.0
    ipcaPct: float = 0.0


class ProjectionInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    principal: float = 0.0
    monthlyContribution: float = 0.0
    horizonMonths: int = Field(1, ge=1)
    annualInflationPct: float = 0.0
    annualRatesPct: AnnualRates = Field(default_factory=AnnualRates)


class Instrument(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    annualRatePct: float
    isTaxable: bool
    note: Optional[str] = None

    @property
    def label(self) -> str:
        return f"{self.name} ({self.note})" if self.note else self.name


class ResultRow(BaseModel):
    """
    Outcome for one instrument over the whole horizon.

    futureValue = totalContributed + grossReturn
    netReturn   = grossReturn - transactionTaxAmount - incomeTaxAmount
    """

    model_config = ConfigDict(frozen=True)

    instrument: Instrument
    annualRatePct: float
    futureValue: float
    totalContributed: float
    grossReturn: float
    transactionTaxAmount: float
    incomeTaxPct: float
    incomeTaxAmount: float
    netReturn: float
    inflationAdjustedNetReturn: float


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    rows: List[ResultRow]
    # largest netReturn among rows, negative when every row loses money;
    # the chart scales bar heights against it
    maxNetReturn: float
