"""Declarative table of the instruments compared by the simulator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from fixed_income.models import AnnualRates, Instrument, ProjectionInput

RateRule = Callable[[AnnualRates], float]
NoteRule = Callable[[AnnualRates], str]


@dataclass(frozen=True)
class InstrumentDefinition:
    key: str
    name: str
    rate: RateRule
    is_taxable: bool
    note: Optional[NoteRule] = None

    def resolve(self, rates: AnnualRates) -> Instrument:
        return Instrument(
            key=self.key,
            name=self.name,
            annualRatePct=self.rate(rates),
            isTaxable=self.is_taxable,
            note=self.note(rates) if self.note else None,
        )


def _pct(value: float) -> str:
    # shortest round-trip form: 3.0 -> "3", 13.1234567 -> "13.1234567"
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def cdb_pct_of_cdi_rate(rates: AnnualRates) -> float:
    return rates.cdi * rates.cdbPctOfCdi / 100


def cdb_rate(rates: AnnualRates) -> float:
    """A positive percent-of-CDI takes precedence over the nominal CDB rate."""
    if rates.cdbPctOfCdi > 0:
        return cdb_pct_of_cdi_rate(rates)
    return rates.cdbNominal


def ipca_plus_rate(rates: AnnualRates) -> float:
    """Nominal annual rate of a real yield compounded with the IPCA index."""
    return ((1 + rates.ipcaRealPct / 100) * (1 + rates.ipcaPct / 100) - 1) * 100


INSTRUMENTS: Tuple[InstrumentDefinition, ...] = (
    InstrumentDefinition("cdb_nominal", "CDB (nominal)", cdb_rate, is_taxable=True),
    # shown even when it duplicates the row above
    InstrumentDefinition("cdb_pct_cdi", "CDB (% do CDI)", cdb_pct_of_cdi_rate, is_taxable=True),
    InstrumentDefinition("lci_lca", "LCI/LCA (isento)", lambda r: r.lci, is_taxable=False),
    InstrumentDefinition("tesouro_selic", "Tesouro Selic", lambda r: r.selic, is_taxable=True),
    InstrumentDefinition("poupanca", "Poupança", lambda r: r.poupanca, is_taxable=False),
    InstrumentDefinition(
        "tesouro_ipca",
        "Tesouro IPCA+",
        ipca_plus_rate,
        is_taxable=True,
        note=lambda r: f"real:{_pct(r.ipcaRealPct)}% ipca:{_pct(r.ipcaPct)}%",
    ),
)


def resolve_instruments(projection_input: ProjectionInput) -> List[Instrument]:
    """Resolve every instrument definition against the input rates, in table order."""
    rates = projection_input.annualRatesPct
    return [definition.resolve(rates) for definition in INSTRUMENTS]
