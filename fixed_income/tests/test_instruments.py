from __future__ import annotations

from math import isclose

from fixed_income.core.instruments import INSTRUMENTS, resolve_instruments
from fixed_income.models import AnnualRates, ProjectionInput


def test_six_instruments_in_fixed_order(default_input):
    instruments = resolve_instruments(default_input)

    assert [i.key for i in instruments] == [
        "cdb_nominal",
        "cdb_pct_cdi",
        "lci_lca",
        "tesouro_selic",
        "poupanca",
        "tesouro_ipca",
    ]
    assert [i.isTaxable for i in instruments] == [True, True, False, True, False, True]
    assert len(INSTRUMENTS) == 6


def test_nominal_cdb_used_when_pct_of_cdi_is_zero(default_input):
    cdb_nominal, cdb_pct = resolve_instruments(default_input)[:2]

    assert cdb_nominal.annualRatePct == 14.0
    assert cdb_pct.annualRatePct == 0.0


def test_pct_of_cdi_overrides_nominal_and_duplicates_row():
    projection_input = ProjectionInput(
        horizonMonths=12,
        annualRatesPct=AnnualRates(cdi=13.15, cdbNominal=14.0, cdbPctOfCdi=110),
    )
    cdb_nominal, cdb_pct = resolve_instruments(projection_input)[:2]

    assert isclose(cdb_nominal.annualRatePct, 14.465, abs_tol=1e-9)
    assert cdb_pct.annualRatePct == cdb_nominal.annualRatePct


def test_ipca_plus_compounds_real_rate_with_index(default_input):
    ipca = resolve_instruments(default_input)[-1]

    assert isclose(ipca.annualRatePct, 7.12, abs_tol=1e-9)
    assert ipca.note == "real:3% ipca:4%"
    assert ipca.label == "Tesouro IPCA+ (real:3% ipca:4%)"


def test_only_ipca_plus_is_annotated(default_input):
    notes = [i.note for i in resolve_instruments(default_input)]
    assert notes[:-1] == [None] * 5


def test_ipca_plus_note_keeps_full_precision():
    projection_input = ProjectionInput(
        horizonMonths=12,
        annualRatesPct=AnnualRates(ipcaRealPct=13.1234567, ipcaPct=1234567.0),
    )
    ipca = resolve_instruments(projection_input)[-1]

    assert ipca.note == "real:13.1234567% ipca:1234567%"
