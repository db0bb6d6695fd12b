from __future__ import annotations

import math

import pytest

from fixed_income.app.config import Config
from fixed_income.app.render import bar_height, chart_bars, format_brl, table_rows
from fixed_income.core.projection import project


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "R$ 0,00"),
        (1234.5, "R$ 1.234,50"),
        (17200, "R$ 17.200,00"),
        (1234567.891, "R$ 1.234.567,89"),
        (-42.1, "-R$ 42,10"),
    ],
)
def test_format_brl(value, expected):
    assert format_brl(value) == expected


def test_bar_height_scales_against_best_row():
    assert bar_height(100.0, 100.0) == 120
    assert bar_height(50.0, 100.0) == 60
    assert bar_height(1.0, 100.0) == 6  # 1.2px rounds up to the minimum


def test_bar_height_rounds_half_up():
    assert bar_height(62.5, 100.0, max_height=100, min_height=0) == 63
    assert bar_height(2.5, 100.0, max_height=100) == 6


def test_non_positive_returns_get_minimum_bar():
    assert bar_height(0.0, 100.0) == 6
    assert bar_height(-10.0, 100.0) == 6
    assert bar_height(-10.0, -5.0, min_height=4) == 4


def test_table_rows_follow_result_rows(default_input):
    result = project(default_input)
    rows = table_rows(result)

    assert len(rows) == 6
    assert rows[0].label == "CDB (nominal)"
    assert rows[0].annualRate == "14.00"
    assert rows[0].totalContributed == "R$ 17.200,00"
    assert rows[0].transactionTax == "R$ 0,00"
    assert rows[0].incomeTaxPct == "22.50%"
    assert rows[2].incomeTaxPct == "0.00%"
    assert rows[5].label == "Tesouro IPCA+ (real:3% ipca:4%)"
    assert rows[5].annualRate == "7.12"


def test_chart_bars(default_input):
    result = project(default_input)
    bars = chart_bars(result)

    assert [bar.label for bar in bars] == ["CDB", "CDB", "LCI/LCA", "Tesouro", "Poupança", "Tesouro"]
    heights = {row.instrument.key: bar.height for row, bar in zip(result.rows, bars)}
    assert heights["cdb_nominal"] == 120
    assert heights["cdb_pct_cdi"] == 6
    assert all(6 <= bar.height <= 120 for bar in bars)
    assert bars[0].title.startswith("CDB (nominal): R$ ")


def test_bar_defaults_come_from_app_config():
    assert bar_height(100.0, 100.0) == Config.CHART_MAX_BAR_HEIGHT
    assert bar_height(0.0, 100.0) == Config.CHART_MIN_BAR_HEIGHT


def test_saturated_returns_still_render():
    assert bar_height(math.inf, math.inf) == 120
    assert bar_height(500.0, math.inf) == 6
    assert bar_height(math.nan, 100.0) == 6
