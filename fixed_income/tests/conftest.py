from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from fixed_income.app import create_app
from fixed_income.models import AnnualRates, ProjectionInput


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app({"TESTING": True})
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def default_input() -> ProjectionInput:
    """The page defaults: 10k start, 200/month for 36 months."""
    return ProjectionInput(
        principal=10000,
        monthlyContribution=200,
        horizonMonths=36,
        annualInflationPct=4.0,
        annualRatesPct=AnnualRates(
            cdi=13.15,
            cdbNominal=14.0,
            cdbPctOfCdi=0,
            lci=9.0,
            selic=13.75,
            poupanca=6.17,
            ipcaRealPct=3.0,
            ipcaPct=4.0,
        ),
    )
