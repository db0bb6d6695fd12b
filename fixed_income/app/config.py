"""Default configuration for the Flask app; override with FIXED_INCOME_* env vars."""


class Config:
    SERVICE_NAME = "fixed-income-simulator"

    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    LOG_LEVEL = "INFO"

    CHART_MAX_BAR_HEIGHT = 120
    CHART_MIN_BAR_HEIGHT = 6

    # values the form is reset to
    DEFAULT_FORM = {
        "principal": 10000,
        "monthly": 200,
        "months": 36,
        "inflation": 4.0,
        "cdi": 13.15,
        "cdb_nom": 14.0,
        "cdb_pct_cdi": 0,
        "lci": 9.0,
        "selic": 13.75,
        "poupanca": 6.17,
        "ipca_real": 3.0,
        "ipca": 4.0,
    }
