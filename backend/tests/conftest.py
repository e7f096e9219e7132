import pytest
from fastapi.testclient import TestClient

from app.schemas.ipo import FinancialRecord

# Offerings from the original seed data, camelCase as collaborators send them
SEED_OFFERINGS = {
    "SWIGGY": {
        "revenueGrowth": 35.2, "ebitdaMargin": -8.5, "patMargin": -12.3, "roe": -15.2, "roce": -10.8,
        "debtToEquity": 0.4, "peRatio": None, "sectorPeMedian": 45, "freshIssue": 0.42, "ofsRatio": 0.58,
        "gmp": 8, "subscriptionQib": 6.02, "subscriptionHni": 0.41, "subscriptionRetail": 1.14,
        "promoterHolding": 35.5, "postIpoPromoterHolding": 27.8,
    },
    "HYUNDAI": {
        "revenueGrowth": 18.5, "ebitdaMargin": 14.2, "patMargin": 8.9, "roe": 28.5, "roce": 32.1,
        "debtToEquity": 0.12, "peRatio": 26, "sectorPeMedian": 22, "freshIssue": 0, "ofsRatio": 1.0,
        "gmp": -30, "subscriptionQib": 6.97, "subscriptionHni": 0.60, "subscriptionRetail": 0.50,
        "promoterHolding": 100, "postIpoPromoterHolding": 82.5,
    },
    "WAREE": {
        "revenueGrowth": 68.4, "ebitdaMargin": 18.7, "patMargin": 11.2, "roe": 38.5, "roce": 42.3,
        "debtToEquity": 0.28, "peRatio": 35, "sectorPeMedian": 42, "freshIssue": 0.78, "ofsRatio": 0.22,
        "gmp": 1650, "subscriptionQib": 209.91, "subscriptionHni": 362.47, "subscriptionRetail": 12.14,
        "promoterHolding": 77.2, "postIpoPromoterHolding": 61.5,
    },
    "ZINKA": {
        "revenueGrowth": 42.8, "ebitdaMargin": -22.5, "patMargin": -28.3, "roe": -18.5, "roce": -12.4,
        "debtToEquity": 0.05, "peRatio": None, "sectorPeMedian": 35, "freshIssue": 0.63, "ofsRatio": 0.37,
        "gmp": 0, "promoterHolding": 12.5, "postIpoPromoterHolding": 8.2,
    },
    "NTPCGR": {
        "revenueGrowth": 85.2, "ebitdaMargin": 78.5, "patMargin": 32.8, "roe": 8.2, "roce": 6.8,
        "debtToEquity": 2.85, "peRatio": 218, "sectorPeMedian": 42, "freshIssue": 1.0, "ofsRatio": 0,
        "gmp": 1, "promoterHolding": 100, "postIpoPromoterHolding": 89.7,
    },
    "AFCONS": {
        "revenueGrowth": 22.4, "ebitdaMargin": 11.8, "patMargin": 5.2, "roe": 14.8, "roce": 18.2,
        "debtToEquity": 0.68, "peRatio": 22, "sectorPeMedian": 28, "freshIssue": 0.55, "ofsRatio": 0.45,
        "gmp": 45, "subscriptionQib": 12.5, "subscriptionHni": 8.2, "subscriptionRetail": 3.8,
        "promoterHolding": 78.5, "postIpoPromoterHolding": 65.2,
    },
    "SAGILITY": {
        "revenueGrowth": 12.8, "ebitdaMargin": 22.4, "patMargin": 11.5, "roe": 15.2, "roce": 14.8,
        "debtToEquity": 0.42, "peRatio": 28, "sectorPeMedian": 32, "freshIssue": 0, "ofsRatio": 1.0,
        "gmp": 2, "promoterHolding": 100, "postIpoPromoterHolding": 72.5,
    },
}


@pytest.fixture
def seed_records() -> dict[str, FinancialRecord]:
    return {symbol: FinancialRecord.model_validate(data) for symbol, data in SEED_OFFERINGS.items()}


@pytest.fixture
def hyundai() -> FinancialRecord:
    return FinancialRecord.model_validate(SEED_OFFERINGS["HYUNDAI"])


@pytest.fixture
def client() -> TestClient:
    from app.main import app

    return TestClient(app)


@pytest.fixture
def seed_offerings() -> dict[str, dict]:
    return {symbol: dict(data) for symbol, data in SEED_OFFERINGS.items()}
