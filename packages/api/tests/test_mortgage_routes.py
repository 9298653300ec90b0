# This project was developed with assistance from AI tools.
"""Tests for the mortgage REST endpoints (rate catalog + feasibility check)."""

from unittest.mock import AsyncMock, MagicMock

from db import get_db
from fastapi.testclient import TestClient

from mortgage_api.core.config import settings
from mortgage_api.routes import mortgage as mortgage_routes
from mortgage_api.routes.mortgage import get_feasibility_service, get_rate_store
from mortgage_api.schemas.mortgage import MAX_MATURITY_PERIOD
from mortgage_api.services.errors import ErrorKind, Result
from mortgage_api.services.rates import InMemoryRateStore, MortgageRateRepository

from .factories import make_rate


def _check(client, **overrides):
    body = {"maturityPeriod": 10, "income": 5000, "loanValue": 10000, "homeValue": 100000}
    body.update(overrides)
    return client.post("/v1/api/mortgage-check", json=body)


# ---------------------------------------------------------------------------
# GET /interest-rates
# ---------------------------------------------------------------------------


def test_interest_rates_lists_catalog(client):
    response = client.get("/v1/api/interest-rates")
    assert response.status_code == 200
    data = response.json()
    assert [r["maturityPeriod"] for r in data] == [10, 20, 30]
    assert data[0]["interestRate"] == 0.05
    assert data[0]["lastUpdate"] == "2024-01-15T10:30:00.123"


def test_interest_rates_empty_catalog(app, client):
    app.dependency_overrides[get_rate_store] = lambda: InMemoryRateStore()
    response = client.get("/v1/api/interest-rates")
    assert response.status_code == 200
    assert response.json() == []


# ---------------------------------------------------------------------------
# POST /mortgage-check
# ---------------------------------------------------------------------------


def test_mortgage_check_feasible(client):
    response = _check(client)
    assert response.status_code == 200
    assert response.json() == {"feasible": True, "monthlyCost": 106.07}


def test_mortgage_check_not_feasible_income(client):
    response = _check(client, loanValue=90000)
    assert response.status_code == 200
    assert response.json() == {"feasible": False, "monthlyCost": 0.0}


def test_mortgage_check_not_feasible_home_value(client):
    response = _check(client, income=100000, loanValue=200000, homeValue=150000)
    assert response.json()["feasible"] is False


def test_mortgage_check_unknown_period_is_404(client):
    response = _check(client, maturityPeriod=7)
    assert response.status_code == 404
    data = response.json()
    assert data["title"] == "Not Found"
    assert data["detail"] == "Could not find mortgage rate for maturity period of 7 years"
    assert data["errors"] == [{"field": "maturityPeriod", "message": data["detail"]}]


def test_mortgage_check_rejects_zero_maturity(client):
    response = _check(client, maturityPeriod=0)
    assert response.status_code == 400
    data = response.json()
    assert data["title"] == "Bad Request"
    assert data["detail"].startswith("maturityPeriod: ")
    assert data["errors"][0]["field"] == "maturityPeriod"


def test_mortgage_check_rejects_missing_maturity(client):
    response = client.post(
        "/v1/api/mortgage-check",
        json={"income": 5000, "loanValue": 10000, "homeValue": 100000},
    )
    assert response.status_code == 400
    assert response.json()["detail"].startswith("maturityPeriod: ")


def test_mortgage_check_rejects_negative_income(client):
    response = _check(client, income=-5000)
    assert response.status_code == 400
    assert response.json()["detail"].startswith("income: ")


def test_mortgage_check_groups_multiple_violations(client):
    response = _check(client, loanValue=0, homeValue=None)
    assert response.status_code == 400
    detail = response.json()["detail"]
    assert "loanValue: " in detail
    assert "homeValue: " in detail
    assert "; " in detail


def test_mortgage_check_calculator_validation_is_400(app, client):
    service = MagicMock()
    service.check_feasibility = AsyncMock(
        return_value=Result.fail(
            ErrorKind.VALIDATION, "Invalid income: It must be greater than zero.", field="income",
        )
    )
    app.dependency_overrides[get_feasibility_service] = lambda: service

    response = _check(client)

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid income: It must be greater than zero."
    assert response.json()["errors"] == [
        {"field": "income", "message": "Invalid income: It must be greater than zero."}
    ]


def test_request_id_header_is_echoed(client):
    response = client.post(
        "/v1/api/mortgage-check",
        json={"maturityPeriod": 7, "income": 5000, "loanValue": 10000, "homeValue": 100000},
        headers={"X-Request-ID": "req-123"},
    )
    assert response.json()["request_id"] == "req-123"


def test_snake_case_field_names_accepted(client):
    response = client.post(
        "/v1/api/mortgage-check",
        json={"maturity_period": 10, "income": 5000, "loan_value": 10000, "home_value": 100000},
    )
    assert response.status_code == 200
    assert response.json()["monthlyCost"] == 106.07


def test_rates_are_looked_up_per_request(app, client, rate_store):
    rate_store.put(make_rate(15, "0.0375"))
    response = _check(client, maturityPeriod=15)
    assert response.status_code == 200
    assert response.json()["feasible"] is True


def test_health(client):
    response = client.get("/health/")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_serves_versioned_paths(client):
    assert client.get("/v1/api/interest-rates").status_code == 200
    assert _check(client).status_code == 200
    assert client.get("/api/v1/interest-rates").status_code == 404


def test_maturity_period_beyond_integer_column_is_400(client):
    response = _check(client, maturityPeriod=MAX_MATURITY_PERIOD + 1)
    assert response.status_code == 400
    data = response.json()
    assert data["detail"].startswith("maturityPeriod: ")
    assert data["errors"][0]["field"] == "maturityPeriod"


def test_largest_maturity_period_reaches_lookup(client):
    response = _check(client, maturityPeriod=MAX_MATURITY_PERIOD)
    assert response.status_code == 404


def test_memory_rate_store_serves_default_catalog(app, monkeypatch):
    monkeypatch.setattr(settings, "RATE_STORE", "memory")
    monkeypatch.setattr(mortgage_routes, "_memory_store", None)
    app.dependency_overrides.pop(get_rate_store)
    app.dependency_overrides[get_db] = lambda: MagicMock()
    client = TestClient(app)

    rates = client.get("/v1/api/interest-rates").json()
    assert [r["maturityPeriod"] for r in rates] == [10, 15, 20, 25, 30]
    assert rates[0]["interestRate"] == 0.035

    response = _check(client, maturityPeriod=15)
    assert response.status_code == 200
    assert response.json()["feasible"] is True


def test_database_rate_store_is_default(monkeypatch):
    session = MagicMock()
    monkeypatch.setattr(settings, "RATE_STORE", "database")
    store = get_rate_store(session)
    assert isinstance(store, MortgageRateRepository)
