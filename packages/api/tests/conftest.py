# This project was developed with assistance from AI tools.
"""Shared fixtures: in-memory rate catalog and a TestClient wired to it.

``app.dependency_overrides`` swaps the SQL rate store for an
``InMemoryRateStore`` so route tests never need a database.
"""

import pytest
from fastapi.testclient import TestClient

from mortgage_api.main import app as real_app
from mortgage_api.routes.mortgage import get_rate_store
from mortgage_api.services.rates import InMemoryRateStore

from .factories import make_rate


@pytest.fixture
def rate_store():
    """Catalog with 10, 20 and 30 year rates."""
    return InMemoryRateStore(
        [
            make_rate(10, "0.05"),
            make_rate(20, "0.04"),
            make_rate(30, "0.045"),
        ]
    )


@pytest.fixture
def app(rate_store):
    real_app.dependency_overrides[get_rate_store] = lambda: rate_store
    yield real_app
    real_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)
