# This project was developed with assistance from AI tools.
"""Shared fixtures.

The app from ``mortgage_api.main`` is a module singleton. Each test gets a
fresh Store and a fixed "today" through ``dependency_overrides``, which are
cleared afterwards so state never leaks between tests.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from mortgage_api.main import app as real_app
from mortgage_api.routes.mortgage import get_today
from mortgage_api.schemas.mortgage import ExecuteRequest, Program
from mortgage_api.services.cache import Store, get_store

FIXED_TODAY = date(2024, 2, 18)


@pytest.fixture(autouse=True)
def _clean_overrides():
    """Clear app dependency overrides after each test."""
    yield
    real_app.dependency_overrides.clear()


@pytest.fixture
def app():
    return real_app


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def today() -> date:
    return FIXED_TODAY


@pytest.fixture
def client(app, store, today) -> TestClient:
    """TestClient wired to the per-test Store and fixed date."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_today] = lambda: today
    return TestClient(app)


@pytest.fixture
def base_request() -> ExecuteRequest:
    return ExecuteRequest(
        object_cost=100000,
        initial_payment=20000,
        months=12,
        program=Program(base=True),
    )
