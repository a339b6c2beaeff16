"""Root conftest — shared test configuration."""

import os

import pytest

# Tests must not pick up a developer's .env overrides
os.environ.setdefault("SERVICE_NAME", "karmicAnk")
os.environ.setdefault("LOG_LEVEL", "DEBUG")


@pytest.fixture
def calculator():
    from numerology_calculator import NumerologyCalculator
    return NumerologyCalculator()


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from api.main import app

    with TestClient(app) as test_client:
        yield test_client
