# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from medportal.config.settings import Settings
from medportal.db.store import EntityStore
from medportal.main import create_app


@pytest.fixture
def store():
    """A fresh, empty store for every test."""
    return EntityStore()


@pytest.fixture
def client(store):
    """API client over an empty store (no sample data)."""
    app = create_app(Settings(seed_sample_data=False), store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client():
    """API client over a store loaded with the sample admin, doctors and hospitals."""
    app = create_app(Settings(seed_sample_data=True))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def appointment_payload():
    return {
        "patientId": 1,
        "doctorId": 2,
        "date": "2024-06-20",
        "time": "09:00",
        "type": "in-person",
        "status": "pending",
    }
