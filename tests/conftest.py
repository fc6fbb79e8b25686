import json

import pytest
from fastapi.testclient import TestClient

from slot_booking_api.app.core.config import settings
from slot_booking_api.app.main import create_app


@pytest.fixture(autouse=True)
def _isolated_documents(tmp_path, monkeypatch):
    # Never touch the ledger or configuration in the project root
    monkeypatch.setattr(settings, "data_file", str(tmp_path / "data.json"))
    monkeypatch.setattr(settings, "config_file", str(tmp_path / "config.json"))
    monkeypatch.setattr(settings, "static_dir", str(tmp_path / "static"))
    monkeypatch.setattr(settings, "allow_reset", False)
    yield


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config.json"


@pytest.fixture
def data_path(tmp_path):
    return tmp_path / "data.json"


@pytest.fixture
def write_config(config_path):
    """Write a small event configuration; keyword arguments override keys."""

    def _write(**overrides):
        data = {
            "cohorts": ["Alpha", "Beta"],
            "perDayLimit": 2,
            "perCohortLimit": 1,
            "allowedDates": ["2024-01-01"],
            "adminPassword": "secret",
        }
        data.update(overrides)
        config_path.write_text(json.dumps(data), encoding="utf-8")
        return data

    return _write


@pytest.fixture
def make_payload():
    """Build a complete registration body."""

    def _make(contact="1111111111", cohort="Alpha", date="2024-01-01", **overrides):
        payload = {
            "name": "Asha Rao",
            "college": "City College",
            "year": "2",
            "contact": contact,
            "email": "asha@example.com",
            "food": "Veg",
            "date": date,
            "cohort": cohort,
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def ledger_rows(data_path):
    """Return the registrations currently stored on disk."""

    def _read():
        if not data_path.exists():
            return []
        return json.loads(data_path.read_text(encoding="utf-8"))["registrations"]

    return _read


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client
