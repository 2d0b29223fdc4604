# tests/test_portal_api.py
from medportal.main import create_app
from medportal.config.settings import Settings
from fastapi.testclient import TestClient
import logging
import pytest

from medportal.config.constants import EntityKind
from medportal.config.settings import settings as default_settings
from medportal.core.auth import configure_password_hashing

import medportal.routes.appointment.router as appointment_router


###############
# Sample data, doctors and hospitals
###############
def test_health_reports_record_counts(seeded_client):
    r = seeded_client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["records"]["user"] == 4
    assert r.json()["records"]["hospital"] == 2


def test_doctors_are_exactly_the_seeded_doctors(seeded_client):
    doctors = seeded_client.get("/api/doctors").json()

    assert [d["username"] for d in doctors] == ["drsmith", "drjones", "drwilliams"]
    assert all(d["role"] == "doctor" for d in doctors)
    assert all("password" not in d for d in doctors)
    assert doctors[0]["specialty"] == "Cardiology"


def test_doctors_empty_without_sample_data(client):
    assert client.get("/api/doctors").json() == []


def test_hospitals_list_get_and_404(seeded_client):
    hospitals = seeded_client.get("/api/hospitals").json()
    assert [h["name"] for h in hospitals] == ["City General Hospital", "Memorial Medical Center"]
    assert hospitals[0]["zipCode"] == "12345"

    assert seeded_client.get("/api/hospitals/2").json() == hospitals[1]
    r = seeded_client.get("/api/hospitals/10")
    assert r.status_code == 404
    assert r.json() == {"error": "Hospital not found"}


def test_hospital_create_and_patch(client):
    created = client.post(
        "/api/hospitals",
        json={"name": "Lakeside Clinic", "address": "1 Shore Rd", "city": "Lakeside", "state": "LS", "zipCode": "54321"},
    )
    assert created.status_code == 201
    hospital = created.json()

    r = client.patch(f"/api/hospitals/{hospital['id']}", json={"phone": "555-000-1111"})
    assert r.json()["phone"] == "555-000-1111"
    assert r.json()["name"] == "Lakeside Clinic"
    assert client.patch("/api/hospitals/42", json={"phone": "x"}).status_code == 404


###############
# Registration, login and profiles
###############
NEW_PATIENT = {
    "username": "jdoe",
    "password": "correct-horse",
    "firstName": "Jane",
    "lastName": "Doe",
    "email": "jane.doe@medicare.com",
}


def test_register_and_login(seeded_client):
    r = seeded_client.post("/api/register", json=NEW_PATIENT)
    assert r.status_code == 201
    user = r.json()
    assert user["id"] == 5
    assert user["role"] == "patient"
    assert "password" not in user

    login = seeded_client.post("/api/login", json={"username": "jdoe", "password": "correct-horse"})
    assert login.status_code == 200
    assert login.json() == user


def test_register_rejects_duplicates(seeded_client):
    taken_username = {**NEW_PATIENT, "username": "drsmith"}
    taken_email = {**NEW_PATIENT, "email": "admin@medicare.com"}

    r = seeded_client.post("/api/register", json=taken_username)
    assert r.status_code == 409
    assert r.json() == {"error": "Username already exists"}
    assert seeded_client.post("/api/register", json=taken_email).status_code == 409


def test_register_validation(client):
    r = client.post("/api/register", json={**NEW_PATIENT, "password": "short", "email": "nope", "role": "nurse"})
    assert r.status_code == 400
    assert {e["field"] for e in r.json()["error"]} == {"password", "email", "role"}


def test_login_with_sample_credentials(seeded_client):
    ok = seeded_client.post("/api/login", json={"username": "drsmith", "password": "password"})
    assert ok.status_code == 200
    assert ok.json()["specialty"] == "Cardiology"

    bad = seeded_client.post("/api/login", json={"username": "drsmith", "password": "wrong-one"})
    assert bad.status_code == 401
    assert bad.json() == {"error": "Invalid credentials"}
    assert seeded_client.post("/api/login", json={"username": "ghost", "password": "password"}).status_code == 401


def test_profile_get_and_patch(seeded_client):
    before = seeded_client.get("/api/users/2").json()

    r = seeded_client.patch("/api/users/2", json={"bio": "Now accepting new patients."})

    assert r.status_code == 200
    assert r.json()["bio"] == "Now accepting new patients."
    assert r.json()["email"] == before["email"]
    assert r.json()["createdAt"] == before["createdAt"]


def test_profile_patch_conflicts_and_404(seeded_client):
    taken = seeded_client.patch("/api/users/2", json={"email": "dr.jones@medicare.com"})
    assert taken.status_code == 409

    # keeping your own email is fine
    assert seeded_client.patch("/api/users/2", json={"email": "dr.smith@medicare.com"}).status_code == 200
    assert seeded_client.get("/api/users/77").status_code == 404
    assert seeded_client.patch("/api/users/77", json={"bio": "x"}).status_code == 404


###############
# Unexpected failures
###############
def test_unexpected_error_is_500(monkeypatch):
    def broken(store, appointment_id):
        raise RuntimeError("corrupted state")

    monkeypatch.setattr(appointment_router, "get_appointment", broken)
    app = create_app(Settings(seed_sample_data=False))

    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/api/appointments/1")

    assert r.status_code == 500
    assert r.json() == {"error": "Internal server error"}


def test_unexpected_error_traceback_logged_once(monkeypatch, caplog):
    def broken(store, appointment_id):
        raise RuntimeError("corrupted state")

    monkeypatch.setattr(appointment_router, "get_appointment", broken)
    app = create_app(Settings(seed_sample_data=False))

    with caplog.at_level(logging.INFO, logger="medportal"):
        with TestClient(app, raise_server_exceptions=False) as c:
            c.get("/api/appointments/1")

    with_traceback = [rec for rec in caplog.records if rec.exc_info]
    assert len(with_traceback) == 1
    assert with_traceback[0].name == "medportal.core.errors"
    assert any("failed after" in rec.getMessage() for rec in caplog.records)


###############
# Settings passed to create_app
###############
@pytest.fixture
def restore_process_settings():
    yield
    configure_password_hashing(default_settings.bcrypt_rounds)
    logging.getLogger("medportal").setLevel(default_settings.log_level.upper())


def test_app_settings_control_hashing_and_log_level(restore_process_settings):
    app = create_app(Settings(seed_sample_data=False, bcrypt_rounds=4, log_level="warning"))

    with TestClient(app) as c:
        r = c.post("/api/register", json=NEW_PATIENT)
        stored = app.state.store.get(EntityKind.USER, r.json()["id"])

    assert stored.password.startswith("$2b$04$")
    assert logging.getLogger("medportal").level == logging.WARNING
