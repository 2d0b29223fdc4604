# tests/test_crud.py
import pytest

from medportal.config.constants import EntityKind
from medportal.core.auth import verify_password
from medportal.db.crud.appointment import (
    create_appointment,
    get_appointments_by_doctor,
    get_appointments_by_patient,
    update_appointment,
)
from medportal.db.crud.message import (
    create_message,
    get_messages_by_user,
    mark_message_as_read,
)
from medportal.db.crud.user import (
    create_user,
    get_user_by_email,
    get_user_by_username,
    get_users_by_role,
    insert_user_record,
)
from medportal.schemas.appointment import AppointmentCreate, AppointmentUpdate
from medportal.schemas.message import MessageCreate
from medportal.schemas.user import RegisterRequest


def _add_user(store, username, role):
    return insert_user_record(
        store,
        username=username,
        password="not-a-real-hash",
        first_name=username.title(),
        last_name="Test",
        email=f"{username}@medicare.com",
        role=role,
    )


def test_users_by_role_is_exact_regardless_of_order(store):
    roles = ["patient", "doctor", "admin", "doctor", "patient", "doctor"]
    for i, role in enumerate(roles):
        _add_user(store, f"user{i}", role)

    doctors = get_users_by_role(store, "doctor")

    assert {u.username for u in doctors} == {"user1", "user3", "user5"}
    assert all(u.role == "doctor" for u in doctors)
    assert get_users_by_role(store, "nurse") == []


def test_lookup_by_username_and_email(store):
    _add_user(store, "alice", "patient")
    bob = _add_user(store, "bob", "doctor")

    assert get_user_by_username(store, "bob") == bob
    assert get_user_by_email(store, "bob@medicare.com") == bob
    assert get_user_by_username(store, "carol") is None
    assert get_user_by_email(store, "carol@medicare.com") is None


def test_create_user_hashes_password(store):
    user = create_user(
        store,
        RegisterRequest(
            username="patient1",
            password="s3cret-pass",
            first_name="Pat",
            last_name="Ient",
            email="patient1@medicare.com",
        ),
    )
    assert user.password != "s3cret-pass"
    assert verify_password("s3cret-pass", user.password)
    assert user.role == "patient"


def test_appointments_by_patient_and_doctor(store):
    for patient_id, doctor_id in [(1, 2), (1, 3), (4, 2)]:
        create_appointment(
            store,
            AppointmentCreate(patient_id=patient_id, doctor_id=doctor_id, date="2024-06-20", time="10:00"),
        )

    assert [a.doctor_id for a in get_appointments_by_patient(store, 1)] == [2, 3]
    assert [a.patient_id for a in get_appointments_by_doctor(store, 2)] == [1, 4]
    assert get_appointments_by_doctor(store, 99) == []


def test_update_appointment_only_touches_sent_fields(store):
    appt = create_appointment(
        store,
        AppointmentCreate(patient_id=1, doctor_id=2, date="2024-06-20", time="10:00", notes="bring x-rays"),
    )

    updated = update_appointment(store, appt.id, AppointmentUpdate(status="confirmed"))

    assert updated.status == "confirmed"
    assert updated.notes == "bring x-rays"
    assert updated.duration == 30
    assert updated.created_at == appt.created_at
    assert update_appointment(store, 404, AppointmentUpdate(status="confirmed")) is None


def test_messages_by_user_match_sender_or_receiver(store):
    create_message(store, MessageCreate(sender_id=1, receiver_id=2, content="hi doc"))
    create_message(store, MessageCreate(sender_id=2, receiver_id=1, content="hi"))
    create_message(store, MessageCreate(sender_id=3, receiver_id=2, content="other"))

    assert [m.content for m in get_messages_by_user(store, 1)] == ["hi doc", "hi"]
    assert len(get_messages_by_user(store, 2)) == 3
    assert get_messages_by_user(store, 9) == []


def test_mark_message_as_read_is_idempotent(store):
    msg = create_message(store, MessageCreate(sender_id=1, receiver_id=2, content="hi"))

    first = mark_message_as_read(store, msg.id)
    second = mark_message_as_read(store, msg.id)

    assert first.is_read is True
    assert second == first
    assert store.get(EntityKind.MESSAGE, msg.id).is_read is True
    assert mark_message_as_read(store, 12345) is None


@pytest.mark.parametrize("status", ["confirmed", "cancelled", "completed"])
def test_appointment_patch_accepts_every_status(status):
    assert AppointmentUpdate(status=status).changes() == {"status": status}
