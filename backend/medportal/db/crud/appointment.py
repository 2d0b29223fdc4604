import logging
from typing import List, Optional

from medportal.config.constants import EntityKind
from medportal.db.models.appointment import AppointmentModel
from medportal.db.store import EntityStore
from medportal.schemas.appointment import AppointmentCreate, AppointmentUpdate

logger = logging.getLogger(__name__)


def get_appointment(store: EntityStore, appointment_id: int) -> Optional[AppointmentModel]:
    return store.get(EntityKind.APPOINTMENT, appointment_id)


def get_appointments_by_patient(store: EntityStore, patient_id: int) -> List[AppointmentModel]:
    return store.filter(
        EntityKind.APPOINTMENT, lambda appt: appt.patient_id == patient_id
    )


def get_appointments_by_doctor(store: EntityStore, doctor_id: int) -> List[AppointmentModel]:
    return store.filter(
        EntityKind.APPOINTMENT, lambda appt: appt.doctor_id == doctor_id
    )


def create_appointment(store: EntityStore, data: AppointmentCreate) -> AppointmentModel:
    """
    Insert a new appointment.

    The patient and doctor ids are stored as given; their existence is not
    checked against the user collection.
    """
    logger.info(
        f"CRUD: Creating appointment for patient_id={data.patient_id} with doctor_id={data.doctor_id} "
        f"on {data.date} at {data.time}"
    )
    appointment = store.insert(EntityKind.APPOINTMENT, data.model_dump())
    logger.info(
        f"CRUD: Created appointment_id={appointment.id} with status='{appointment.status}'."
    )
    return appointment


def update_appointment(
    store: EntityStore, appointment_id: int, data: AppointmentUpdate
) -> Optional[AppointmentModel]:
    """Apply the fields present in ``data``; None if the appointment does not exist."""
    changes = data.changes()
    appointment = store.update(EntityKind.APPOINTMENT, appointment_id, changes)
    if appointment is None:
        logger.warning(f"CRUD: Update failed, appointment {appointment_id} not found")
        return None
    logger.info(f"CRUD: Updated appointment_id={appointment_id} fields={sorted(changes)}")
    return appointment
