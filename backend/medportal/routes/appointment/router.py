from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional
import logging

from medportal.db.session import get_store
from medportal.db.store import EntityStore
from medportal.db.models.appointment import AppointmentModel
from medportal.db.crud.appointment import (
    create_appointment,
    get_appointment,
    get_appointments_by_doctor,
    get_appointments_by_patient,
    update_appointment,
)
from medportal.routes.params import require_one_of
from medportal.schemas.appointment import AppointmentCreate, AppointmentUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.get("", response_model=List[AppointmentModel])
async def get_appointments_route(
    patient_id: Optional[int] = Query(None, alias="patientId"),
    doctor_id: Optional[int] = Query(None, alias="doctorId"),
    store: EntityStore = Depends(get_store),
):
    """Appointments of one patient or one doctor"""
    which = require_one_of(patientId=patient_id, doctorId=doctor_id)
    if which == "patientId":
        return get_appointments_by_patient(store, patient_id)
    return get_appointments_by_doctor(store, doctor_id)


@router.get("/{appointment_id}", response_model=AppointmentModel)
async def get_appointment_route(
    appointment_id: int,
    store: EntityStore = Depends(get_store),
):
    """Get a specific appointment by ID"""
    appointment = get_appointment(store, appointment_id)
    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return appointment


@router.post("", response_model=AppointmentModel, status_code=201)
async def create_appointment_route(
    appointment: AppointmentCreate,
    store: EntityStore = Depends(get_store),
):
    """Book a new appointment"""
    return create_appointment(store, appointment)


@router.patch("/{appointment_id}", response_model=AppointmentModel)
async def update_appointment_route(
    appointment_id: int,
    appointment_update: AppointmentUpdate,
    store: EntityStore = Depends(get_store),
):
    """Update an existing appointment (reschedule, confirm, cancel, ...)"""
    appointment = update_appointment(store, appointment_id, appointment_update)
    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return appointment
