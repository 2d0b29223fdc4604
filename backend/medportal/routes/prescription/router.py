from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from medportal.db.session import get_store
from medportal.db.store import EntityStore
from medportal.db.models.prescription import PrescriptionModel
from medportal.db.crud.prescription import (
    create_prescription,
    get_prescription,
    get_prescriptions_by_doctor,
    get_prescriptions_by_patient,
    update_prescription,
)
from medportal.routes.params import require_one_of
from medportal.schemas.prescription import PrescriptionCreate, PrescriptionUpdate

router = APIRouter(prefix="/prescriptions", tags=["prescriptions"])


@router.get("", response_model=List[PrescriptionModel])
async def get_prescriptions_route(
    patient_id: Optional[int] = Query(None, alias="patientId"),
    doctor_id: Optional[int] = Query(None, alias="doctorId"),
    store: EntityStore = Depends(get_store),
):
    """Prescriptions written for a patient, or written by a doctor"""
    which = require_one_of(patientId=patient_id, doctorId=doctor_id)
    if which == "patientId":
        return get_prescriptions_by_patient(store, patient_id)
    return get_prescriptions_by_doctor(store, doctor_id)


@router.get("/{prescription_id}", response_model=PrescriptionModel)
async def get_prescription_route(
    prescription_id: int,
    store: EntityStore = Depends(get_store),
):
    prescription = get_prescription(store, prescription_id)
    if not prescription:
        raise HTTPException(status_code=404, detail="Prescription not found")
    return prescription


@router.post("", response_model=PrescriptionModel, status_code=201)
async def create_prescription_route(
    prescription: PrescriptionCreate,
    store: EntityStore = Depends(get_store),
):
    return create_prescription(store, prescription)


@router.patch("/{prescription_id}", response_model=PrescriptionModel)
async def update_prescription_route(
    prescription_id: int,
    prescription_update: PrescriptionUpdate,
    store: EntityStore = Depends(get_store),
):
    prescription = update_prescription(store, prescription_id, prescription_update)
    if not prescription:
        raise HTTPException(status_code=404, detail="Prescription not found")
    return prescription
