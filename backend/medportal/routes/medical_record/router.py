from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from medportal.db.session import get_store
from medportal.db.store import EntityStore
from medportal.db.models.medical_record import MedicalRecordModel
from medportal.db.crud.medical_record import (
    create_medical_record,
    get_medical_record,
    get_medical_records_by_patient,
)
from medportal.routes.params import require_param
from medportal.schemas.medical_record import MedicalRecordCreate

router = APIRouter(prefix="/medical-records", tags=["medical-records"])


@router.get("", response_model=List[MedicalRecordModel])
async def get_medical_records_route(
    patient_id: Optional[int] = Query(None, alias="patientId"),
    store: EntityStore = Depends(get_store),
):
    patient_id = require_param("patientId", patient_id)
    return get_medical_records_by_patient(store, patient_id)


@router.get("/{record_id}", response_model=MedicalRecordModel)
async def get_medical_record_route(
    record_id: int,
    store: EntityStore = Depends(get_store),
):
    record = get_medical_record(store, record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Medical record not found")
    return record


@router.post("", response_model=MedicalRecordModel, status_code=201)
async def create_medical_record_route(
    record: MedicalRecordCreate,
    store: EntityStore = Depends(get_store),
):
    return create_medical_record(store, record)
