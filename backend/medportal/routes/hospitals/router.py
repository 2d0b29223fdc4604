from fastapi import APIRouter, Depends, HTTPException
from typing import List

from medportal.db.session import get_store
from medportal.db.store import EntityStore
from medportal.db.models.hospital import HospitalModel
from medportal.db.crud.hospital import (
    create_hospital,
    get_hospital,
    get_hospitals,
    update_hospital,
)
from medportal.schemas.hospital import HospitalCreate, HospitalUpdate

router = APIRouter(prefix="/hospitals", tags=["hospitals"])


@router.get("", response_model=List[HospitalModel])
async def get_hospitals_route(store: EntityStore = Depends(get_store)):
    return get_hospitals(store)


@router.get("/{hospital_id}", response_model=HospitalModel)
async def get_hospital_route(
    hospital_id: int,
    store: EntityStore = Depends(get_store),
):
    hospital = get_hospital(store, hospital_id)
    if not hospital:
        raise HTTPException(status_code=404, detail="Hospital not found")
    return hospital


@router.post("", response_model=HospitalModel, status_code=201)
async def create_hospital_route(
    hospital: HospitalCreate,
    store: EntityStore = Depends(get_store),
):
    return create_hospital(store, hospital)


@router.patch("/{hospital_id}", response_model=HospitalModel)
async def update_hospital_route(
    hospital_id: int,
    hospital_update: HospitalUpdate,
    store: EntityStore = Depends(get_store),
):
    hospital = update_hospital(store, hospital_id, hospital_update)
    if not hospital:
        raise HTTPException(status_code=404, detail="Hospital not found")
    return hospital
