from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from medportal.db.session import get_store
from medportal.db.store import EntityStore
from medportal.db.models.payment import PaymentModel
from medportal.db.crud.payment import (
    create_payment,
    get_payments_by_patient,
    update_payment,
)
from medportal.routes.params import require_param
from medportal.schemas.payment import PaymentCreate, PaymentUpdate

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("", response_model=List[PaymentModel])
async def get_payments_route(
    patient_id: Optional[int] = Query(None, alias="patientId"),
    store: EntityStore = Depends(get_store),
):
    patient_id = require_param("patientId", patient_id)
    return get_payments_by_patient(store, patient_id)


@router.post("", response_model=PaymentModel, status_code=201)
async def create_payment_route(
    payment: PaymentCreate,
    store: EntityStore = Depends(get_store),
):
    return create_payment(store, payment)


@router.patch("/{payment_id}", response_model=PaymentModel)
async def update_payment_route(
    payment_id: int,
    payment_update: PaymentUpdate,
    store: EntityStore = Depends(get_store),
):
    """Record the outcome of a charge (completed, failed, refunded)"""
    payment = update_payment(store, payment_id, payment_update)
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment
