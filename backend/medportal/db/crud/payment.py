import logging
from typing import List, Optional

from medportal.config.constants import EntityKind
from medportal.db.models.payment import PaymentModel
from medportal.db.store import EntityStore
from medportal.schemas.payment import PaymentCreate, PaymentUpdate

logger = logging.getLogger(__name__)


def get_payment(store: EntityStore, payment_id: int) -> Optional[PaymentModel]:
    return store.get(EntityKind.PAYMENT, payment_id)


def get_payments_by_patient(store: EntityStore, patient_id: int) -> List[PaymentModel]:
    return store.filter(
        EntityKind.PAYMENT, lambda payment: payment.patient_id == patient_id
    )


def create_payment(store: EntityStore, data: PaymentCreate) -> PaymentModel:
    payment = store.insert(EntityKind.PAYMENT, data.model_dump())
    logger.info(
        f"CRUD: Created payment id={payment.id} amount={payment.amount} "
        f"for appointment_id={payment.appointment_id}"
    )
    return payment


def update_payment(
    store: EntityStore, payment_id: int, data: PaymentUpdate
) -> Optional[PaymentModel]:
    changes = data.changes()
    payment = store.update(EntityKind.PAYMENT, payment_id, changes)
    if payment is None:
        logger.warning(f"CRUD: Update failed, payment {payment_id} not found")
        return None
    logger.info(f"CRUD: Updated payment id={payment_id} status={payment.status}")
    return payment
