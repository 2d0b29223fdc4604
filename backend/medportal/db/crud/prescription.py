import logging
from typing import List, Optional

from medportal.config.constants import EntityKind
from medportal.db.models.prescription import PrescriptionModel
from medportal.db.store import EntityStore
from medportal.schemas.prescription import PrescriptionCreate, PrescriptionUpdate

logger = logging.getLogger(__name__)


def get_prescription(store: EntityStore, prescription_id: int) -> Optional[PrescriptionModel]:
    return store.get(EntityKind.PRESCRIPTION, prescription_id)


def get_prescriptions_by_patient(store: EntityStore, patient_id: int) -> List[PrescriptionModel]:
    return store.filter(
        EntityKind.PRESCRIPTION, lambda rx: rx.patient_id == patient_id
    )


def get_prescriptions_by_doctor(store: EntityStore, doctor_id: int) -> List[PrescriptionModel]:
    return store.filter(
        EntityKind.PRESCRIPTION, lambda rx: rx.doctor_id == doctor_id
    )


def create_prescription(store: EntityStore, data: PrescriptionCreate) -> PrescriptionModel:
    prescription = store.insert(EntityKind.PRESCRIPTION, data.model_dump())
    logger.info(
        f"CRUD: Created prescription id={prescription.id} ({prescription.medication_name}) "
        f"for patient_id={prescription.patient_id}"
    )
    return prescription


def update_prescription(
    store: EntityStore, prescription_id: int, data: PrescriptionUpdate
) -> Optional[PrescriptionModel]:
    changes = data.changes()
    prescription = store.update(EntityKind.PRESCRIPTION, prescription_id, changes)
    if prescription is None:
        logger.warning(f"CRUD: Update failed, prescription {prescription_id} not found")
        return None
    logger.info(f"CRUD: Updated prescription id={prescription_id} fields={sorted(changes)}")
    return prescription
