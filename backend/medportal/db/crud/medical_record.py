import logging
from typing import List, Optional

from medportal.config.constants import EntityKind
from medportal.db.models.medical_record import MedicalRecordModel
from medportal.db.store import EntityStore
from medportal.schemas.medical_record import MedicalRecordCreate

logger = logging.getLogger(__name__)


def get_medical_record(store: EntityStore, record_id: int) -> Optional[MedicalRecordModel]:
    return store.get(EntityKind.MEDICAL_RECORD, record_id)


def get_medical_records_by_patient(
    store: EntityStore, patient_id: int
) -> List[MedicalRecordModel]:
    return store.filter(
        EntityKind.MEDICAL_RECORD, lambda record: record.patient_id == patient_id
    )


def create_medical_record(store: EntityStore, data: MedicalRecordCreate) -> MedicalRecordModel:
    record = store.insert(EntityKind.MEDICAL_RECORD, data.model_dump())
    logger.info(
        f"CRUD: Created medical record id={record.id} type='{record.record_type}' "
        f"for patient_id={record.patient_id}"
    )
    return record
