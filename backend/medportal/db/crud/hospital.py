import logging
from typing import List, Optional

from medportal.config.constants import EntityKind
from medportal.db.models.hospital import HospitalModel
from medportal.db.store import EntityStore
from medportal.schemas.hospital import HospitalCreate, HospitalUpdate

logger = logging.getLogger(__name__)


def get_hospital(store: EntityStore, hospital_id: int) -> Optional[HospitalModel]:
    return store.get(EntityKind.HOSPITAL, hospital_id)


def get_hospitals(store: EntityStore) -> List[HospitalModel]:
    return store.all(EntityKind.HOSPITAL)


def create_hospital(store: EntityStore, data: HospitalCreate) -> HospitalModel:
    hospital = store.insert(EntityKind.HOSPITAL, data.model_dump())
    logger.info(f"CRUD: Created hospital id={hospital.id} name='{hospital.name}'")
    return hospital


def update_hospital(
    store: EntityStore, hospital_id: int, data: HospitalUpdate
) -> Optional[HospitalModel]:
    hospital = store.update(EntityKind.HOSPITAL, hospital_id, data.changes())
    if hospital is None:
        logger.warning(f"CRUD: Update failed, hospital {hospital_id} not found")
    return hospital
