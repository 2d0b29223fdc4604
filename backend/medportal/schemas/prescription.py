from typing import Optional

from medportal.config.constants import DEFAULT_PRESCRIPTION_STATUS
from medportal.schemas.shared import CamelModel, PatchModel, PrescriptionStatus


class PrescriptionCreate(CamelModel):
    patient_id: int
    doctor_id: int
    medication_name: str
    dosage: str
    frequency: str
    start_date: str
    end_date: Optional[str] = None
    instructions: Optional[str] = None
    status: PrescriptionStatus = DEFAULT_PRESCRIPTION_STATUS


class PrescriptionUpdate(PatchModel):
    medication_name: str = None
    dosage: str = None
    frequency: str = None
    start_date: str = None
    end_date: Optional[str] = None
    instructions: Optional[str] = None
    status: PrescriptionStatus = None
