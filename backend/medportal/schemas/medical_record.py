from typing import Optional

from medportal.schemas.shared import CamelModel


class MedicalRecordCreate(CamelModel):
    patient_id: int
    doctor_id: int
    record_type: str
    title: str
    description: str
    date: str
    file_url: Optional[str] = None
