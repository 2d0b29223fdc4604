from typing import Optional

from medportal.db.base import Base


class MedicalRecordModel(Base):
    patient_id: int
    doctor_id: int
    record_type: str  # consultation, lab_result, prescription, ...
    title: str
    description: str
    date: str
    file_url: Optional[str] = None
