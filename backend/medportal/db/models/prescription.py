from typing import Optional

from medportal.db.base import Base


class PrescriptionModel(Base):
    patient_id: int
    doctor_id: int
    medication_name: str
    dosage: str
    frequency: str
    start_date: str
    end_date: Optional[str] = None
    instructions: Optional[str] = None
    status: str = "active"  # active, completed, cancelled
