# medportal/db/models/appointment.py
from typing import Optional

from medportal.db.base import Base


class AppointmentModel(Base):
    patient_id: int
    doctor_id: int
    date: str  # ISO date, e.g. 2024-06-20
    time: str  # e.g. 09:00
    duration: int = 30  # minutes
    status: str = "pending"  # pending, confirmed, cancelled, completed
    type: str = "in-person"  # in-person, video, phone
    notes: Optional[str] = None
