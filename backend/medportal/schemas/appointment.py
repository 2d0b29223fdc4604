from typing import Optional

from pydantic import Field

from medportal.config.constants import (
    DEFAULT_APPOINTMENT_DURATION,
    DEFAULT_APPOINTMENT_STATUS,
    DEFAULT_APPOINTMENT_TYPE,
)
from medportal.schemas.shared import (
    AppointmentStatus,
    AppointmentType,
    CamelModel,
    PatchModel,
)


class AppointmentCreate(CamelModel):
    patient_id: int
    doctor_id: int
    date: str
    time: str
    duration: int = Field(default=DEFAULT_APPOINTMENT_DURATION, gt=0)
    status: AppointmentStatus = DEFAULT_APPOINTMENT_STATUS
    type: AppointmentType = DEFAULT_APPOINTMENT_TYPE
    notes: Optional[str] = None


class AppointmentUpdate(PatchModel):
    patient_id: int = None
    doctor_id: int = None
    date: str = None
    time: str = None
    duration: int = Field(default=None, gt=0)
    status: AppointmentStatus = None
    type: AppointmentType = None
    notes: Optional[str] = None
