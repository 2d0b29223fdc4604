# medportal/schemas/shared.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

RoleName = Literal["patient", "doctor", "admin"]
AppointmentStatus = Literal["pending", "confirmed", "cancelled", "completed"]
AppointmentType = Literal["in-person", "video", "phone"]
PrescriptionStatus = Literal["active", "completed", "cancelled"]
PaymentStatus = Literal["pending", "completed", "failed", "refunded"]


class CamelModel(BaseModel):
    """
    Request body base: camelCase on the wire, unknown keys (id, createdAt, ...) ignored.

    Strict: "1", 1.0 or "yes" are rejected where an int or bool is expected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        strict=True,
    )


class PatchModel(CamelModel):
    """
    Base for partial updates.

    Every field defaults to None so it can be omitted, but fields that are
    mandatory on the record are typed without Optional: an explicit null is
    rejected instead of wiping the stored value. Only fields the client sent
    are applied (``model_dump(exclude_unset=True)``).
    """

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class UserOut(CamelModel):
    id: int
    username: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    dob: Optional[str] = None
    role: RoleName
    specialty: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    created_at: datetime
