from typing import Optional

from pydantic import Field

from medportal.config.constants import DEFAULT_PAYMENT_STATUS
from medportal.schemas.shared import CamelModel, PatchModel, PaymentStatus


class PaymentCreate(CamelModel):
    patient_id: int
    appointment_id: int
    amount: int = Field(ge=0, description="Amount in cents")
    status: PaymentStatus = DEFAULT_PAYMENT_STATUS
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None


class PaymentUpdate(PatchModel):
    amount: int = Field(default=None, ge=0)
    status: PaymentStatus = None
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None
