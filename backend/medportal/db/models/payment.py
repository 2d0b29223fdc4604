from typing import Optional

from medportal.db.base import Base


class PaymentModel(Base):
    patient_id: int
    appointment_id: int
    amount: int  # in cents
    status: str = "pending"  # pending, completed, failed, refunded
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None
