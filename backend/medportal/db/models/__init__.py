from medportal.config.constants import EntityKind

from .user import UserModel
from .hospital import HospitalModel
from .appointment import AppointmentModel
from .medical_record import MedicalRecordModel
from .prescription import PrescriptionModel
from .message import MessageModel
from .payment import PaymentModel

# Record class stored for each entity kind
MODELS = {
    EntityKind.USER: UserModel,
    EntityKind.HOSPITAL: HospitalModel,
    EntityKind.APPOINTMENT: AppointmentModel,
    EntityKind.MEDICAL_RECORD: MedicalRecordModel,
    EntityKind.PRESCRIPTION: PrescriptionModel,
    EntityKind.MESSAGE: MessageModel,
    EntityKind.PAYMENT: PaymentModel,
}

__all__ = [
    "MODELS",
    "UserModel",
    "HospitalModel",
    "AppointmentModel",
    "MedicalRecordModel",
    "PrescriptionModel",
    "MessageModel",
    "PaymentModel",
]
