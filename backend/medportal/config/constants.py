from enum import Enum

class EntityKind(str, Enum):
    USER = "user"
    HOSPITAL = "hospital"
    APPOINTMENT = "appointment"
    MEDICAL_RECORD = "medical_record"
    PRESCRIPTION = "prescription"
    MESSAGE = "message"
    PAYMENT = "payment"

class Role(str, Enum):
    PATIENT = "patient"
    DOCTOR = "doctor"
    ADMIN = "admin"

# Defaults applied when a create payload omits the field
DEFAULT_APPOINTMENT_DURATION = 30
DEFAULT_APPOINTMENT_STATUS = "pending"
DEFAULT_APPOINTMENT_TYPE = "in-person"
DEFAULT_PRESCRIPTION_STATUS = "active"
DEFAULT_PAYMENT_STATUS = "pending"
