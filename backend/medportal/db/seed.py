# medportal/db/seed.py
import logging
from functools import lru_cache
from typing import Any, Dict, List

from medportal.core.auth import get_password_hash
from medportal.db.crud.hospital import create_hospital
from medportal.db.crud.user import insert_user_record
from medportal.db.store import EntityStore
from medportal.schemas.hospital import HospitalCreate

logger = logging.getLogger(__name__)

# --- Configuration for Seed Data ---
COMMON_PASSWORD = "password"

SAMPLE_USERS: List[Dict[str, Any]] = [
    {
        "username": "admin",
        "first_name": "Admin",
        "last_name": "User",
        "email": "admin@medicare.com",
        "role": "admin",
        "phone": "555-123-4567",
        "dob": "1980-01-01",
    },
    {
        "username": "drsmith",
        "first_name": "John",
        "last_name": "Smith",
        "email": "dr.smith@medicare.com",
        "role": "doctor",
        "phone": "555-111-2222",
        "dob": "1975-05-15",
        "specialty": "Cardiology",
        "bio": "Dr. Smith is a board-certified cardiologist with over 15 years of experience in treating cardiovascular diseases.",
    },
    {
        "username": "drjones",
        "first_name": "Sarah",
        "last_name": "Jones",
        "email": "dr.jones@medicare.com",
        "role": "doctor",
        "phone": "555-333-4444",
        "dob": "1982-09-23",
        "specialty": "Pediatrics",
        "bio": "Dr. Jones specializes in pediatric care and has a passion for helping children maintain optimal health.",
    },
    {
        "username": "drwilliams",
        "first_name": "Michael",
        "last_name": "Williams",
        "email": "dr.williams@medicare.com",
        "role": "doctor",
        "phone": "555-555-6666",
        "dob": "1978-12-10",
        "specialty": "Orthopedics",
        "bio": "Dr. Williams is an orthopedic surgeon specializing in sports medicine and joint replacement surgery.",
    },
]

SAMPLE_HOSPITALS: List[Dict[str, Any]] = [
    {
        "name": "City General Hospital",
        "address": "123 Medical Blvd",
        "city": "Medical City",
        "state": "MC",
        "zip_code": "12345",
        "phone": "555-987-6543",
        "email": "info@citygeneral.com",
        "website": "www.citygeneral.com",
    },
    {
        "name": "Memorial Medical Center",
        "address": "456 Healthcare Ave",
        "city": "Medical City",
        "state": "MC",
        "zip_code": "12345",
        "phone": "555-456-7890",
        "email": "contact@memorialmed.com",
        "website": "www.memorialmed.com",
    },
]


@lru_cache(maxsize=1)
def common_password_hash() -> str:
    # bcrypt is slow on purpose; hash once per process
    return get_password_hash(COMMON_PASSWORD)


def seed_store(store: EntityStore) -> None:
    """Load the sample admin, doctors and hospitals into an empty store."""
    password_hash = common_password_hash()
    for user_data in SAMPLE_USERS:
        insert_user_record(store, password=password_hash, **user_data)
    for hospital_data in SAMPLE_HOSPITALS:
        create_hospital(store, HospitalCreate(**hospital_data))

    logger.info(
        f"Seeded {len(SAMPLE_USERS)} users and {len(SAMPLE_HOSPITALS)} hospitals"
    )
