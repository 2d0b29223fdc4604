# medportal/db/models/user.py
from typing import Optional

from medportal.db.base import Base


class UserModel(Base):
    username: str
    password: str  # bcrypt hash, never the plain text
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    dob: Optional[str] = None
    role: str = "patient"  # 'patient', 'doctor', 'admin'
    # doctors only
    specialty: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
