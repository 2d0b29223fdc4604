from __future__ import annotations
from typing import Annotated, Optional

from pydantic import EmailStr, Field

from medportal.schemas.shared import CamelModel, PatchModel, RoleName


class RegisterRequest(CamelModel):
    username: Annotated[str, Field(min_length=3, max_length=64)]
    password: Annotated[str, Field(min_length=8, max_length=128)]
    first_name: Annotated[str, Field(min_length=1)]
    last_name: Annotated[str, Field(min_length=1)]
    email: EmailStr
    phone: Optional[str] = None
    dob: Optional[str] = None
    role: RoleName = "patient"
    specialty: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None


class LoginRequest(CamelModel):
    username: str
    password: str


class UserUpdate(PatchModel):
    first_name: Annotated[str, Field(min_length=1)] = None
    last_name: Annotated[str, Field(min_length=1)] = None
    email: EmailStr = None
    phone: Optional[str] = None
    dob: Optional[str] = None
    specialty: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
