from typing import Optional

from medportal.schemas.shared import CamelModel, PatchModel


class HospitalCreate(CamelModel):
    name: str
    address: str
    city: str
    state: str
    zip_code: str
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    image_url: Optional[str] = None


class HospitalUpdate(PatchModel):
    name: str = None
    address: str = None
    city: str = None
    state: str = None
    zip_code: str = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    image_url: Optional[str] = None
