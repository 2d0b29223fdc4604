from fastapi import APIRouter, Depends
from typing import List

from medportal.config.constants import Role
from medportal.db.session import get_store
from medportal.db.store import EntityStore
from medportal.db.crud.user import get_users_by_role
from medportal.schemas.shared import UserOut

router = APIRouter(prefix="/doctors", tags=["doctors"])


@router.get("", response_model=List[UserOut])
async def list_doctors_route(store: EntityStore = Depends(get_store)):
    """Every user with the doctor role (password hashes are never included)"""
    return get_users_by_role(store, Role.DOCTOR.value)
