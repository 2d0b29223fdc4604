import logging
from typing import Optional

from fastapi import HTTPException, status

from medportal.core.auth import verify_password
from medportal.db.crud.user import create_user, get_user_by_email, get_user_by_username
from medportal.db.models.user import UserModel
from medportal.db.store import EntityStore
from medportal.schemas.user import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)


def register_user(store: EntityStore, data: RegisterRequest) -> UserModel:
    """Create the account after checking username and email are free."""
    if get_user_by_username(store, data.username):
        logger.info(f"Registration rejected, username '{data.username}' taken")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists")
    if get_user_by_email(store, data.email):
        logger.info(f"Registration rejected, email '{data.email}' taken")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")
    return create_user(store, data)


def authenticate_user(store: EntityStore, login_data: LoginRequest) -> Optional[UserModel]:
    user = get_user_by_username(store, login_data.username)
    if not user:
        return None
    if not verify_password(login_data.password, user.password):
        return None
    return user
