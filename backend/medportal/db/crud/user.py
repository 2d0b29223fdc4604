# medportal/db/crud/user.py
import logging
from typing import List, Optional

from medportal.config.constants import EntityKind
from medportal.core.auth import get_password_hash
from medportal.db.models.user import UserModel
from medportal.db.store import EntityStore
from medportal.schemas.user import RegisterRequest, UserUpdate

logger = logging.getLogger(__name__)


def get_user(store: EntityStore, user_id: int) -> Optional[UserModel]:
    return store.get(EntityKind.USER, user_id)


def get_user_by_username(store: EntityStore, username: str) -> Optional[UserModel]:
    """First user with this username, or None. Usernames are unique."""
    matches = store.filter(EntityKind.USER, lambda user: user.username == username)
    return matches[0] if matches else None


def get_user_by_email(store: EntityStore, email: str) -> Optional[UserModel]:
    """First user with this email, or None. Emails are unique."""
    matches = store.filter(EntityKind.USER, lambda user: user.email == email)
    return matches[0] if matches else None


def get_users_by_role(store: EntityStore, role: str) -> List[UserModel]:
    """Every user whose role equals ``role``, in insertion order."""
    return store.filter(EntityKind.USER, lambda user: user.role == role)


def create_user(store: EntityStore, data: RegisterRequest) -> UserModel:
    """
    Hash the password and insert the user.

    Uniqueness of username and email is checked by the caller, which knows how
    to report the conflict.
    """
    fields = data.model_dump()
    fields["password"] = get_password_hash(data.password)
    user = store.insert(EntityKind.USER, fields)
    logger.info(f"CRUD: Created user id={user.id} username={user.username} role={user.role}")
    return user


def insert_user_record(store: EntityStore, **fields) -> UserModel:
    """Insert a user whose password is already hashed (sample data, imports)."""
    return store.insert(EntityKind.USER, fields)


def update_user(store: EntityStore, user_id: int, data: UserUpdate) -> Optional[UserModel]:
    changes = data.changes()
    user = store.update(EntityKind.USER, user_id, changes)
    if user is None:
        logger.warning(f"CRUD: Update failed, user {user_id} not found")
        return None
    logger.info(f"CRUD: Updated user id={user_id} fields={sorted(changes)}")
    return user
