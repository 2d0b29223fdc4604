from fastapi import APIRouter, Depends, HTTPException, status

from medportal.db.session import get_store
from medportal.db.store import EntityStore
from medportal.db.crud.user import get_user, get_user_by_email, update_user
from medportal.schemas.shared import UserOut
from medportal.schemas.user import UserUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=UserOut)
async def get_user_route(
    user_id: int,
    store: EntityStore = Depends(get_store),
):
    user = get_user(store, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.patch("/{user_id}", response_model=UserOut)
async def update_user_route(
    user_id: int,
    user_update: UserUpdate,
    store: EntityStore = Depends(get_store),
):
    """Profile changes from the settings page. Username, role and password are not editable here."""
    if user_update.email is not None:
        owner = get_user_by_email(store, user_update.email)
        if owner and owner.id != user_id:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

    user = update_user(store, user_id, user_update)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
