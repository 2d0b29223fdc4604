from fastapi import APIRouter, Depends, HTTPException, status
import logging

from medportal.db.session import get_store
from medportal.db.store import EntityStore
from medportal.routes.auth.services import authenticate_user, register_user
from medportal.schemas.shared import UserOut
from medportal.schemas.user import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: RegisterRequest,
    store: EntityStore = Depends(get_store),
):
    return register_user(store, user_data)


@router.post("/login", response_model=UserOut)
async def login(
    login_data: LoginRequest,
    store: EntityStore = Depends(get_store),
):
    user = authenticate_user(store, login_data)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    return user
