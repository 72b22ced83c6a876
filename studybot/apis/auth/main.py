from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from studybot.core.config import settings
from studybot.core.db.schemas.auth import User
from studybot.modules.auth import (
    fastapi_users,
    auth_backend,
    optional_current_user,
    UserRead,
    UserCreate,
    UserUpdate,
)


router = APIRouter()

PREFIX = f"/{settings.app.api_prefix}"


class SessionResponse(BaseModel):
    authenticated: bool
    email: Optional[str] = None


@router.get(f"{PREFIX}/auth/session", response_model=SessionResponse, tags=["auth"])
async def session_status(
    user: Optional[User] = Depends(optional_current_user),
) -> SessionResponse:
    """Report whether the bearer token on this request belongs to an active user."""
    if user is None:
        return SessionResponse(authenticated=False)
    return SessionResponse(authenticated=True, email=str(user.email))


# login / logout
router.include_router(
    fastapi_users.get_auth_router(auth_backend),
    prefix=f"{PREFIX}/auth/jwt",
    tags=["auth"],
)

# signup
router.include_router(
    fastapi_users.get_register_router(UserRead, UserCreate),
    prefix=f"{PREFIX}/auth",
    tags=["auth"],
)

router.include_router(
    fastapi_users.get_users_router(UserRead, UserUpdate),
    prefix=f"{PREFIX}/users",
    tags=["users"],
)
