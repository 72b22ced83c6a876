from __future__ import annotations

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, status

from studybot.core.config import settings
from studybot.core.db.schemas.auth import User
from studybot.modules.auth import optional_current_user
from studybot.modules.study.pipeline import StudyPipeline


@lru_cache(maxsize=1)
def get_pipeline() -> StudyPipeline:
    """Share one stateless pipeline across study routes."""
    return StudyPipeline()


async def require_user(
    user: Optional[User] = Depends(optional_current_user),
) -> Optional[User]:
    """Gate study routes behind a bearer token when AUTH_REQUIRED is on.

    With the gate off, anonymous callers pass through and the login check is
    left to the client.
    """
    if settings.auth.required and user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return user
