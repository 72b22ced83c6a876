from __future__ import annotations

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from fastapi_users_db_sqlalchemy import SQLAlchemyBaseUserTable

from studybot.core.db.base import Base


class User(SQLAlchemyBaseUserTable[int], Base):
    """Account row; email and hashed password columns come from fastapi-users."""

    __tablename__ = "users"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)


__all__ = ["User"]
