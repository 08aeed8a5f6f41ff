"""Domain entity and persistence row for users.

``User`` is what the controller and services pass around. ``UserRecord``
is the SQLAlchemy table row the SQL-backed service stores it as; nothing
outside that service touches it.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Union

from sqlalchemy import Column, DateTime, String, Text

from .database import Base


@dataclass(frozen=True)
class User:
    id: uuid.UUID
    full_name: str


@dataclass(frozen=True)
class Found:
    """A by-id lookup that hit."""

    user: User


class Absent:
    """A by-id lookup that missed. Compare with ``is ABSENT``."""

    _instance: Absent | None = None

    def __new__(cls) -> Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent()

UserLookup = Union[Found, Absent]


class UserRecord(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True)
    full_name = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_entity(cls, user: User) -> UserRecord:
        return cls(id=str(user.id), full_name=user.full_name)

    def to_entity(self) -> User:
        return User(id=uuid.UUID(self.id), full_name=self.full_name)
