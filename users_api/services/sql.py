import logging
import uuid
from typing import List

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ..models import ABSENT, Found, User, UserLookup, UserRecord
from .base import UserService

logger = logging.getLogger(__name__)


class SqlUserService(UserService):
    """Stores users in the ``users`` table through SQLAlchemy.

    Sessions are synchronous, so each operation runs in the threadpool
    with a session of its own. ``get_all`` orders by creation time.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    async def get_by_id(self, user_id: uuid.UUID) -> UserLookup:
        return await run_in_threadpool(self._get_by_id, user_id)

    async def get_all(self) -> List[User]:
        return await run_in_threadpool(self._get_all)

    async def create(self, user: User) -> bool:
        return await run_in_threadpool(self._create, user)

    async def delete_by_id(self, user_id: uuid.UUID) -> bool:
        return await run_in_threadpool(self._delete_by_id, user_id)

    def _get_by_id(self, user_id: uuid.UUID) -> UserLookup:
        with self._session_factory() as db:
            record = db.get(UserRecord, str(user_id))
            if record is None:
                return ABSENT
            return Found(record.to_entity())

    def _get_all(self) -> List[User]:
        with self._session_factory() as db:
            stmt = select(UserRecord).order_by(UserRecord.created_at, UserRecord.id)
            return [record.to_entity() for record in db.execute(stmt).scalars()]

    def _create(self, user: User) -> bool:
        with self._session_factory() as db:
            db.add(UserRecord.from_entity(user))
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                logger.warning("Refusing to create user %s: id already taken", user.id)
                return False
            except SQLAlchemyError:
                db.rollback()
                raise
        return True

    def _delete_by_id(self, user_id: uuid.UUID) -> bool:
        with self._session_factory() as db:
            record = db.get(UserRecord, str(user_id))
            if record is None:
                return False

            db.delete(record)
            try:
                db.commit()
            except SQLAlchemyError:
                db.rollback()
                raise
        return True
