import asyncio
import logging
import uuid
from typing import Dict, Iterable, List

from ..models import ABSENT, Found, User, UserLookup
from .base import UserService

logger = logging.getLogger(__name__)


class InMemoryUserService(UserService):
    """Keeps users in a dict for the lifetime of the process.

    ``get_all`` returns users in insertion order.
    """

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: Dict[uuid.UUID, User] = {user.id: user for user in users}
        self._lock = asyncio.Lock()

    async def get_by_id(self, user_id: uuid.UUID) -> UserLookup:
        user = self._users.get(user_id)
        if user is None:
            return ABSENT
        return Found(user)

    async def get_all(self) -> List[User]:
        return list(self._users.values())

    async def create(self, user: User) -> bool:
        async with self._lock:
            if user.id in self._users:
                logger.warning("Refusing to create user %s: id already taken", user.id)
                return False
            self._users[user.id] = user
        return True

    async def delete_by_id(self, user_id: uuid.UUID) -> bool:
        async with self._lock:
            return self._users.pop(user_id, None) is not None
