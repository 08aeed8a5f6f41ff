import uuid
from abc import ABC, abstractmethod
from typing import List

from ..models import User, UserLookup


class UserService(ABC):
    """Storage contract the request layer depends on.

    Every method is a coroutine and may be called concurrently with any
    other. Absence and rejection are reported as values, never raised:

    * ``get_by_id`` returns ``Found(user)`` or ``ABSENT``.
    * ``get_all`` returns a possibly empty list, in the order the
      implementation chooses.
    * ``create`` returns ``True`` iff the user was durably accepted and
      ``False`` for a domain-level refusal such as a duplicate id.
    * ``delete_by_id`` returns ``True`` iff a user with that id existed
      and was removed.

    Anything else that goes wrong (a dropped connection, a broken
    schema) is raised as an exception.
    """

    @abstractmethod
    async def get_by_id(self, user_id: uuid.UUID) -> UserLookup:
        ...

    @abstractmethod
    async def get_all(self) -> List[User]:
        ...

    @abstractmethod
    async def create(self, user: User) -> bool:
        ...

    @abstractmethod
    async def delete_by_id(self, user_id: uuid.UUID) -> bool:
        ...
