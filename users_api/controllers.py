"""Request handling for the ``/users`` resource.

``UserController`` owns every decision the API makes: which status code
to answer with, whether there is a body, and where a freshly created
user can be fetched from. It only knows the abstract ``UserService``;
the concrete one is handed in when the application is wired up.

Handlers return an ``ActionResult`` rather than a Starlette response so
they can be exercised without an HTTP stack. ``routes.users`` renders it.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Callable, Dict, Optional

from .mappers import to_user_response, to_user_responses
from .models import Found, User
from .schemas import CreateUserRequest
from .services.base import UserService

logger = logging.getLogger(__name__)

# Route name the Location header of a 201 points at.
GET_USER_ROUTE = "get_user"


@dataclass(frozen=True)
class ActionResult:
    status_code: int
    value: Any = None
    route_name: Optional[str] = None
    route_values: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, value: Any = None) -> ActionResult:
        return cls(HTTPStatus.OK, value)

    @classmethod
    def created_at(cls, route_name: str, route_values: Dict[str, Any], value: Any) -> ActionResult:
        return cls(HTTPStatus.CREATED, value, route_name, route_values)

    @classmethod
    def not_found(cls) -> ActionResult:
        return cls(HTTPStatus.NOT_FOUND)

    @classmethod
    def bad_request(cls) -> ActionResult:
        return cls(HTTPStatus.BAD_REQUEST)


class UserController:
    def __init__(
        self,
        user_service: UserService,
        id_factory: Callable[[], uuid.UUID] = uuid.uuid4,
    ) -> None:
        self._user_service = user_service
        self._id_factory = id_factory

    async def get_by_id(self, user_id: uuid.UUID) -> ActionResult:
        lookup = await self._user_service.get_by_id(user_id)
        if not isinstance(lookup, Found):
            logger.debug("User %s not found", user_id)
            return ActionResult.not_found()
        return ActionResult.ok(to_user_response(lookup.user))

    async def get_all(self) -> ActionResult:
        users = await self._user_service.get_all()
        return ActionResult.ok(to_user_responses(users))

    async def create(self, request: CreateUserRequest) -> ActionResult:
        """Create a user under a freshly generated id.

        The id is generated here, before the service is called, and the
        response is mapped from the same ``User`` that was handed to the
        service rather than from a re-read.
        """
        user = User(id=self._id_factory(), full_name=request.full_name)

        created = await self._user_service.create(user)
        if not created:
            logger.info("User creation rejected by %s", type(self._user_service).__name__)
            return ActionResult.bad_request()

        logger.info("Created user %s", user.id)
        response = to_user_response(user)
        return ActionResult.created_at(GET_USER_ROUTE, {"user_id": response.id}, response)

    async def delete_by_id(self, user_id: uuid.UUID) -> ActionResult:
        deleted = await self._user_service.delete_by_id(user_id)
        if not deleted:
            logger.debug("User %s not found for deletion", user_id)
            return ActionResult.not_found()

        logger.info("Deleted user %s", user_id)
        return ActionResult.ok()
