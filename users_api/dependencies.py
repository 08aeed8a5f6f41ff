import logging

from fastapi import Depends, Request

from .controllers import UserController
from .database import Base, SessionLocal, engine
from .services.base import UserService
from .services.memory import InMemoryUserService
from .services.sql import SqlUserService

logger = logging.getLogger(__name__)


def build_user_service(store: str) -> UserService:
    """Create the service backing the API for the configured store."""
    if store == "memory":
        logger.info("Using in-memory user store")
        return InMemoryUserService()

    Base.metadata.create_all(bind=engine)
    logger.info("Using SQL user store at %s", engine.url.render_as_string(hide_password=True))
    return SqlUserService(SessionLocal)


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_user_controller(
    user_service: UserService = Depends(get_user_service),
) -> UserController:
    return UserController(user_service)
