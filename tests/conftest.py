import os
import uuid

# Keep the application's own startup off disk before it is imported.
os.environ.setdefault("USER_STORE", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from users_api.database import Base, make_session_factory  # noqa: E402
from users_api.dependencies import get_user_service  # noqa: E402
from users_api.main import app  # noqa: E402
from users_api.models import User, UserRecord  # noqa: E402
from users_api.services.memory import InMemoryUserService  # noqa: E402
from users_api.services.sql import SqlUserService  # noqa: E402

# In-memory SQLite database shared across connections via StaticPool.
TEST_DATABASE_URL = "sqlite://"


engine_test = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = make_session_factory(engine_test)


@pytest.fixture()
def sql_user_service():
    """SQL-backed service over a schema recreated for every test."""
    Base.metadata.drop_all(bind=engine_test)
    Base.metadata.create_all(bind=engine_test)
    return SqlUserService(TestingSessionLocal)


@pytest.fixture()
def memory_user_service():
    return InMemoryUserService()


@pytest.fixture()
def client(sql_user_service):
    """TestClient whose requests are served by the test SQL service.

    The application's ``get_user_service`` dependency is overridden so
    nothing reaches the service built at startup.
    """
    app.dependency_overrides[get_user_service] = lambda: sql_user_service

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture()
def user_factory(sql_user_service):
    """Factory fixture that creates users directly in the test database.

    Useful when a test needs pre-existing data without going through the
    HTTP API or the service.
    """

    def _create_user(full_name: str) -> User:
        user = User(id=uuid.uuid4(), full_name=full_name)
        with TestingSessionLocal() as db:
            db.add(UserRecord.from_entity(user))
            db.commit()
        return user

    return _create_user
