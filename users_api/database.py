from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import settings

Base = declarative_base()


def make_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # Sessions are used from the threadpool, not the creating thread.
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args)


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)


engine = make_engine(settings.database_url)

SessionLocal = make_session_factory(engine)
