"""Engine and session wiring for the artbase post store.

PostgreSQL in deployment, a SQLite file under test. SQLite connections are
opened with ``check_same_thread=False`` because the test client serves
requests from a worker thread.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Generator

from sqlalchemy import create_engine, func, select
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import get_settings

logger = logging.getLogger(__name__)


def _build_engine(database_url: str) -> Engine:
    connect_args: dict[str, object] = {}
    if make_url(database_url).get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    return create_engine(database_url, pool_pre_ping=True, future=True, connect_args=connect_args)


engine: Engine = _build_engine(get_settings().database_url)

SessionLocal = sessionmaker(bind=engine, autoflush=False, future=True, expire_on_commit=False)

Base = declarative_base()


def get_session() -> Generator[Session, None, None]:
    """Request-scoped session for route dependencies."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def database_time(db: Session) -> datetime:
    """The database server's clock, used by the health check."""
    return db.scalar(select(func.current_timestamp()))


def init_db() -> None:
    """Create the ``users`` and ``posts`` tables when they are missing."""
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Post store schema ready on %s", engine.url.get_backend_name())


__all__ = ["Base", "SessionLocal", "database_time", "engine", "get_session", "init_db"]
