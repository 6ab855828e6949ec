# /app/db/database.py

"""
Engine and session lifecycle.

A `Database` is built once at process start (see the lifespan in
`app/main.py`), handed to request handlers through `app.state`, and
disposed at shutdown. Tests build their own instance against in-memory
SQLite and inject it the same way.
"""

import logging
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..core.logging_config import mask_database_url

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ships with foreign key enforcement off.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    def __init__(self, url: str, echo: bool = False):
        self.url = url
        engine_args = {}
        if url.startswith("sqlite"):
            # The 'check_same_thread' argument is only needed for SQLite.
            engine_args["connect_args"] = {"check_same_thread": False}
            if ":memory:" in url or url == "sqlite://":
                # One shared connection, so every session sees the same in-memory database.
                engine_args["poolclass"] = StaticPool
        self.engine: Engine = create_engine(url, echo=echo, **engine_args)
        if url.startswith("sqlite"):
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        logger.info("Database engine created for %s", mask_database_url(url))

    def create_all(self) -> None:
        """Creates any missing tables from the model registry."""
        from .base import Base
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database engine disposed")


# Dependency to get a DB session. This will be used in our API routers.
def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
