"""Database engine and session handling for the relational store."""
import logging
import os
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def _ensure_sqlite_directory(url) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    database = url.database
    if not database or database == ":memory:":
        return
    directory = os.path.dirname(os.path.abspath(database))
    os.makedirs(directory, exist_ok=True)


def database_location(url) -> str:
    """Human readable store location for startup logs."""
    url = make_url(url)
    if url.get_backend_name() == "sqlite" and url.database:
        return os.path.abspath(url.database)
    return url.render_as_string(hide_password=True)


class Database:
    """Owns the engine and session factory for one store.

    Built once by the application factory and kept on ``app.state``; request
    handlers reach it through :func:`get_db`.
    """

    def __init__(self, database_url: str, echo: bool = False):
        url = make_url(database_url)
        connect_args = {}
        if url.get_backend_name() == "sqlite":
            # FastAPI runs sync dependencies in a threadpool
            connect_args["check_same_thread"] = False

        self.url = url
        self.engine = create_engine(url, echo=echo, connect_args=connect_args)
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

    @property
    def location(self) -> str:
        return database_location(self.url)

    def create_all(self) -> None:
        """Create tables if they do not exist."""
        from roktokona import models  # noqa: F401

        if self.url.get_backend_name() == "sqlite":
            _ensure_sqlite_directory(self.url)
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()
