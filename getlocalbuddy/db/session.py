# File: getlocalbuddy/db/session.py

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from getlocalbuddy.models.base import Base

logger = logging.getLogger(__name__)


class Database:
    """
    The process-wide persistence gateway.

    Owns one Engine (and therefore one connection pool) plus the session
    factory bound to it. Built once at startup and handed to the app; request
    handlers only ever borrow sessions from it.
    """

    def __init__(self, url: str, echo: bool = False):
        self.engine: Engine = create_engine(url, echo=echo, **self._engine_options(url))
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @staticmethod
    def _engine_options(url: str) -> dict:
        if not url.startswith("sqlite"):
            return {"pool_pre_ping": True}

        options: dict = {"connect_args": {"check_same_thread": False}}
        # An in-memory database only lives as long as its single connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options

    def verify_connection(self) -> None:
        """Raise if the database cannot be reached."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        logger.info("Disposing database engine")
        self.engine.dispose()
