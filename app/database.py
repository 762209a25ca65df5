from contextlib import contextmanager
from typing import Iterator
from fastapi import Request
from sqlalchemy import create_engine, Column, DateTime, func
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session
from app.core.logging_config import logger

# Largest value an Integer primary/foreign key column holds
MAX_INTEGER_ID = 2**31 - 1

class Base(DeclarativeBase):
    pass


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # SQLite uses its own pool classes, which reject the sizing options below
        return {"future": True}
    return {
        "pool_pre_ping": True,   # Test connections before using
        "pool_size": 10,         # Base connection pool size
        "max_overflow": 20,      # Max connections beyond pool_size
        "pool_timeout": 30,      # Timeout for getting connection (seconds)
        "pool_recycle": 3600,    # Recycle connections after 1 hour
        "echo": False,           # Set to True for debugging SQL logs
        "future": True,
    }


class Database:
    """
    Explicit handle on the persistent store.

    Built once by the application factory and stored on ``app.state``.
    Nothing in the authorization core reaches for a module-level engine;
    every collaborator receives a Session opened from this handle.
    """

    def __init__(self, url: str, **engine_kwargs):
        options = _engine_options(url)
        options.update(engine_kwargs)
        self.url = url
        self.engine = create_engine(url, **options)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            future=True,
        )
        logger.info(f"Database engine configured: dialect={self.engine.dialect.name}")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Open a session and always release it, for scripts and tests."""
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request):
    """One session per request, released when the request finishes."""
    database: Database = request.app.state.database
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
