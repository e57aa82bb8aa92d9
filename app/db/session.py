"""SQLAlchemy engine, session factory and the request-scoped session dependency."""

from __future__ import annotations

from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from ..core.config import settings


def build_engine(db_url: str) -> Engine:
    """Create an engine with the SQLite tweaks the API needs.

    FastAPI runs sync endpoints in a thread pool, so SQLite connections must be
    shareable across threads. An in-memory database only exists for the life of
    one connection, hence ``StaticPool`` keeps a single connection around.
    """

    kwargs: dict[str, object] = {}
    if db_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if db_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(db_url, **kwargs)


# One engine (and connection pool) per process, swapped only by ``configure_engine``.
engine = build_engine(settings.DB_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
_engine_url = settings.DB_URL
# Parent class for every model in app/models.
Base = declarative_base()


def configure_engine(db_url: str) -> Engine:
    """Point the process engine and ``SessionLocal`` at ``db_url``.

    Calling it again with the current URL returns the existing engine.
    """

    global engine, _engine_url
    if db_url != _engine_url:
        previous = engine
        engine = build_engine(db_url)
        _engine_url = db_url
        SessionLocal.configure(bind=engine)
        previous.dispose()
    return engine


def get_db() -> Iterator[Session]:
    """FastAPI dependency that yields a session and guarantees cleanup."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
