from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from autorent.infra.db.config import database_url, is_sqlite

# Lazy initialization - only create engine/session when needed
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def build_engine(url: str) -> Engine:
    """
    Create an engine for the given URL.

    Server databases get a bounded connection pool (pool_size + max_overflow
    connections at most, health-checked and recycled hourly). SQLite keeps
    SQLAlchemy's default pool since it does not accept those options.
    """
    options: dict[str, Any] = {"future": True}
    if not is_sqlite(url):
        options.update(
            pool_size=5,
            max_overflow=10,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    return create_engine(url, **options)


def get_engine() -> Engine:
    """Get or create the database engine (lazy initialization)."""
    global _engine
    if _engine is None:
        _engine = build_engine(database_url())
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory (lazy initialization)."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


@contextmanager
def get_session() -> Iterator[Session]:
    """Get a database session with automatic commit/rollback."""
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
