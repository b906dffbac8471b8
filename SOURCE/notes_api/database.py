"""
Database utilities for initializing SQLAlchemy sessions and metadata.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import scoped_session, sessionmaker


engine: Optional[Engine] = None
SessionLocal = scoped_session(sessionmaker(autoflush=False))


def init_engine(database_url: str, echo: bool = False) -> Engine:
    """Bind the session factory to a new engine for ``database_url``."""
    global engine
    if engine is not None:
        SessionLocal.remove()
        engine.dispose()
    engine = create_engine(database_url, echo=echo)
    SessionLocal.configure(bind=engine)
    return engine


@contextmanager
def session_scope() -> Iterator[scoped_session]:
    """
    Provide a transactional scope around a series of operations.
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


__all__ = ["engine", "SessionLocal", "init_engine", "session_scope"]
