# exercise_tracker/db/engine.py
"""
Process-wide SQLAlchemy engine.

init_db() runs once at startup and never raises: a store that cannot be
reached is logged, and requests then fail at call time with DatabaseError.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from exercise_tracker.core.errors import DatabaseError
from exercise_tracker.db.schema import metadata

logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None


def init_db(database_url: str, echo: bool = False) -> Optional[Engine]:
    global _engine
    dispose_db()

    try:
        # echo=True if you want to see SQL printed in the terminal
        _engine = create_engine(database_url, echo=echo, pool_pre_ping=True)
        metadata.create_all(_engine)
        with _engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, ImportError) as e:
        # ImportError: the URL names a driver that is not installed
        logger.error("Database connection error: %s", e)
        return _engine

    logger.info("Database connected!")
    return _engine


def dispose_db() -> None:
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None


def get_engine() -> Engine:
    if _engine is None:
        raise DatabaseError("Database not initialized", "connect")
    return _engine


def _translate(e: SQLAlchemyError) -> DatabaseError:
    if isinstance(e, IntegrityError):
        return DatabaseError("Integrity constraint violated", "commit")
    if isinstance(e, OperationalError):
        return DatabaseError("Connection or operational error", "execute")
    return DatabaseError("Database operation failed", "query")


@contextmanager
def connection() -> Iterator[Connection]:
    """Read-only connection; SQLAlchemy errors surface as DatabaseError."""
    try:
        with get_engine().connect() as conn:
            yield conn
    except SQLAlchemyError as e:
        logger.error("DB error: %s", e)
        raise _translate(e) from e


@contextmanager
def transaction() -> Iterator[Connection]:
    """Connection inside BEGIN; commits on success, rolls back on error."""
    try:
        with get_engine().begin() as conn:
            yield conn
    except SQLAlchemyError as e:
        logger.error("DB error: %s", e)
        raise _translate(e) from e


def ping() -> bool:
    try:
        with connection() as conn:
            conn.execute(text("SELECT 1"))
    except DatabaseError:
        return False
    return True
