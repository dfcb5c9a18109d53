"""
db/connection.py
----------------
Manages the SQLAlchemy engine and the session factory bound to it.
SQLite files and in-memory databases get foreign-key enforcement;
server databases (PostgreSQL via psycopg2) get a sized connection pool.
"""

from typing import Optional

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from config import DATABASE_URL, DB_ECHO, DB_POOL_SIZE
from utils.logger import get_logger

logger = get_logger(__name__)

_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _is_in_memory(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def init_engine(url: Optional[str] = None, echo: bool = DB_ECHO, pool_size: int = DB_POOL_SIZE) -> Engine:
    """
    Initialize the database engine and session factory.

    Args:
        url: SQLAlchemy database URL. Defaults to ``config.DATABASE_URL``.
        echo: Log every SQL statement the engine emits.
        pool_size: Connections kept open for server databases.

    Returns:
        The process-wide Engine.

    Raises:
        sqlalchemy.exc.OperationalError: If the database is unreachable.
    """
    global _engine, _session_factory
    if _engine is not None:
        return _engine

    url = url or DATABASE_URL
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if _is_in_memory(url):
            # one shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=echo, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    else:
        engine = create_engine(url, echo=echo, pool_size=pool_size, pool_pre_ping=True)

    try:
        with engine.connect():
            pass
    except OperationalError as e:
        logger.error(f"Failed to connect to database: {e}")
        engine.dispose()
        raise

    _engine = engine
    _session_factory = sessionmaker(bind=engine, expire_on_commit=False)
    logger.info(f"Database engine initialized ({engine.url.render_as_string(hide_password=True)}).")
    return _engine


def get_engine() -> Engine:
    """
    Return the initialized engine.

    Raises:
        RuntimeError: If the engine has not been initialized.
    """
    if _engine is None:
        raise RuntimeError("Database engine not initialized. Call init_engine() first.")
    return _engine


def get_session() -> Session:
    """
    Open a new session on the engine.

    Raises:
        RuntimeError: If the engine has not been initialized.
    """
    if _session_factory is None:
        raise RuntimeError("Database engine not initialized. Call init_engine() first.")
    return _session_factory()


def release_session(session: Session) -> None:
    """Close a session, discarding anything it has not committed."""
    session.close()


def close_engine() -> None:
    """Dispose of the engine and every pooled connection."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None
        logger.info("Database engine closed.")
