import logging
from collections.abc import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from student_resume.app.core.config import get_settings

log = logging.getLogger(__name__)

# Created on first use so importing the app never opens a connection.
_engine: Engine | None = None
_read_session_factory: sessionmaker | None = None


def get_engine() -> Engine:
    """Get or create the engine for the student portal database.

    Returns:
        Engine: An engine whose connections run read-only transactions.

    Notes:
        1. Build the URL from settings on first use and reuse the engine afterwards.
        2. Ping pooled connections before use, since the portal database may restart underneath us.
        3. Mark every transaction read-only; this service only looks rows up.

    """
    global _engine
    if _engine is None:
        settings = get_settings()
        _msg = f"Creating read-only database engine for {settings.db_host}:{settings.db_port}/{settings.db_name}"
        log.debug(_msg)
        _engine = create_engine(
            str(settings.database_url),
            pool_pre_ping=True,
            execution_options={"postgresql_readonly": True},
        )
    return _engine


def get_read_session_factory() -> sessionmaker:
    """Get or create the factory for read sessions."""
    global _read_session_factory
    if _read_session_factory is None:
        _msg = "Creating read session factory"
        log.debug(_msg)
        _read_session_factory = sessionmaker(
            bind=get_engine(),
            autoflush=False,
            expire_on_commit=False,
        )
    return _read_session_factory


def dispose_engine() -> None:
    """Close pooled connections and forget the engine and session factory."""
    global _engine, _read_session_factory
    if _engine is not None:
        _msg = "Disposing database engine"
        log.debug(_msg)
        _engine.dispose()
    _engine = None
    _read_session_factory = None


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a read session for one request.

    Returns:
        Generator[Session, None, None]: Yields the session.

    Notes:
        1. Open a session from the read session factory.
        2. Yield it to the route handler.
        3. Roll back whatever transaction the lookups started, then close the session.

    """
    session = get_read_session_factory()()
    _msg = "Opened read session"
    log.debug(_msg)
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        _msg = "Closed read session"
        log.debug(_msg)
