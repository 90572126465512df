"""This module provides database configuration and session management.

The student portal database is owned by another service; this package only
opens read sessions against it.

Functions:
    get_engine: Returns the read-only SQLAlchemy engine, creating it on first use.
    get_read_session_factory: Returns the session factory bound to the engine.
    dispose_engine: Closes pooled connections and resets the cached engine.
    get_db: FastAPI dependency yielding one read session per request.

"""

from .database import dispose_engine, get_db, get_engine, get_read_session_factory

__all__ = ["dispose_engine", "get_db", "get_engine", "get_read_session_factory"]
