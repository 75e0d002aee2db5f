import logging
import threading
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from config import get_settings

logger = logging.getLogger(__name__)

# Create base class for models
Base = declarative_base()


class StorageUnavailable(Exception):
    """Raised when a session is requested from a handle whose store failed to open."""


class DatabaseConnection:
    """
    Owned handle on one relational store.

    The engine is created lazily and keeps a single shared DBAPI connection
    (StaticPool), so an in-memory SQLite database survives across sessions and
    is visible to every thread that uses this handle. Use as context manager:

    with DatabaseConnection() as db:
        dao = StudentDAO(db)
        ...
    """

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None):
        settings = get_settings()
        self.url = url if url is not None else settings.db_url
        self.echo = echo if echo is not None else settings.db_echo
        self.engine = None
        self.SessionLocal = None
        self.open_error: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def is_usable(self) -> bool:
        return self.engine is not None and self.open_error is None

    def open(self) -> bool:
        """
        Open the store on first call only. Returns True if the handle is usable.

        A failure is logged and remembered; the handle stays unusable and the
        open is not retried.
        """
        with self._lock:
            if self.engine is not None or self.open_error is not None:
                return self.is_usable

            try:
                if self.url.startswith('sqlite'):
                    engine = create_engine(
                        self.url,
                        echo=self.echo,
                        connect_args={"check_same_thread": False},  # Needed for SQLite with multiple threads
                        poolclass=StaticPool
                    )
                else:
                    engine = create_engine(self.url, echo=self.echo, pool_pre_ping=True)
                # Force the connection now so a bad store is reported at startup
                with engine.connect():
                    pass
            except (SQLAlchemyError, ImportError, ValueError) as e:
                self.open_error = str(e)
                logger.error(f"Database connection error: {e}")
                return False

            self.engine = engine
            self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
            logger.info(f"Opened database at: {self.url}")
            return True

    def get_db(self):
        """Get a database session (caller closes it)"""
        if not self.open():
            raise StorageUnavailable(f"Database is unavailable: {self.open_error}")
        return self.SessionLocal()

    def close(self):
        """Release the engine and its connection. The handle may be reopened."""
        with self._lock:
            if self.engine is not None:
                self.engine.dispose()
                logger.info("Database connection closed.")
            self.engine = None
            self.SessionLocal = None
            self.open_error = None

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


_default_connection: Optional[DatabaseConnection] = None
_default_lock = threading.Lock()


def get_connection() -> DatabaseConnection:
    """
    Return the process-wide default connection, creating and opening it on
    first call. Concurrent first callers get the same instance.
    """
    global _default_connection
    with _default_lock:
        if _default_connection is None:
            _default_connection = DatabaseConnection()
    _default_connection.open()
    return _default_connection
