"""Database session management.

Handles the creation and configuration of database sessions and connections used
throughout the application.
"""

import time
from collections.abc import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.exc import DisconnectionError, OperationalError
from sqlalchemy.exc import TimeoutError as SQLTimeoutError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config.config import settings
from app.core.logging import get_logger
from app.exceptions.custom_exceptions import DatabaseUnavailableError

_log = get_logger(__name__)

engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
    pool_recycle=3600,  # Recycle connections after 1 hour
    pool_size=10,
    max_overflow=20,
    connect_args={
        "connect_timeout": 10,
        "options": f"-csearch_path={settings.postgres_schema}",
    },
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency to get a database session with connection retry logic.

    Each attempt opens a session and checks the connection with ``SELECT 1``.
    Connection failures are retried with exponential backoff; once the attempts are
    exhausted, DatabaseUnavailableError is raised and mapped to a 503 by the global
    exception handler. The session is closed when the request completes.

    Yields:
        Session: Database session for the request.

    Raises:
        DatabaseUnavailableError: If a connection cannot be established.
    """
    max_retries = settings.db_connect_max_retries
    retry_delay = settings.db_connect_retry_delay

    for attempt in range(max_retries):
        session = SessionLocal()
        try:
            session.execute(text("SELECT 1"))
        except (
            OperationalError,
            DisconnectionError,
            SQLTimeoutError,
            ConnectionError,
            TimeoutError,
        ) as e:
            session.close()
            _log.warning(
                "Database connection attempt {} failed: {} ({})",
                attempt + 1,
                str(e)[:200],
                type(e).__name__,
            )

            if attempt == max_retries - 1:
                _log.error(
                    "Database connection failed after {} attempts, giving up",
                    max_retries,
                )
                raise DatabaseUnavailableError(
                    reason="Connection failed after multiple attempts",
                    original_error=e,
                ) from e

            time.sleep(retry_delay)
            retry_delay *= 2
            continue

        try:
            yield session
        finally:
            session.close()
        return


def check_database_health() -> bool:
    """Check if the database is available and responding.

    Returns:
        bool: True if database is healthy, False otherwise
    """
    try:
        with SessionLocal() as session:
            session.execute(text("SELECT 1"))
            return True
    except (OperationalError, DisconnectionError, SQLTimeoutError) as e:
        _log.debug("Database health check failed: {} ({})", str(e), type(e).__name__)
        return False
