"""
PostgreSQL database access

Two access paths share one configured database:
- SQLAlchemy (declarative Base, schema creation)
- psycopg2 direct connections (repository SQL, transactions)

Author: TM3
Date: 2025-10-17
"""
import logging
import time
from typing import Optional

import psycopg2
from psycopg2.extras import RealDictCursor
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

from .config import Settings

logger = logging.getLogger(__name__)


# Base para modelos
Base = declarative_base()


class Database:
    """
    Database handle owned by the application container

    Holds the connection settings and opens psycopg2 connections on demand.
    The SQLAlchemy engine is created lazily, only when schema work is needed.
    """

    def __init__(
        self,
        database_url: str,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        echo: bool = False
    ):
        if not database_url:
            raise ValueError("DATABASE_URL not configured")

        self.database_url = database_url
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.echo = echo
        self._engine: Optional[Engine] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.get_database_url(),
            max_retries=settings.DB_CONNECT_RETRIES,
            retry_delay=settings.DB_RETRY_DELAY,
            echo=settings.is_development,
        )

    @property
    def engine(self) -> Engine:
        """SQLAlchemy engine, created on first use"""
        if self._engine is None:
            self._engine = create_engine(
                self.database_url,
                pool_pre_ping=True,  # Verificar conexión antes de usar
                echo=self.echo,
            )
        return self._engine

    def create_schema(self) -> None:
        """Create missing tables (never drops existing ones)"""
        # Import models so they register on Base.metadata
        from catalog.models import ProductModel  # noqa: F401

        Base.metadata.create_all(self.engine)
        logger.info("Database schema synchronized")

    def reset_schema(self) -> None:
        """Drop and recreate every table. Destroys data."""
        from catalog.models import ProductModel  # noqa: F401

        Base.metadata.drop_all(self.engine)
        Base.metadata.create_all(self.engine)
        logger.warning("Database schema dropped and recreated")

    def connect(self, max_retries: Optional[int] = None, retry_delay: Optional[float] = None):
        """
        Get a psycopg2 connection (RealDictCursor) with retry on connection failures

        Retries OperationalError with exponential backoff. Any other error
        fails immediately.

        Args:
            max_retries: Maximum number of connection attempts (default: settings)
            retry_delay: Initial delay between retries in seconds (default: settings)

        Returns:
            psycopg2 connection returning dict rows

        Raises:
            psycopg2.OperationalError: If all retry attempts fail
        """
        # At least one attempt, even when configured with 0
        max_retries = max(1, self.max_retries if max_retries is None else max_retries)
        retry_delay = self.retry_delay if retry_delay is None else retry_delay

        last_error = None

        for attempt in range(1, max_retries + 1):
            try:
                logger.debug(f"Database connection attempt {attempt}/{max_retries}")
                conn = psycopg2.connect(self.database_url, cursor_factory=RealDictCursor)
                logger.debug(f"Database connection successful on attempt {attempt}")
                return conn

            except psycopg2.OperationalError as e:
                last_error = e
                logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {e}")

                if attempt < max_retries:
                    delay = retry_delay * (2 ** (attempt - 1))
                    logger.info(f"Retrying in {delay:.2f} seconds...")
                    time.sleep(delay)

        logger.error(f"All {max_retries} connection attempts failed")
        raise last_error

    def ping(self) -> float:
        """
        Run SELECT 1 on a fresh connection

        Returns:
            Round-trip latency in milliseconds
        """
        start = time.time()
        conn = self.connect(max_retries=1)
        cursor = conn.cursor()

        try:
            cursor.execute("SELECT 1")
            cursor.fetchone()
            return round((time.time() - start) * 1000, 2)
        finally:
            cursor.close()
            conn.close()

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
