"""
Unit of Work - transactional boundary for use cases

One psycopg2 connection per unit; the callback receives it as the
transaction handle and passes it to repository methods.
"""
import logging
from typing import Callable, TypeVar

import psycopg2

from catalog.core.database import Database
from catalog.shared.result import Result

logger = logging.getLogger(__name__)

T = TypeVar('T')


class UnitOfWork:
    """
    Runs a callback inside a single database transaction

    - Returns normally with a successful (or non-Result) value: commit
    - Returns a failed Result: rollback, the failure is returned as-is
    - Raises: rollback, the exception propagates
    """

    def __init__(self, database: Database):
        self.database = database

    def run(self, fn: Callable[..., T]) -> T:
        conn = self.database.connect()

        try:
            result = fn(conn)

            if isinstance(result, Result) and result.is_failure:
                conn.rollback()
                logger.debug(f"Transaction rolled back: {result.error}")
            else:
                conn.commit()
                logger.debug("Transaction committed")

            return result

        except Exception as e:
            try:
                conn.rollback()
                logger.debug(f"Transaction rolled back due to error: {e}")
            except psycopg2.Error as rollback_error:
                logger.critical(f"Rollback failed: {rollback_error}")
            raise

        finally:
            conn.close()
