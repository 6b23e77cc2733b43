"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Wraps psycopg2's ThreadedConnectionPool so that request threads can share
one bounded set of connections. A single ConnectionPool instance is created
at startup and handed to the repositories that need it.

psycopg2's pool fails immediately when every connection is checked out;
a semaphore sized to the pool makes callers wait up to `checkout_timeout`
seconds for a free connection first.
"""

import threading

import psycopg2
from psycopg2 import pool

from utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionPool:
    """Bounded, thread-safe pool of PostgreSQL connections."""

    def __init__(self, dsn: str, min_conn: int = 1, max_conn: int = 16, checkout_timeout: float = 5.0):
        """
        Open the pool.

        Args:
            dsn: libpq connection string or postgresql:// URL.
            min_conn: Minimum number of connections to keep open.
            max_conn: Maximum number of connections allowed.
            checkout_timeout: Seconds to wait for a free connection.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        try:
            self._pool = pool.ThreadedConnectionPool(min_conn, max_conn, dsn)
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise
        self._slots = threading.BoundedSemaphore(max_conn)
        self.max_conn = max_conn
        self.checkout_timeout = checkout_timeout
        logger.info(f"Database connection pool initialized (max {max_conn} connections).")

    def get_connection(self):
        """
        Get a connection from the pool, waiting for one to be released if
        all are in use.

        Returns:
            A psycopg2 connection object.

        Raises:
            psycopg2.pool.PoolError: If no connection freed up within
                `checkout_timeout`, or the pool is closed.
            psycopg2.OperationalError: If a new connection could not be opened.
        """
        if not self._slots.acquire(timeout=self.checkout_timeout):
            raise pool.PoolError(
                f"connection pool exhausted (no connection free after {self.checkout_timeout}s)"
            )
        try:
            return self._pool.getconn()
        except Exception:
            self._slots.release()
            raise

    def release_connection(self, conn) -> None:
        """
        Return a connection back to the pool.
        Connections the server has already closed are discarded, and
        connections released after close() are closed directly.

        Args:
            conn: The psycopg2 connection to release.
        """
        try:
            if self._pool.closed:
                if not conn.closed:
                    conn.close()
            else:
                self._pool.putconn(conn, close=bool(conn.closed))
        finally:
            self._slots.release()

    def close(self) -> None:
        """Close all connections in the pool."""
        if not self._pool.closed:
            self._pool.closeall()
            logger.info("Database connection pool closed.")
