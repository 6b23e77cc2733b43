"""
repositories/order_repo.py
--------------------------
Data access layer for coffee orders.
All SQL queries related to the `orders` table live here.
"""

import psycopg2
from psycopg2 import pool

from db.connection import ConnectionPool
from models.order import ORDER_FIELDS, NewOrder, Order, OrderPatch
from repositories.exceptions import OrderNotFound, QueryFailed, StorageUnavailable
from repositories.order_query import TABLE, compose_update
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = ", ".join(("id",) + ORDER_FIELDS)


class OrderRepository:
    """
    Repository for CRUD operations on the orders table.

    Each operation checks one connection out of the pool and returns it on
    every exit path. Driver errors are rolled back and re-raised as
    QueryFailed; failure to obtain a connection raises StorageUnavailable.
    """

    def __init__(self, db_pool: ConnectionPool):
        self.pool = db_pool

    # ── CREATE ────────────────────────────────────────────

    def create(self, order: NewOrder) -> int:
        """
        Insert a new order.

        Args:
            order: The creation payload; all fields are required.

        Returns:
            The id assigned by the database.
        """
        sql = f"""
            INSERT INTO {TABLE} (name, coffee_name, size, total)
            VALUES (%s, %s, %s, %s)
            RETURNING id;
        """
        conn = self._acquire()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, order.values())
                order_id = cur.fetchone()[0]
            conn.commit()
            logger.info(f"Added order #{order_id} ({order.coffee_name}, {order.size})")
            return order_id
        except psycopg2.Error as e:
            self._rollback(conn)
            logger.error(f"Failed to add order: {e}")
            raise QueryFailed(str(e)) from e
        finally:
            self.pool.release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def list_all(self) -> list[Order]:
        """
        Fetch every order.

        Returns:
            List of Order objects ordered by id ascending.
        """
        sql = f"SELECT {_COLUMNS} FROM {TABLE} ORDER BY id;"
        conn = self._acquire()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_order(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            self._rollback(conn)
            logger.error(f"Failed to list orders: {e}")
            raise QueryFailed(str(e)) from e
        finally:
            self.pool.release_connection(conn)

    def get(self, order_id: int) -> Order:
        """
        Fetch a single order by id.

        Raises:
            OrderNotFound: If no row has that id.
        """
        sql = f"SELECT {_COLUMNS} FROM {TABLE} WHERE id = %s;"
        conn = self._acquire()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (order_id,))
                row = cur.fetchone()
        except psycopg2.Error as e:
            self._rollback(conn)
            logger.error(f"Failed to fetch order #{order_id}: {e}")
            raise QueryFailed(str(e)) from e
        finally:
            self.pool.release_connection(conn)

        if row is None:
            raise OrderNotFound(order_id)
        return self._row_to_order(row)

    # ── UPDATE ────────────────────────────────────────────

    def update(self, order_id: int, patch: OrderPatch) -> int:
        """
        Apply a partial update to an order.

        Only the fields present in `patch` are written. A patch with no
        fields is a no-op: no connection is taken and no statement runs.

        Args:
            order_id: Primary key of the order.
            patch: Fields to change.

        Returns:
            Number of rows updated (0 when the id does not exist).
        """
        if patch.is_empty():
            logger.debug(f"Empty patch for order #{order_id}, nothing to update")
            return 0

        query = compose_update(order_id, patch)
        conn = self._acquire()
        try:
            with conn.cursor() as cur:
                cur.execute(query.statement, query.params())
                updated = cur.rowcount
            conn.commit()
            return updated
        except psycopg2.Error as e:
            self._rollback(conn)
            logger.error(f"Failed to update order #{order_id}: {e}")
            raise QueryFailed(str(e)) from e
        finally:
            self.pool.release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, order_id: int) -> int:
        """
        Delete an order by id.

        Returns:
            Number of rows deleted (0 when the id does not exist).
        """
        sql = f"DELETE FROM {TABLE} WHERE id = %s;"
        conn = self._acquire()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (order_id,))
                deleted = cur.rowcount
            conn.commit()
            if deleted:
                logger.info(f"Deleted order #{order_id}")
            return deleted
        except psycopg2.Error as e:
            self._rollback(conn)
            logger.error(f"Failed to delete order #{order_id}: {e}")
            raise QueryFailed(str(e)) from e
        finally:
            self.pool.release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    def _acquire(self):
        """Check a connection out of the pool, or raise StorageUnavailable."""
        try:
            return self.pool.get_connection()
        except (pool.PoolError, psycopg2.OperationalError) as e:
            logger.error(f"Could not acquire a database connection: {e}")
            raise StorageUnavailable(str(e)) from e

    @staticmethod
    def _rollback(conn) -> None:
        if not conn.closed:
            conn.rollback()

    @staticmethod
    def _row_to_order(row: tuple) -> Order:
        """Convert a database row tuple to an Order domain object."""
        return Order(
            id=row[0],
            name=row[1],
            coffee_name=row[2],
            size=row[3],
            total=row[4],
        )
