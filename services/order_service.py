"""
services/order_service.py
-------------------------
Turns OrderRepository results into the `data` payloads returned by the API.
Failures from the repository are not caught here.
"""

from typing import Any

from models.order import NewOrder, OrderPatch
from repositories.order_repo import OrderRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class OrderService:
    """Shapes order data for the HTTP layer."""

    def __init__(self, repo: OrderRepository):
        self.repo = repo

    def list_orders(self) -> list[dict[str, Any]]:
        """All orders as dicts, ordered by id."""
        return [order.to_dict() for order in self.repo.list_all()]

    def add_order(self, order: NewOrder) -> dict[str, int]:
        """Create an order and return its new id as `{"id": ...}`."""
        return {"id": self.repo.create(order)}

    def get_order(self, order_id: int) -> dict[str, Any]:
        return self.repo.get(order_id).to_dict()

    def update_order(self, order_id: int, patch: OrderPatch) -> dict[str, int]:
        """
        Apply a partial update.

        Returns:
            `{"rows_affected": n}`; n is 0 for an unknown id or an empty patch.
        """
        updated = self.repo.update(order_id, patch)
        if not updated:
            logger.info(f"Update of order #{order_id} changed no rows")
        return {"rows_affected": updated}

    def delete_order(self, order_id: int) -> dict[str, int]:
        return {"rows_affected": self.repo.delete(order_id)}
