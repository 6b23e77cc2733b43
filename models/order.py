"""
models/order.py
---------------
Domain models for coffee orders: the persisted Order, the NewOrder
creation payload and the OrderPatch sparse update.
"""

from dataclasses import asdict, dataclass
from typing import Any, Optional

# Mutable columns, in the order they are written to the database.
ORDER_FIELDS: tuple[str, ...] = ("name", "coffee_name", "size", "total")


@dataclass
class Order:
    """
    Represents a single persisted order.

    Attributes:
        id: Database primary key, assigned by the store.
        name: Customer name or label.
        coffee_name: Name of the drink.
        size: Size category (e.g., 'S', 'M', 'L').
        total: Amount in minor currency units.

    Every column except `id` is nullable in storage, so rows read back
    may carry None.
    """
    id: int
    name: Optional[str] = None
    coffee_name: Optional[str] = None
    size: Optional[str] = None
    total: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class NewOrder:
    """Creation payload. All four fields are required."""
    name: str
    coffee_name: str
    size: str
    total: int

    def values(self) -> tuple:
        """Field values in ORDER_FIELDS order."""
        return tuple(getattr(self, f) for f in ORDER_FIELDS)


@dataclass
class OrderPatch:
    """
    A sparse update request.

    A field set to None is absent and left untouched in storage; any other
    value replaces the stored one. A patch cannot set a column to NULL.
    """
    name: Optional[str] = None
    coffee_name: Optional[str] = None
    size: Optional[str] = None
    total: Optional[int] = None

    def present_fields(self) -> list[tuple[str, Any]]:
        """
        Return the (column, value) pairs the patch sets.

        Returns:
            Pairs in ORDER_FIELDS order, skipping absent fields.
        """
        return [
            (name, getattr(self, name))
            for name in ORDER_FIELDS
            if getattr(self, name) is not None
        ]

    def is_empty(self) -> bool:
        """Returns True if the patch changes nothing."""
        return not self.present_fields()
