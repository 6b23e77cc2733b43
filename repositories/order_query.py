"""
repositories/order_query.py
---------------------------
Builds the partial UPDATE statement for an order patch.

The statement uses psycopg2 named placeholders `%(p1)s`, `%(p2)s`, ...
Placeholder 1 is always the order id in the WHERE clause; present patch
fields follow from 2 upward in ORDER_FIELDS order. Values are never
written into the statement text, and column names only ever come from
ORDER_FIELDS.
"""

from typing import Any, NamedTuple

from models.order import OrderPatch
from repositories.exceptions import EmptyPatchError

TABLE = "orders"


def placeholder(index: int) -> str:
    """Return the driver placeholder for 1-based bind position `index`."""
    return f"%(p{index})s"


class ComposedUpdate(NamedTuple):
    """An UPDATE statement and its bind values, in placeholder order."""
    statement: str
    values: list[Any]

    def params(self) -> dict[str, Any]:
        """Map placeholder names to bind values for cursor.execute()."""
        return {f"p{i}": value for i, value in enumerate(self.values, start=1)}


class UpdateBuilder:
    """
    Accumulates SET assignments and bind values in lock-step.

    Each call to `set()` takes the next placeholder index and appends the
    value at that same position, so the statement and the value list
    cannot drift apart.
    """

    def __init__(self, table: str, order_id: int):
        self.table = table
        self._assignments: list[tuple[str, int]] = []
        self._values: list[Any] = [order_id]

    def set(self, column: str, value: Any) -> "UpdateBuilder":
        index = len(self._values) + 1
        self._assignments.append((column, index))
        self._values.append(value)
        return self

    def build(self) -> ComposedUpdate:
        """
        Render the statement.

        Raises:
            EmptyPatchError: If no column was set.
        """
        if not self._assignments:
            raise EmptyPatchError("an UPDATE needs at least one column to set")
        assert len(self._assignments) + 1 == len(self._values)

        set_clause = ", ".join(
            f"{column} = {placeholder(index)}" for column, index in self._assignments
        )
        statement = f"UPDATE {self.table} SET {set_clause} WHERE id = {placeholder(1)}"
        return ComposedUpdate(statement, list(self._values))


def compose_update(order_id: int, patch: OrderPatch) -> ComposedUpdate:
    """
    Compose a parameterized UPDATE for the fields present in `patch`.

    Args:
        order_id: Primary key of the order to update.
        patch: The sparse set of new values.

    Returns:
        ComposedUpdate whose values are [order_id, *present values].

    Raises:
        EmptyPatchError: If the patch has no fields set.
    """
    builder = UpdateBuilder(TABLE, order_id)
    for column, value in patch.present_fields():
        builder.set(column, value)
    return builder.build()
