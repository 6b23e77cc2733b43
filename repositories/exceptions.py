"""
repositories/exceptions.py
--------------------------
Failures raised by the data access layer.
The HTTP layer maps each of these to a response; nothing here retries.
"""


class OrderRepositoryError(Exception):
    """Base class for all repository failures."""


class StorageUnavailable(OrderRepositoryError):
    """No database connection could be obtained from the pool."""


class QueryFailed(OrderRepositoryError):
    """The driver reported an error while executing a statement."""


class OrderNotFound(OrderRepositoryError):
    """No order exists with the requested id."""

    def __init__(self, order_id: int):
        super().__init__(f"order {order_id} not found")
        self.order_id = order_id


class EmptyPatchError(ValueError):
    """An UPDATE was requested for a patch with no fields set."""
