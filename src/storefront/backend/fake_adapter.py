"""In-memory order backend for development and tests.

Records every call and can be told to fail the header or the item write.
"""

from uuid import uuid4

from storefront.backend.port import BackendError, OrderBackend, OrderHeader, OrderItemRow


class FakeOrderBackend(OrderBackend):
    def __init__(self) -> None:
        self.fail_on: str | None = None
        self.failure_message: str = "Remote store unavailable"
        self.calls: list[dict] = []
        self.orders: dict[str, OrderHeader] = {}
        self.items: dict[str, list[OrderItemRow]] = {}

    def configure(self, fail_on: str | None = None, failure_message: str = "Remote store unavailable") -> None:
        """``fail_on`` is ``"create_order"``, ``"create_order_items"`` or None."""
        self.fail_on = fail_on
        self.failure_message = failure_message

    def create_order(self, header: OrderHeader) -> str:
        self.calls.append({"method": "create_order", "header": header})
        if self.fail_on == "create_order":
            raise BackendError("create_order", self.failure_message)

        order_id = str(uuid4())
        self.orders[order_id] = header
        return order_id

    def create_order_items(self, order_id: str, rows: list[OrderItemRow]) -> None:
        self.calls.append({"method": "create_order_items", "order_id": order_id, "rows": list(rows)})
        if self.fail_on == "create_order_items":
            raise BackendError("create_order_items", self.failure_message)

        self.items[order_id] = list(rows)

    @property
    def write_count(self) -> int:
        return len(self.calls)
