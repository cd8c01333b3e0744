"""Order backend port: where placed orders are written.

The checkout only needs two remote writes: the order header, which returns
the id the store generated for it, and a batch of order items that reference
that id. Adapters raise ``BackendError`` for any failed write.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class OrderHeader:
    user_id: str
    total_amount: float
    status: str
    shipping_address: dict
    payment_method: str
    currency: str


@dataclass(frozen=True)
class OrderItemRow:
    """Snapshot of one cart line at the moment the order is placed."""

    product_id: str
    product_name: str
    price: float
    quantity: int
    size: str | None = None

    @classmethod
    def from_line_item(cls, item) -> "OrderItemRow":
        return cls(
            product_id=item.product_id,
            product_name=item.name,
            price=item.unit_price,
            quantity=item.quantity,
            size=item.size,
        )


class BackendError(Exception):
    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        self.message = message
        super().__init__(f"{operation}: {message}")


class OrderBackend(ABC):
    @abstractmethod
    def create_order(self, header: OrderHeader) -> str:
        """Persist the order header and return its generated id."""
        ...

    @abstractmethod
    def create_order_items(self, order_id: str, rows: list[OrderItemRow]) -> None:
        """Persist all items of an order in one batch."""
        ...
