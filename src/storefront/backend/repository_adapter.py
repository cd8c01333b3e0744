"""Order backend that writes through the storefront domain's repositories."""

import structlog
from protean import UnitOfWork
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.backend.port import BackendError, OrderBackend, OrderHeader, OrderItemRow
from storefront.orders.order import Order
from storefront.orders.order_item import OrderItem

logger = structlog.get_logger(__name__)


class RepositoryOrderBackend(OrderBackend):
    def create_order(self, header: OrderHeader) -> str:
        try:
            order = Order.place(
                user_id=header.user_id,
                total_amount=header.total_amount,
                shipping_address=header.shipping_address,
                payment_method=header.payment_method,
                currency=header.currency,
            )
            current_domain.repository_for(Order).add(order)
        except ValidationError as exc:
            raise BackendError("create_order", str(exc.messages)) from exc
        except Exception as exc:
            logger.exception("Order header write failed", user_id=header.user_id)
            raise BackendError("create_order", str(exc)) from exc

        logger.info("Order header created", order_id=str(order.id), user_id=header.user_id)
        return str(order.id)

    def create_order_items(self, order_id: str, rows: list[OrderItemRow]) -> None:
        try:
            with UnitOfWork():
                repo = current_domain.repository_for(OrderItem)
                for row in rows:
                    repo.add(
                        OrderItem.snapshot(
                            order_id=order_id,
                            product_id=row.product_id,
                            product_name=row.product_name,
                            price=row.price,
                            quantity=row.quantity,
                            size=row.size,
                        )
                    )
        except ValidationError as exc:
            raise BackendError("create_order_items", str(exc.messages)) from exc
        except Exception as exc:
            logger.exception("Order items write failed", order_id=order_id)
            raise BackendError("create_order_items", str(exc)) from exc

        logger.info("Order items created", order_id=order_id, count=len(rows))
