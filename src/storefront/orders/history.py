"""Order history reads for shoppers and the admin dashboard."""

from dataclasses import dataclass, field
from datetime import datetime

from protean.utils.globals import current_domain

from storefront.checkout.pricing import order_reference
from storefront.identity.profiles import count_profiles
from storefront.orders.order import Order
from storefront.orders.order_item import OrderItem

QUERY_LIMIT = 1000


@dataclass(frozen=True)
class OrderLine:
    id: str
    product_id: str
    product_name: str
    price: float
    quantity: int
    size: str | None


@dataclass(frozen=True)
class OrderView:
    id: str
    reference: str
    user_id: str
    total_amount: float
    status: str
    payment_method: str | None
    currency: str
    created_at: datetime
    items: list[OrderLine] = field(default_factory=list)

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.items)


@dataclass(frozen=True)
class DashboardStats:
    total_orders: int
    total_revenue: float
    total_users: int


def _lines_for(order_id: str) -> list[OrderLine]:
    repo = current_domain.repository_for(OrderItem)
    items = repo._dao.query.filter(order_id=order_id).limit(QUERY_LIMIT).all().items
    return [
        OrderLine(
            id=str(item.id),
            product_id=str(item.product_id),
            product_name=item.product_name,
            price=item.price,
            quantity=item.quantity,
            size=item.size,
        )
        for item in items
    ]


def _view(order: Order) -> OrderView:
    return OrderView(
        id=str(order.id),
        reference=order_reference(order.id),
        user_id=str(order.user_id),
        total_amount=order.total_amount,
        status=order.status,
        payment_method=order.payment_method,
        currency=order.currency,
        created_at=order.created_at,
        items=_lines_for(str(order.id)),
    )


def _newest_first(orders) -> list[Order]:
    return sorted(orders, key=lambda order: order.created_at, reverse=True)


def orders_for_user(user_id) -> list[OrderView]:
    repo = current_domain.repository_for(Order)
    orders = repo._dao.query.filter(user_id=str(user_id)).limit(QUERY_LIMIT).all().items
    return [_view(order) for order in _newest_first(orders)]


def all_orders() -> list[OrderView]:
    repo = current_domain.repository_for(Order)
    orders = repo._dao.query.limit(QUERY_LIMIT).all().items
    return [_view(order) for order in _newest_first(orders)]


def get_order(order_id) -> OrderView:
    return _view(current_domain.repository_for(Order).get(order_id))


def _every_order():
    """Yield all orders, a page of ``QUERY_LIMIT`` at a time."""
    repo = current_domain.repository_for(Order)
    offset = 0
    while True:
        result = repo._dao.query.order_by("created_at").offset(offset).limit(QUERY_LIMIT).all()
        yield from result.items
        if not result.has_next:
            return
        offset += QUERY_LIMIT


def dashboard_stats() -> DashboardStats:
    total_orders = 0
    total_revenue = 0.0
    for order in _every_order():
        total_orders += 1
        total_revenue += order.total_amount or 0.0
    return DashboardStats(
        total_orders=total_orders,
        total_revenue=round(total_revenue, 2),
        total_users=count_profiles(),
    )
