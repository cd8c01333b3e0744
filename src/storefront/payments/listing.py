"""Payment list for the admin dashboard."""

from dataclasses import dataclass
from datetime import datetime

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.checkout.pricing import order_reference
from storefront.orders.order import Order
from storefront.payments.payment import Payment

QUERY_LIMIT = 1000


@dataclass(frozen=True)
class PaymentView:
    id: str
    order_id: str
    order_reference: str
    order_total: float | None
    customer_id: str | None
    amount: float
    payment_method: str
    mpesa_number: str | None
    status: str
    confirmed_by: str | None
    confirmed_at: datetime | None
    created_at: datetime


def _view(payment: Payment) -> PaymentView:
    try:
        order = current_domain.repository_for(Order).get(payment.order_id)
    except ObjectNotFoundError:
        order = None

    return PaymentView(
        id=str(payment.id),
        order_id=str(payment.order_id),
        order_reference=order_reference(payment.order_id),
        order_total=order.total_amount if order else None,
        customer_id=str(order.user_id) if order else None,
        amount=payment.amount,
        payment_method=payment.payment_method,
        mpesa_number=payment.mpesa_number.number if payment.mpesa_number else None,
        status=payment.status,
        confirmed_by=str(payment.confirmed_by) if payment.confirmed_by else None,
        confirmed_at=payment.confirmed_at,
        created_at=payment.created_at,
    )


def list_payments(status: str | None = None) -> list[PaymentView]:
    query = current_domain.repository_for(Payment)._dao.query
    if status:
        query = query.filter(status=status)
    payments = query.limit(QUERY_LIMIT).all().items
    payments = sorted(payments, key=lambda payment: payment.created_at, reverse=True)
    return [_view(payment) for payment in payments]
