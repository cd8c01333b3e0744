"""Order submission: turns the cart and the shipping form into a placed order.

Preconditions are checked in order and the first failure wins:
    1. someone is signed in
    2. the shipping form is complete
    3. the cart is not empty

The order is then written in two steps: the header, whose generated id is
needed by the second step, and the batch of order items. The cart is cleared
only after both writes have gone through.

If the item write fails the header stays as it is. Nothing rolls it back, so
the store is left with an order that has no items. Resubmitting places a new
order; there is no deduplication.
"""

from dataclasses import dataclass

import structlog

from storefront.backend import get_backend
from storefront.backend.port import BackendError, OrderBackend, OrderHeader, OrderItemRow
from storefront.cart.store import CartStore
from storefront.checkout.errors import (
    AuthenticationRequired,
    CheckoutError,
    EmptyCart,
    RemoteWriteFailed,
)
from storefront.checkout.pricing import order_reference, tax_inclusive_total
from storefront.checkout.shipping import ShippingForm, validate_payment_method
from storefront.config import settings
from storefront.identity.session.port import Actor, SessionProvider
from storefront.notifications import NotificationChannel
from storefront.orders.order import OrderStatus

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    ok: bool
    order_id: str | None = None
    reference: str | None = None
    error: CheckoutError | None = None
    redirect_to: str | None = None


class OrderSubmission:
    def __init__(
        self,
        cart: CartStore,
        session: SessionProvider,
        notifier: NotificationChannel,
        backend: OrderBackend | None = None,
    ) -> None:
        self.cart = cart
        self.session = session
        self.notifier = notifier
        self.backend = backend

    def check_preconditions(self, form: ShippingForm, payment_method: str) -> Actor:
        actor = self.session.current_actor()
        if actor is None:
            raise AuthenticationRequired()

        form.validate()
        validate_payment_method(payment_method)

        if self.cart.state.is_empty:
            raise EmptyCart()
        return actor

    def place_order(self, form: ShippingForm, payment_method: str | None = None) -> str:
        """Place the order and return its id, raising ``CheckoutError`` on failure."""
        payment_method = payment_method or settings.default_payment_method
        actor = self.check_preconditions(form, payment_method)
        backend = self.backend or get_backend()
        cart = self.cart.state

        header = OrderHeader(
            user_id=actor.user_id,
            total_amount=tax_inclusive_total(cart.total),
            status=OrderStatus.PENDING.value,
            shipping_address=form.snapshot(),
            payment_method=payment_method,
            currency=settings.currency,
        )
        try:
            order_id = backend.create_order(header)
        except BackendError as exc:
            logger.error("Order header write failed", user_id=actor.user_id, error=exc.message)
            raise RemoteWriteFailed(stage="order") from exc

        rows = [OrderItemRow.from_line_item(item) for item in cart.items]
        try:
            backend.create_order_items(order_id, rows)
        except BackendError as exc:
            logger.warning(
                "Order header persisted without items",
                order_id=order_id,
                user_id=actor.user_id,
                error=exc.message,
            )
            raise RemoteWriteFailed(stage="items", order_id=order_id) from exc

        self.cart.clear()
        logger.info(
            "Order placed",
            order_id=order_id,
            user_id=actor.user_id,
            total_amount=header.total_amount,
            line_count=len(rows),
        )
        return order_id

    def submit(self, form: ShippingForm, payment_method: str | None = None) -> SubmissionResult:
        """Place the order and report the outcome on the notification channel."""
        try:
            order_id = self.place_order(form, payment_method)
        except AuthenticationRequired as exc:
            self.notifier.error(exc.title, exc.description)
            return SubmissionResult(ok=False, error=exc, redirect_to=settings.sign_in_path)
        except CheckoutError as exc:
            self.notifier.error(exc.title, exc.description)
            return SubmissionResult(ok=False, error=exc)

        reference = order_reference(order_id)
        self.notifier.success("Order placed successfully!", f"Order #{reference} has been submitted")
        return SubmissionResult(ok=True, order_id=order_id, reference=reference)
