"""Order aggregate: the header of a placed order.

The order's items live in their own aggregate (``OrderItem``) because the
checkout writes them in a second step, after the header id is known.

Admins set the status directly to any of the known values; a payment
confirmation moves the order to processing.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String, ValueObject

from storefront.domain import storefront


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@storefront.value_object(part_of="Order")
class ShippingAddress:
    """Where the order goes, as typed in at checkout.

    Captured once and never updated, whatever later happens to the user's
    details.
    """

    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    address = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    county = String(required=True, max_length=100)
    postal_code = String(max_length=20)
    country = String(max_length=100, default="Kenya")


@storefront.aggregate
class Order:
    user_id = Identifier(required=True)
    total_amount = Float(required=True, min_value=0.0)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    shipping_address = ValueObject(ShippingAddress)
    payment_method = String(max_length=50)
    currency = String(max_length=3, default="KES")
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(cls, user_id, total_amount, shipping_address, payment_method, currency):
        """Create a pending order from checkout data.

        Args:
            user_id: The signed-in user placing the order.
            total_amount: Cart total including tax.
            shipping_address: Dict with the shipping form fields.
            payment_method: Payment method tag chosen at checkout.
            currency: Currency code of ``total_amount``.
        """
        from storefront.orders.events import OrderPlaced

        now = datetime.now(UTC)
        order = cls(
            user_id=str(user_id),
            total_amount=total_amount,
            status=OrderStatus.PENDING.value,
            shipping_address=ShippingAddress(**shipping_address),
            payment_method=payment_method,
            currency=currency,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                total_amount=total_amount,
                payment_method=payment_method,
                placed_at=now,
            )
        )
        return order

    def change_status(self, new_status) -> None:
        from storefront.orders.events import OrderStatusChanged

        try:
            target = OrderStatus(new_status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status: {new_status}"]}) from None

        current = OrderStatus(self.status)
        if target == current:
            return

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now
        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=current.value,
                new_status=target.value,
                changed_at=now,
            )
        )

    def start_processing(self) -> bool:
        """Move the order to processing once its payment is confirmed.

        Returns False when the order is already processing.
        """
        if OrderStatus(self.status) == OrderStatus.PROCESSING:
            return False
        self.change_status(OrderStatus.PROCESSING.value)
        return True
