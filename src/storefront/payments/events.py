"""Domain events for the Payment aggregate."""

from protean.fields import DateTime, Float, Identifier

from storefront.domain import storefront


@storefront.event(part_of="Payment")
class PaymentRecorded:
    """A shopper reported an M-Pesa payment for an order."""

    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    amount = Float(required=True)
    recorded_at = DateTime(required=True)


@storefront.event(part_of="Payment")
class PaymentConfirmed:
    """An admin matched the payment against the M-Pesa statement."""

    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    confirmed_by = Identifier(required=True)
    confirmed_at = DateTime(required=True)


@storefront.event(part_of="Payment")
class PaymentRejected:
    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
