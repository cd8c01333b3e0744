"""Manual M-Pesa payments: commands and handler.

Confirming a payment also moves its order from pending to processing. The
two writes are separate, as they are on the admin dashboard.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.orders.order import Order
from storefront.payments.payment import Payment

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Payment")
class RecordMpesaPayment:
    """A shopper submits the M-Pesa number they paid an order from."""

    order_id = Identifier(required=True)
    mpesa_number = String(max_length=20)


@storefront.command(part_of="Payment")
class ConfirmPayment:
    payment_id = Identifier(required=True)
    confirmed_by = Identifier(required=True)


@storefront.command(part_of="Payment")
class RejectPayment:
    payment_id = Identifier(required=True)


@storefront.command_handler(part_of=Payment)
class MpesaPaymentHandler:
    @handle(RecordMpesaPayment)
    def record_mpesa_payment(self, command):
        order = current_domain.repository_for(Order).get(command.order_id)
        payment = Payment.record(
            order_id=order.id,
            amount=order.total_amount,
            mpesa_number=command.mpesa_number,
        )
        current_domain.repository_for(Payment).add(payment)
        return str(payment.id)

    @handle(ConfirmPayment)
    def confirm_payment(self, command):
        repo = current_domain.repository_for(Payment)
        payment = repo.get(command.payment_id)
        payment.confirm(confirmed_by=command.confirmed_by)
        repo.add(payment)

        order_repo = current_domain.repository_for(Order)
        order = order_repo.get(payment.order_id)
        if order.start_processing():
            order_repo.add(order)
        else:
            logger.info("Order already processing", order_id=str(order.id))

    @handle(RejectPayment)
    def reject_payment(self, command):
        repo = current_domain.repository_for(Payment)
        payment = repo.get(command.payment_id)
        payment.reject()
        repo.add(payment)
