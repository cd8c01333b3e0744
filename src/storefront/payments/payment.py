"""Payment aggregate: an M-Pesa payment waiting for an admin to confirm it.

There is no gateway: the shopper sends money by M-Pesa and submits the
number they paid from; an admin checks the M-Pesa statement and confirms or
rejects the payment by hand.

State Machine:
    PENDING → CONFIRMED
    PENDING → REJECTED
"""

import re
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String, ValueObject

from storefront.domain import storefront

_MPESA_PATTERN = re.compile(r"^254[17]\d{8}$")


class PaymentStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    REJECTED = "rejected"


@storefront.value_object(part_of="Payment")
class MpesaNumber:
    """Safaricom number in international form (``2547XXXXXXXX``)."""

    number: String(required=True, max_length=12)

    @classmethod
    def parse(cls, raw: str) -> "MpesaNumber":
        """Accept local (07.., 01..) and international (+254..) spellings."""
        digits = re.sub(r"[\s\-()]", "", str(raw or ""))
        if digits.startswith("+"):
            digits = digits[1:]
        if digits.startswith("0"):
            digits = "254" + digits[1:]
        elif len(digits) == 9:
            digits = "254" + digits
        return cls(number=digits)

    @invariant.post
    def must_be_a_kenyan_mobile_number(self):
        if not _MPESA_PATTERN.match(self.number or ""):
            raise ValidationError({"mpesa_number": [f"Invalid M-Pesa number: {self.number!r}"]})


@storefront.aggregate
class Payment:
    order_id = Identifier(required=True)
    amount = Float(required=True, min_value=0.0)
    payment_method = String(max_length=50, default="mpesa")
    mpesa_number = ValueObject(MpesaNumber)
    status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    confirmed_by = Identifier()
    confirmed_at = DateTime()
    created_at = DateTime()

    @classmethod
    def record(cls, order_id, amount, mpesa_number=None):
        from storefront.payments.events import PaymentRecorded

        now = datetime.now(UTC)
        payment = cls(
            order_id=str(order_id),
            amount=amount,
            mpesa_number=MpesaNumber.parse(mpesa_number) if mpesa_number else None,
            status=PaymentStatus.PENDING.value,
            created_at=now,
        )
        payment.raise_(
            PaymentRecorded(
                payment_id=str(payment.id),
                order_id=str(order_id),
                amount=amount,
                recorded_at=now,
            )
        )
        return payment

    def _assert_pending(self):
        if PaymentStatus(self.status) != PaymentStatus.PENDING:
            raise ValidationError({"status": [f"Payment is already {self.status}"]})

    def confirm(self, confirmed_by):
        from storefront.payments.events import PaymentConfirmed

        self._assert_pending()
        now = datetime.now(UTC)
        self.status = PaymentStatus.CONFIRMED.value
        self.confirmed_by = str(confirmed_by)
        self.confirmed_at = now
        self.raise_(
            PaymentConfirmed(
                payment_id=str(self.id),
                order_id=str(self.order_id),
                confirmed_by=str(confirmed_by),
                confirmed_at=now,
            )
        )

    def reject(self):
        from storefront.payments.events import PaymentRejected

        self._assert_pending()
        self.status = PaymentStatus.REJECTED.value
        self.raise_(PaymentRejected(payment_id=str(self.id), order_id=str(self.order_id)))
