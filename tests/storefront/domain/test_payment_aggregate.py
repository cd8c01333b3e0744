"""Tests for the M-Pesa payment aggregate and number parsing."""

import pytest
from protean.exceptions import ValidationError
from storefront.payments.events import PaymentConfirmed, PaymentRecorded, PaymentRejected
from storefront.payments.payment import MpesaNumber, Payment, PaymentStatus


def _record(**overrides):
    defaults = {"order_id": "ord-001", "amount": 270.0, "mpesa_number": "0712345678"}
    defaults.update(overrides)
    return Payment.record(**defaults)


class TestMpesaNumber:
    @pytest.mark.parametrize(
        "raw",
        ["0712345678", "+254712345678", "254712345678", "712345678", "0712 345 678", "0712-345-678"],
    )
    def test_safaricom_spellings(self, raw):
        assert MpesaNumber.parse(raw).number == "254712345678"

    def test_new_prefix(self):
        assert MpesaNumber.parse("0112345678").number == "254112345678"

    @pytest.mark.parametrize("raw", ["12345", "0812345678", "+1 555 010 0000", "abc"])
    def test_invalid_numbers(self, raw):
        with pytest.raises(ValidationError):
            MpesaNumber.parse(raw)


class TestRecordPayment:
    def test_new_payment_is_pending(self):
        payment = _record()
        assert payment.status == PaymentStatus.PENDING.value
        assert payment.payment_method == "mpesa"
        assert payment.mpesa_number.number == "254712345678"

    def test_raises_payment_recorded(self):
        payment = _record()
        assert isinstance(payment._events[0], PaymentRecorded)
        assert payment._events[0].amount == 270.0

    def test_number_is_optional(self):
        assert _record(mpesa_number=None).mpesa_number is None


class TestPaymentStateMachine:
    def test_confirm(self):
        payment = _record()
        payment._events.clear()
        payment.confirm(confirmed_by="admin-001")
        assert payment.status == PaymentStatus.CONFIRMED.value
        assert payment.confirmed_by == "admin-001"
        assert payment.confirmed_at is not None
        assert isinstance(payment._events[0], PaymentConfirmed)

    def test_reject(self):
        payment = _record()
        payment._events.clear()
        payment.reject()
        assert payment.status == PaymentStatus.REJECTED.value
        assert isinstance(payment._events[0], PaymentRejected)

    def test_cannot_confirm_twice(self):
        payment = _record()
        payment.confirm(confirmed_by="admin-001")
        with pytest.raises(ValidationError) as exc:
            payment.confirm(confirmed_by="admin-002")
        assert exc.value.messages["status"] == ["Payment is already confirmed"]

    def test_cannot_reject_confirmed(self):
        payment = _record()
        payment.confirm(confirmed_by="admin-001")
        with pytest.raises(ValidationError):
            payment.reject()

    def test_cannot_confirm_rejected(self):
        payment = _record()
        payment.reject()
        with pytest.raises(ValidationError):
            payment.confirm(confirmed_by="admin-001")
