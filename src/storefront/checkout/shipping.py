"""Shipping details collected at checkout."""

from dataclasses import asdict, dataclass, fields

from storefront.checkout.errors import ValidationFailed

REQUIRED_FIELDS = ("first_name", "last_name", "email", "address", "city", "county")

PAYMENT_METHODS = ("credit-card", "paypal", "bank-transfer", "mpesa")


@dataclass
class ShippingForm:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    address: str = ""
    city: str = ""
    county: str = "Nairobi"
    postal_code: str = ""
    country: str = "Kenya"

    @classmethod
    def from_dict(cls, data: dict) -> "ShippingForm":
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known and value is not None})

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_FIELDS if not str(getattr(self, name) or "").strip()]

    def validate(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise ValidationFailed({name: ["This field is required"] for name in missing})

    def snapshot(self) -> dict:
        """The address as it is stored on the order, with whitespace trimmed."""
        return {key: str(value or "").strip() for key, value in asdict(self).items()}


def validate_payment_method(payment_method: str) -> None:
    if payment_method not in PAYMENT_METHODS:
        raise ValidationFailed(
            {"payment_method": [f"Unsupported payment method: {payment_method}"]},
            description="Please choose a supported payment method",
        )
