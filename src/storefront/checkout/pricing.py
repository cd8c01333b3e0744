"""Checkout pricing and display helpers.

The same tax multiplier is used for the cart summary, the checkout total and
the amount stored on the order, so what the shopper sees is what is charged.
"""

from dataclasses import dataclass

from storefront.config import settings

TAX_RATE = 0.08
TAX_MULTIPLIER = 1.08

# Shown as "Free" at checkout
SHIPPING_COST = 0.0


def tax_amount(subtotal: float) -> float:
    return round(subtotal * TAX_RATE, 2)


def tax_inclusive_total(subtotal: float) -> float:
    return round(subtotal * TAX_MULTIPLIER, 2)


def format_amount(amount: float, currency: str | None = None) -> str:
    return f"{currency or settings.currency} {amount:.2f}"


def order_reference(order_id) -> str:
    """Short form of an order id for display."""
    return str(order_id)[:8]


@dataclass(frozen=True)
class CheckoutSummary:
    subtotal: float
    shipping: float
    tax: float
    total: float
    currency: str


def summarize(cart_state, currency: str | None = None) -> CheckoutSummary:
    return CheckoutSummary(
        subtotal=cart_state.total,
        shipping=SHIPPING_COST,
        tax=tax_amount(cart_state.total),
        total=tax_inclusive_total(cart_state.total),
        currency=currency or settings.currency,
    )
