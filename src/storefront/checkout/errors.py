"""Checkout failures.

Each failure carries the title and description shown to the shopper. None of
them is fatal: the cart is left as it was and the shopper can try again.
"""


class CheckoutError(Exception):
    title = "Error"
    description = "Something went wrong."

    def __init__(self, description: str | None = None) -> None:
        if description is not None:
            self.description = description
        super().__init__(self.description)


class AuthenticationRequired(CheckoutError):
    title = "Authentication required"
    description = "Please sign in to place an order"


class ValidationFailed(CheckoutError):
    title = "Missing information"
    description = "Please fill in all required fields"

    def __init__(self, errors: dict[str, list[str]], description: str | None = None) -> None:
        self.errors = errors
        super().__init__(description)


class EmptyCart(CheckoutError):
    title = "Empty cart"
    description = "Your cart is empty"


class RemoteWriteFailed(CheckoutError):
    """A remote write failed part way through placing the order.

    ``stage`` is ``"order"`` when the header could not be created and
    ``"items"`` when the header exists (``order_id``) but its items do not.
    """

    title = "Error"
    description = "Failed to place order. Please try again."

    def __init__(self, stage: str, order_id: str | None = None) -> None:
        self.stage = stage
        self.order_id = order_id
        super().__init__()
