"""Actions accepted by the cart reducer."""

from dataclasses import dataclass

from protean.exceptions import ValidationError


def normalize_size(size) -> str | None:
    """Treat a missing and a blank size as the same thing: no size."""
    if size is None:
        return None
    size = str(size).strip()
    return size or None


@dataclass(frozen=True)
class AddItem:
    product_id: str
    name: str
    price: float
    image: str | None = None
    size: str | None = None
    quantity: int = 1

    def __post_init__(self):
        if self.quantity is None or int(self.quantity) < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if self.price is None or float(self.price) < 0:
            raise ValidationError({"price": ["Price cannot be negative"]})

        object.__setattr__(self, "product_id", str(self.product_id))
        object.__setattr__(self, "size", normalize_size(self.size))
        object.__setattr__(self, "quantity", int(self.quantity))
        object.__setattr__(self, "price", float(self.price))


@dataclass(frozen=True)
class UpdateQuantity:
    """Set the quantity of every line carrying ``product_id``.

    Zero and negative quantities are accepted and kept on the line; removing
    a line is the job of ``RemoveItem``.
    """

    product_id: str
    quantity: int

    def __post_init__(self):
        object.__setattr__(self, "product_id", str(self.product_id))
        object.__setattr__(self, "quantity", int(self.quantity))


@dataclass(frozen=True)
class RemoveItem:
    product_id: str

    def __post_init__(self):
        object.__setattr__(self, "product_id", str(self.product_id))


@dataclass(frozen=True)
class ClearCart:
    pass
