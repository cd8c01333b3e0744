"""Cart state: line items and the totals derived from them."""

from dataclasses import dataclass

from storefront.cart.actions import normalize_size


@dataclass(frozen=True)
class LineItem:
    """One (product, size) entry in the cart.

    ``name``, ``unit_price`` and ``image`` are captured when the product is
    added, so the cart can be rendered and checked out without a catalogue
    lookup.
    """

    product_id: str
    name: str
    unit_price: float
    quantity: int
    image: str | None = None
    size: str | None = None

    @property
    def key(self) -> tuple[str, str | None]:
        return (self.product_id, self.size)

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "name": self.name,
            "unit_price": self.unit_price,
            "quantity": self.quantity,
            "image": self.image,
            "size": self.size,
        }


@dataclass(frozen=True)
class CartState:
    """Immutable snapshot of the cart.

    ``total`` and ``item_count`` are denormalised for display. They are only
    ever produced by ``from_items``, which recomputes both from the line items.
    """

    items: tuple[LineItem, ...] = ()
    total: float = 0.0
    item_count: int = 0

    @classmethod
    def empty(cls) -> "CartState":
        return cls()

    @classmethod
    def from_items(cls, items) -> "CartState":
        items = tuple(items)
        return cls(
            items=items,
            total=sum(item.unit_price * item.quantity for item in items),
            item_count=sum(item.quantity for item in items),
        )

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find(self, product_id, size=None) -> LineItem | None:
        key = (str(product_id), normalize_size(size))
        return next((item for item in self.items if item.key == key), None)

    def to_dict(self) -> dict:
        return {
            "items": [item.to_dict() for item in self.items],
            "total": self.total,
            "item_count": self.item_count,
        }
