"""Product aggregate: an item of apparel offered in the shop."""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String, Text

from storefront.domain import storefront

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


class Category(Enum):
    SHOES = "shoes"
    JEANS = "jeans"
    JACKETS = "jackets"
    SHORTS = "shorts"


CATEGORY_NAMES = {
    Category.SHOES.value: "Shoes",
    Category.JEANS.value: "Jeans",
    Category.JACKETS.value: "Jackets",
    Category.SHORTS.value: "Shorts",
}


def _encode_sizes(sizes) -> str:
    if not sizes:
        return json.dumps([])
    if isinstance(sizes, str):
        sizes = [part for part in sizes.split(",")]
    return json.dumps([str(size).strip() for size in sizes if str(size).strip()])


@storefront.aggregate
class Product:
    """A product in the catalogue.

    ``sizes`` holds the JSON list of sizes the product is offered in; an empty
    list means the product is sold without a size.
    """

    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    category = String(required=True, choices=Category)
    sizes = Text()
    color = String(max_length=50)
    brand = String(max_length=100)
    image_url = String(max_length=1000)
    stock_quantity = Integer(default=0, min_value=0)
    rating = Float(default=0.0)
    is_featured = Boolean(default=False)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def rating_must_be_between_zero_and_five(self):
        if self.rating is not None and not 0.0 <= self.rating <= 5.0:
            raise ValidationError({"rating": ["Rating must be between 0 and 5"]})

    @classmethod
    def add(
        cls,
        name,
        price,
        category,
        description=None,
        sizes=None,
        color=None,
        brand=None,
        image_url=None,
        stock_quantity=0,
        rating=0.0,
        is_featured=False,
    ):
        from storefront.catalogue.events import ProductAdded

        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=price,
            category=category,
            sizes=_encode_sizes(sizes),
            color=color,
            brand=brand,
            image_url=image_url,
            stock_quantity=stock_quantity or 0,
            rating=rating or 0.0,
            is_featured=bool(is_featured),
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=name,
                category=category,
                price=price,
            )
        )
        return product

    @property
    def size_options(self) -> list[str]:
        return json.loads(self.sizes) if self.sizes else []

    @property
    def category_name(self) -> str:
        return CATEGORY_NAMES.get(self.category, self.category)

    @property
    def in_stock(self) -> bool:
        return (self.stock_quantity or 0) > 0

    def update(
        self,
        name=_UNSET,
        description=_UNSET,
        price=_UNSET,
        category=_UNSET,
        sizes=_UNSET,
        color=_UNSET,
        brand=_UNSET,
        stock_quantity=_UNSET,
        rating=_UNSET,
        is_featured=_UNSET,
    ):
        """Apply the given changes; arguments left out keep their value."""
        from storefront.catalogue.events import ProductUpdated

        changes = {
            "name": name,
            "description": description,
            "price": price,
            "category": category,
            "color": color,
            "brand": brand,
            "stock_quantity": stock_quantity,
            "rating": rating,
            "is_featured": is_featured,
        }
        changed = []
        for field_name, value in changes.items():
            if value is not _UNSET:
                setattr(self, field_name, value)
                changed.append(field_name)
        if sizes is not _UNSET:
            self.sizes = _encode_sizes(sizes)
            changed.append("sizes")

        if not changed:
            return

        self.updated_at = datetime.now(UTC)
        self.raise_(
            ProductUpdated(
                product_id=self.id,
                changed_fields=json.dumps(changed),
                price=self.price,
            )
        )

    def set_image(self, image_url):
        from storefront.catalogue.events import ProductImageChanged

        self.image_url = image_url
        self.updated_at = datetime.now(UTC)
        self.raise_(ProductImageChanged(product_id=self.id, image_url=image_url))
