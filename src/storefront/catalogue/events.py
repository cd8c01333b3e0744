"""Domain events for the Product aggregate."""

from protean.fields import Float, Identifier, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    category = String(required=True)
    price = Float(required=True)


@storefront.event(part_of="Product")
class ProductUpdated:
    """Product details were edited from the admin dashboard."""

    __version__ = 1

    product_id = Identifier(required=True)
    changed_fields = Text(required=True)  # JSON list of field names
    price = Float(required=True)


@storefront.event(part_of="Product")
class ProductImageChanged:
    __version__ = 1

    product_id = Identifier(required=True)
    image_url = String()
