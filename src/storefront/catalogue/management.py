"""Product management from the admin dashboard: commands and handler."""

import json

import structlog
from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    category = String(required=True, max_length=50)
    sizes = Text()  # JSON list of sizes
    color = String(max_length=50)
    brand = String(max_length=100)
    image_url = String(max_length=1000)
    stock_quantity = Integer(default=0)
    rating = Float(default=0.0)
    is_featured = Boolean(default=False)


@storefront.command(part_of="Product")
class UpdateProduct:
    """Edit a product. Fields left empty keep their current value."""

    product_id = Identifier(required=True)
    name = String(max_length=255)
    description = Text()
    price = Float(min_value=0.0)
    category = String(max_length=50)
    sizes = Text()  # JSON list of sizes
    color = String(max_length=50)
    brand = String(max_length=100)
    stock_quantity = Integer()
    rating = Float()
    is_featured = Boolean()


@storefront.command(part_of="Product")
class SetProductImage:
    product_id = Identifier(required=True)
    image_url = String(required=True, max_length=1000)


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id = Identifier(required=True)


def _decode_sizes(raw):
    if raw is None:
        return None
    return json.loads(raw) if isinstance(raw, str) else raw


@storefront.command_handler(part_of=Product)
class ManageProductsHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.add(
            name=command.name,
            description=command.description,
            price=command.price,
            category=command.category,
            sizes=_decode_sizes(command.sizes),
            color=command.color,
            brand=command.brand,
            image_url=command.image_url,
            stock_quantity=command.stock_quantity,
            rating=command.rating,
            is_featured=command.is_featured,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        changes = {
            name: getattr(command, name)
            for name in (
                "name",
                "description",
                "price",
                "category",
                "color",
                "brand",
                "stock_quantity",
                "rating",
                "is_featured",
            )
            if getattr(command, name) is not None
        }
        if command.sizes is not None:
            changes["sizes"] = _decode_sizes(command.sizes)

        product.update(**changes)
        repo.add(product)

    @handle(SetProductImage)
    def set_product_image(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.set_image(command.image_url)
        repo.add(product)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)
        logger.info("Product deleted", product_id=str(command.product_id))
