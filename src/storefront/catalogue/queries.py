"""Catalogue reads for the shop pages."""

from protean.utils.globals import current_domain

from storefront.catalogue.product import Product

QUERY_LIMIT = 1000


def list_products(category: str | None = None) -> list[Product]:
    """Products, newest first, optionally restricted to one category."""
    query = current_domain.repository_for(Product)._dao.query
    if category:
        query = query.filter(category=category)
    products = query.limit(QUERY_LIMIT).all().items
    return sorted(products, key=lambda product: product.created_at, reverse=True)


def featured_products(limit: int = 8) -> list[Product]:
    query = current_domain.repository_for(Product)._dao.query
    products = query.filter(is_featured=True).limit(QUERY_LIMIT).all().items
    return sorted(products, key=lambda product: product.created_at, reverse=True)[:limit]


def get_product(product_id) -> Product:
    return current_domain.repository_for(Product).get(product_id)
