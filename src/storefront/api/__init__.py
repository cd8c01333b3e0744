"""Storefront API package."""

from storefront.api.routes import admin_router, cart_router, order_router, product_router, profile_router

__all__ = ["product_router", "profile_router", "cart_router", "order_router", "admin_router"]
