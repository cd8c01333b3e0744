"""Adding catalogue products to the cart from a product page."""

from storefront.cart.actions import normalize_size
from storefront.cart.store import CartStore
from storefront.notifications import NotificationChannel


def add_product_to_cart(
    store: CartStore,
    product,
    notifier: NotificationChannel,
    size=None,
    quantity: int = 1,
) -> bool:
    """Put ``quantity`` of ``product`` in the cart, in ``size`` when it has sizes.

    Products that come in sizes cannot be added without one. Returns whether
    the item was added; the outcome is always reported on ``notifier``.
    """
    size = normalize_size(size)
    options = product.size_options

    if options and size is None:
        notifier.error("Please select a size", "You need to select a size before adding to cart.")
        return False
    if options and size not in options:
        notifier.error("Size unavailable", f"{product.name} is not available in size {size}.")
        return False

    store.add_item(
        product_id=product.id,
        name=product.name,
        price=product.price,
        image=product.image_url,
        size=size,
        quantity=quantity,
    )
    notifier.success("Added to cart", f"{product.name} has been added to your cart.")
    return True
