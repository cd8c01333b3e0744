"""Cart reducer: a pure function of (state, action) to the next state."""

from dataclasses import replace

from storefront.cart.actions import AddItem, ClearCart, RemoveItem, UpdateQuantity
from storefront.cart.state import CartState, LineItem


def _add_item(items, action: AddItem):
    key = (action.product_id, action.size)
    if any(item.key == key for item in items):
        return [replace(item, quantity=item.quantity + action.quantity) if item.key == key else item for item in items]

    return [
        *items,
        LineItem(
            product_id=action.product_id,
            name=action.name,
            unit_price=action.price,
            quantity=action.quantity,
            image=action.image,
            size=action.size,
        ),
    ]


def _update_quantity(items, action: UpdateQuantity):
    return [
        replace(item, quantity=action.quantity) if item.product_id == action.product_id else item for item in items
    ]


def _remove_item(items, action: RemoveItem):
    return [item for item in items if item.product_id != action.product_id]


def apply(state: CartState, action) -> CartState:
    """Return the cart that results from applying ``action`` to ``state``.

    Totals are always rebuilt from the resulting line items, whatever the
    action was.
    """
    items = list(state.items)

    if isinstance(action, AddItem):
        items = _add_item(items, action)
    elif isinstance(action, UpdateQuantity):
        items = _update_quantity(items, action)
    elif isinstance(action, RemoveItem):
        items = _remove_item(items, action)
    elif isinstance(action, ClearCart):
        items = []
    else:
        raise TypeError(f"Unknown cart action: {type(action).__name__}")

    return CartState.from_items(items)
