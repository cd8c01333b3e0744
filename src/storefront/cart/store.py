"""Cart store: the explicitly owned container around the cart reducer.

Screens that need the cart are handed the store; they read ``state`` and
change it only through ``dispatch``. Subscribers hear about every change.
"""

from collections.abc import Callable

import structlog

from storefront.cart.actions import AddItem, ClearCart, RemoveItem, UpdateQuantity
from storefront.cart.reducer import apply
from storefront.cart.state import CartState

logger = structlog.get_logger(__name__)

Subscriber = Callable[[CartState], None]


class CartStore:
    def __init__(self, state: CartState | None = None) -> None:
        self._state = state if state is not None else CartState.empty()
        self._subscribers: list[Subscriber] = []

    @property
    def state(self) -> CartState:
        return self._state

    def dispatch(self, action) -> CartState:
        previous = self._state
        self._state = apply(previous, action)

        logger.debug(
            "Cart action applied",
            action=type(action).__name__,
            item_count=self._state.item_count,
            total=self._state.total,
        )

        if self._state != previous:
            for subscriber in list(self._subscribers):
                subscriber(self._state)
        return self._state

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """Register ``subscriber`` and return a callable that removes it."""
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    # -------------------------------------------------------------------
    # Shorthands for the four actions
    # -------------------------------------------------------------------
    def add_item(self, product_id, name, price, image=None, size=None, quantity=1) -> CartState:
        return self.dispatch(
            AddItem(
                product_id=product_id,
                name=name,
                price=price,
                image=image,
                size=size,
                quantity=quantity,
            )
        )

    def update_quantity(self, product_id, quantity) -> CartState:
        return self.dispatch(UpdateQuantity(product_id=product_id, quantity=quantity))

    def remove_item(self, product_id) -> CartState:
        return self.dispatch(RemoveItem(product_id=product_id))

    def clear(self) -> CartState:
        return self.dispatch(ClearCart())


class CartRegistry:
    """Process-local carts keyed by browser session.

    Carts are not persisted; they live as long as the process does. A store is
    created on the first change to a session's cart and dropped once the cart
    is cleared or checked out.
    """

    def __init__(self) -> None:
        self._stores: dict[str, CartStore] = {}

    def get(self, session_key: str) -> CartStore:
        store = self._stores.get(session_key)
        if store is None:
            store = CartStore()
            self._stores[session_key] = store
        return store

    def peek(self, session_key: str) -> CartStore | None:
        """Return the session's store without creating one."""
        return self._stores.get(session_key)

    def discard(self, session_key: str) -> None:
        self._stores.pop(session_key, None)

    def __len__(self) -> int:
        return len(self._stores)
