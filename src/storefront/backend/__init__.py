"""Order backend factory.

get_backend() / set_backend() swap the place orders are written to:
- RepositoryOrderBackend (default) writes through the domain repositories
- FakeOrderBackend records calls and can simulate failures
"""

from storefront.backend.fake_adapter import FakeOrderBackend
from storefront.backend.port import BackendError, OrderBackend, OrderHeader, OrderItemRow

_current_backend: OrderBackend | None = None


def get_backend() -> OrderBackend:
    """Return the active order backend. Defaults to RepositoryOrderBackend."""
    global _current_backend
    if _current_backend is None:
        from storefront.backend.repository_adapter import RepositoryOrderBackend

        _current_backend = RepositoryOrderBackend()
    return _current_backend


def set_backend(backend: OrderBackend) -> None:
    global _current_backend
    _current_backend = backend


def reset_backend() -> None:
    global _current_backend
    _current_backend = None


__all__ = [
    "BackendError",
    "FakeOrderBackend",
    "OrderBackend",
    "OrderHeader",
    "OrderItemRow",
    "get_backend",
    "reset_backend",
    "set_backend",
]
