import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    from storefront.backend import reset_backend

    with storefront_bed.domain_context():
        yield

        from protean import current_domain

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()

        # Drain event stores
        current_domain.event_store.store._data_reset()

    reset_backend()


@pytest.fixture()
def fake_backend():
    from storefront.backend import FakeOrderBackend, set_backend

    backend = FakeOrderBackend()
    set_backend(backend)
    return backend


@pytest.fixture()
def notifier():
    from storefront.notifications import NotificationChannel

    return NotificationChannel()


@pytest.fixture()
def cart():
    from storefront.cart.store import CartStore

    return CartStore()


@pytest.fixture()
def shopper():
    from storefront.identity.session import Actor, MemorySession

    return MemorySession(Actor(user_id="user-001", email="amina@example.com"))


@pytest.fixture()
def shipping_form():
    from storefront.checkout.shipping import ShippingForm

    return ShippingForm(
        first_name="Amina",
        last_name="Otieno",
        email="amina@example.com",
        address="12 Moi Avenue",
        city="Nairobi",
        county="Nairobi",
    )
