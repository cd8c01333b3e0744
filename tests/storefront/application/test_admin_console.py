"""Application tests for the admin dashboard actions and read models."""

import pytest
from protean import current_domain
from storefront.admin.console import AdminConsole
from storefront.catalogue.queries import get_product, list_products
from storefront.checkout.submission import OrderSubmission
from storefront.identity.management import RegisterProfile
from storefront.identity.profiles import find_profile
from storefront.identity.session import Actor, MemorySession
from storefront.orders.history import all_orders, dashboard_stats, get_order, orders_for_user
from storefront.payments.confirmation import RecordMpesaPayment
from storefront.payments.listing import list_payments


@pytest.fixture()
def admin_session():
    return MemorySession(Actor(user_id="admin-001", email="admin@example.com", role="admin"))


@pytest.fixture()
def console(admin_session, notifier):
    return AdminConsole(admin_session, notifier)


def _register(user_id, email):
    current_domain.process(RegisterProfile(user_id=user_id, email=email), asynchronous=False)


def _checkout(cart, shopper, notifier, shipping_form):
    cart.add_item(product_id="A", name="Denim Jacket", price=100.0, quantity=2)
    cart.add_item(product_id="B", name="Cargo Shorts", price=50.0, size="M")
    result = OrderSubmission(cart=cart, session=shopper, notifier=notifier).submit(shipping_form)
    assert result.ok
    return result.order_id


class TestAccessControl:
    def test_shopper_is_refused(self, shopper, notifier):
        console = AdminConsole(shopper, notifier)

        assert console.add_product("Slim Jeans", 45.0, "jeans") is False

        assert notifier.last.title == "Access denied"
        assert notifier.last.is_error
        assert list_products() == []

    def test_anonymous_is_refused(self, notifier):
        assert AdminConsole(MemorySession(), notifier).delete_user("user-001") is False
        assert notifier.last.title == "Access denied"


class TestProductActions:
    def test_add_product(self, console, notifier):
        assert console.add_product("Slim Jeans", 45.0, "jeans", sizes=["30", "32"], stock_quantity=4) is True

        assert notifier.last.description == "Product added successfully"
        product = get_product(console.last_result)
        assert product.size_options == ["30", "32"]
        assert product.stock_quantity == 4

    def test_invalid_product_reports_failure(self, console, notifier):
        assert console.add_product("Hat", 10.0, "hats") is False
        assert notifier.last.is_error
        assert notifier.last.description == "Failed to save product"

    def test_update_product(self, console, notifier):
        console.add_product("Slim Jeans", 45.0, "jeans", sizes=["30"])
        product_id = console.last_result

        assert console.update_product(product_id, price=40.0, sizes=["30", "34"]) is True

        product = get_product(product_id)
        assert product.price == 40.0
        assert product.size_options == ["30", "34"]
        assert notifier.last.description == "Product updated successfully"

    def test_set_image_and_delete(self, console, notifier):
        console.add_product("Slim Jeans", 45.0, "jeans")
        product_id = console.last_result

        assert console.set_product_image(product_id, "https://cdn.example.com/jeans.jpg") is True
        assert console.delete_product(product_id) is True
        assert notifier.last.description == "Product deleted successfully"
        assert list_products() == []

    def test_delete_missing_product(self, console, notifier):
        assert console.delete_product("missing") is False
        assert notifier.last.description == "Failed to delete product"


class TestUserActions:
    def test_promote_and_remove_admin(self, console, notifier):
        _register("user-002", "baraka@example.com")

        assert console.promote_to_admin("user-002") is True
        assert notifier.last.description == "User promoted to admin successfully"
        assert find_profile("user-002").is_admin

        assert console.remove_admin("user-002") is True
        assert notifier.last.description == "Admin privileges removed successfully"
        assert not find_profile("user-002").is_admin

    def test_delete_user(self, console, notifier):
        _register("user-002", "baraka@example.com")
        assert console.delete_user("user-002") is True
        assert find_profile("user-002") is None
        assert notifier.last.description == "User deleted successfully"

    def test_promote_unknown_user(self, console, notifier):
        assert console.promote_to_admin("nobody") is False
        assert notifier.last.description == "Failed to promote user to admin"


class TestOrderActions:
    def test_update_status(self, console, notifier, cart, shopper, shipping_form):
        order_id = _checkout(cart, shopper, notifier, shipping_form)

        assert console.update_order_status(order_id, "processing") is True
        assert notifier.last.description == "Order status updated successfully"
        assert get_order(order_id).status == "processing"

    def test_correcting_a_status(self, console, cart, shopper, notifier, shipping_form):
        order_id = _checkout(cart, shopper, notifier, shipping_form)

        assert console.update_order_status(order_id, "shipped") is True
        assert console.update_order_status(order_id, "pending") is True
        assert get_order(order_id).status == "pending"

    def test_invalid_status(self, console, notifier, cart, shopper, shipping_form):
        order_id = _checkout(cart, shopper, notifier, shipping_form)

        assert console.update_order_status(order_id, "lost") is False
        assert notifier.last.description == "Failed to update order status"
        assert get_order(order_id).status == "pending"


class TestPaymentActions:
    def test_confirm_payment(self, console, notifier, cart, shopper, shipping_form):
        order_id = _checkout(cart, shopper, notifier, shipping_form)
        payment_id = current_domain.process(
            RecordMpesaPayment(order_id=order_id, mpesa_number="0712345678"), asynchronous=False
        )

        assert console.confirm_payment(payment_id) is True

        assert notifier.last.description == "Payment confirmed successfully"
        [payment] = list_payments()
        assert payment.status == "confirmed"
        assert payment.confirmed_by == "admin-001"
        assert payment.order_reference == order_id[:8]
        assert payment.order_total == 270.0
        assert payment.customer_id == "user-001"
        assert get_order(order_id).status == "processing"

    def test_reject_payment(self, console, notifier, cart, shopper, shipping_form):
        order_id = _checkout(cart, shopper, notifier, shipping_form)
        payment_id = current_domain.process(RecordMpesaPayment(order_id=order_id), asynchronous=False)

        assert console.reject_payment(payment_id) is True
        assert notifier.last.description == "Payment rejected"
        assert list_payments(status="pending") == []
        assert len(list_payments(status="rejected")) == 1

    def test_confirm_twice(self, console, notifier, cart, shopper, shipping_form):
        order_id = _checkout(cart, shopper, notifier, shipping_form)
        payment_id = current_domain.process(RecordMpesaPayment(order_id=order_id), asynchronous=False)

        console.confirm_payment(payment_id)
        assert console.confirm_payment(payment_id) is False
        assert notifier.last.description == "Failed to confirm payment"


class TestReadModels:
    def test_order_history_for_user(self, cart, shopper, notifier, shipping_form):
        order_id = _checkout(cart, shopper, notifier, shipping_form)

        [order] = orders_for_user("user-001")
        assert order.id == order_id
        assert order.reference == order_id[:8]
        assert order.total_amount == 270.0
        assert order.item_count == 3
        assert sorted(line.product_name for line in order.items) == ["Cargo Shorts", "Denim Jacket"]
        assert orders_for_user("someone-else") == []

    def test_all_orders_newest_first(self, cart, shopper, notifier, shipping_form):
        first = _checkout(cart, shopper, notifier, shipping_form)
        second = _checkout(cart, shopper, notifier, shipping_form)
        assert [order.id for order in all_orders()] == [second, first]

    def test_dashboard_stats(self, cart, shopper, notifier, shipping_form):
        _register("user-001", "amina@example.com")
        _checkout(cart, shopper, notifier, shipping_form)
        _checkout(cart, shopper, notifier, shipping_form)

        stats = dashboard_stats()
        assert stats.total_orders == 2
        assert stats.total_revenue == 540.0
        assert stats.total_users == 1

    def test_dashboard_stats_cover_every_page(self, monkeypatch, cart, shopper, notifier, shipping_form):
        monkeypatch.setattr("storefront.orders.history.QUERY_LIMIT", 2)
        for _ in range(5):
            _checkout(cart, shopper, notifier, shipping_form)

        stats = dashboard_stats()
        assert stats.total_orders == 5
        assert stats.total_revenue == 1350.0
