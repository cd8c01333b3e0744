"""Admin dashboard actions.

Each action checks that the signed-in actor is an admin, runs the matching
command and reports the outcome the way the dashboard shows it: a success or
an error notification. Failures never escape; the action returns False.
"""

import json

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from storefront.catalogue.management import AddProduct, DeleteProduct, SetProductImage, UpdateProduct
from storefront.identity.management import DeleteProfile, PromoteToAdmin, RevokeAdmin
from storefront.identity.session.port import SessionProvider
from storefront.notifications import NotificationChannel
from storefront.orders.status import UpdateOrderStatus
from storefront.payments.confirmation import ConfirmPayment, RejectPayment

logger = structlog.get_logger(__name__)


class AdminConsole:
    """Admin actions for the signed-in actor of ``session``.

    ``last_result`` holds what the last successful command returned, such as
    the id of a newly added product.
    """

    def __init__(self, session: SessionProvider, notifier: NotificationChannel) -> None:
        self.session = session
        self.notifier = notifier
        self.last_result = None

    def _run(self, command_factory, success: str, failure: str) -> bool:
        actor = self.session.current_actor()
        if actor is None or not actor.is_admin:
            self.notifier.error("Access denied", "Admin privileges are required")
            return False

        try:
            self.last_result = current_domain.process(command_factory(actor), asynchronous=False)
        except (ValidationError, ObjectNotFoundError) as exc:
            logger.warning("Admin action failed", action=failure, actor=actor.user_id, error=str(exc))
            self.notifier.error("Error", failure)
            return False

        self.notifier.success("Success", success)
        return True

    # -------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------
    def update_order_status(self, order_id, status) -> bool:
        return self._run(
            lambda actor: UpdateOrderStatus(order_id=order_id, status=status),
            "Order status updated successfully",
            "Failed to update order status",
        )

    # -------------------------------------------------------------------
    # Payments
    # -------------------------------------------------------------------
    def confirm_payment(self, payment_id) -> bool:
        return self._run(
            lambda actor: ConfirmPayment(payment_id=payment_id, confirmed_by=actor.user_id),
            "Payment confirmed successfully",
            "Failed to confirm payment",
        )

    def reject_payment(self, payment_id) -> bool:
        return self._run(
            lambda actor: RejectPayment(payment_id=payment_id),
            "Payment rejected",
            "Failed to reject payment",
        )

    # -------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------
    def promote_to_admin(self, user_id) -> bool:
        return self._run(
            lambda actor: PromoteToAdmin(user_id=user_id),
            "User promoted to admin successfully",
            "Failed to promote user to admin",
        )

    def remove_admin(self, user_id) -> bool:
        return self._run(
            lambda actor: RevokeAdmin(user_id=user_id),
            "Admin privileges removed successfully",
            "Failed to remove admin privileges",
        )

    def delete_user(self, user_id) -> bool:
        return self._run(
            lambda actor: DeleteProfile(user_id=user_id),
            "User deleted successfully",
            "Failed to delete user",
        )

    # -------------------------------------------------------------------
    # Products
    # -------------------------------------------------------------------
    def add_product(self, name, price, category, sizes=None, **details) -> bool:
        return self._run(
            lambda actor: AddProduct(
                name=name,
                price=price,
                category=category,
                sizes=json.dumps(list(sizes or [])),
                **details,
            ),
            "Product added successfully",
            "Failed to save product",
        )

    def update_product(self, product_id, sizes=None, **changes) -> bool:
        if sizes is not None:
            changes["sizes"] = json.dumps(list(sizes))
        return self._run(
            lambda actor: UpdateProduct(product_id=product_id, **changes),
            "Product updated successfully",
            "Failed to save product",
        )

    def set_product_image(self, product_id, image_url) -> bool:
        return self._run(
            lambda actor: SetProductImage(product_id=product_id, image_url=image_url),
            "Product image updated successfully",
            "Failed to upload image",
        )

    def delete_product(self, product_id) -> bool:
        return self._run(
            lambda actor: DeleteProduct(product_id=product_id),
            "Product deleted successfully",
            "Failed to delete product",
        )
