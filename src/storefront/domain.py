"""Storefront domain: catalogue, cart checkout, orders, payments and users.

The hosted backend of the shop is modelled as this single Protean domain:
its repositories are the remote tables the storefront writes to.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

storefront = Domain(name="storefront")
