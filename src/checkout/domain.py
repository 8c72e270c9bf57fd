"""Checkout bounded context: turns a customer's cart into a paid, persisted Order.

Holds the Customer and Order aggregates, the cart and pricing rules, and the
checkout service that sequences payment, persistence and the confirmation email
through pluggable ports.
"""

from protean.domain import Domain

from checkout.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_dir="logs", log_file_prefix="checkout")

logger = get_logger(__name__)

# Domain Composition Root
checkout = Domain(name="checkout")
