"""Errors raised by checkout adapters when a collaborator faults.

A declined charge is not an error; it is reported through
``ChargeResult.success``. These exceptions cover transport-level failures,
which the checkout service lets propagate to its caller.
"""


class CheckoutError(Exception):
    """Base class for collaborator faults during checkout."""


class PaymentGatewayError(CheckoutError):
    """The payment charger could not be reached or answered abnormally."""


class NotificationDeliveryError(CheckoutError):
    """The notifier failed to hand a message over for delivery."""
