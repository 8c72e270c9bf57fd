"""Composition root for the checkout service.

Adapters are passed in explicitly; anything omitted gets a fresh in-process
default. Nothing is cached at module level, so each caller owns its wiring.
"""

from checkout.channel import FakeEmailNotifier, Notifier
from checkout.gateway import FakePaymentCharger, PaymentCharger
from checkout.service import CheckoutService
from checkout.store import OrderStore, RepositoryOrderStore


def create_checkout_service(
    charger: PaymentCharger | None = None,
    store: OrderStore | None = None,
    notifier: Notifier | None = None,
) -> CheckoutService:
    """Build a CheckoutService, defaulting to the fake charger, repository store and fake email."""
    return CheckoutService(
        charger=charger or FakePaymentCharger(),
        store=store or RepositoryOrderStore(),
        notifier=notifier or FakeEmailNotifier(),
    )
