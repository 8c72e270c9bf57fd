"""Payment charger port (abstract interface).

Defines the contract every payment adapter implements, so the checkout
service can run against a fake in tests and a real gateway in production
without changing.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from checkout.customer.customer import Customer


@dataclass(frozen=True)
class ChargeResult:
    """Result of a charge attempt.

    ``success=False`` is a business decline (card refused, limit exceeded),
    not a fault.
    """

    success: bool
    transaction_id: str | None = None
    failure_reason: str | None = None


class PaymentCharger(ABC):
    """Abstract payment charger interface."""

    @abstractmethod
    async def charge(self, amount: Decimal, customer: Customer) -> ChargeResult:
        """Attempt to charge ``amount`` to ``customer``."""
        ...
