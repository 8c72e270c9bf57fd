"""Order store port: persists the Order for a successfully charged checkout."""

from abc import ABC, abstractmethod
from decimal import Decimal

from checkout.customer.customer import Customer
from checkout.order.order import Order


class OrderStore(ABC):
    """Abstract interface for order persistence adapters."""

    @abstractmethod
    async def save(self, amount: Decimal, customer: Customer) -> Order:
        """Persist an order for ``amount`` charged to ``customer``.

        Returns:
            The stored Order, with its identifier assigned.
        """
        ...
