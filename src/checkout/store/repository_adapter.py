"""Order store backed by the active Protean domain's repository.

Uses whatever provider the checkout domain is configured with; by default
that is Protean's in-memory database. A domain context must be active, the
same way command handlers expect one.
"""

from decimal import Decimal

from protean.utils.globals import current_domain

from checkout.customer.customer import Customer
from checkout.order.order import Order
from checkout.store.port import OrderStore


class RepositoryOrderStore(OrderStore):
    async def save(self, amount: Decimal, customer: Customer) -> Order:
        order = Order.place(customer_id=customer.id, amount=amount)
        current_domain.repository_for(Order).add(order)
        return order

    def get(self, order_id) -> Order:
        """Load a previously stored order."""
        return current_domain.repository_for(Order).get(order_id)
