"""Order aggregate: the persisted record of a successful checkout.

An Order exists only after its charge went through; its amount is exactly
the amount sent to the payment charger.
"""

from datetime import UTC, datetime
from decimal import Decimal

from protean.fields import DateTime, Identifier, Integer, String

from checkout.cart import pricing
from checkout.domain import checkout


@checkout.aggregate
class Order:
    customer_id = Identifier(required=True)
    amount_cents = Integer(required=True, min_value=0)
    currency = String(max_length=3, default=pricing.CURRENCY)
    placed_at = DateTime()

    @classmethod
    def place(cls, customer_id, amount: Decimal):
        """Create an Order for an amount that has already been charged."""
        return cls(
            customer_id=customer_id,
            amount_cents=pricing.to_cents(amount),
            currency=pricing.CURRENCY,
            placed_at=datetime.now(UTC),
        )

    @property
    def amount(self) -> Decimal:
        return pricing.from_cents(self.amount_cents)
