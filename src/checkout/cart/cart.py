"""Cart and CartItem: the input to a checkout.

A cart is assembled by the caller, handed to the checkout service once and
then discarded; it is never persisted, so it is a plain frozen container
around the customer and the priced items.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from protean.fields import Integer, String

from checkout.cart import pricing
from checkout.customer.customer import Customer
from checkout.domain import checkout


@checkout.value_object
class CartItem:
    """A single priced line in a cart.

    There is no quantity: buying the same product twice means two entries.
    """

    name = String(required=True, max_length=255)
    unit_price_cents = Integer(required=True, min_value=0)

    @classmethod
    def priced(cls, name, unit_price):
        """Build an item from a currency amount such as ``"100.00"`` or ``Decimal("9.90")``."""
        return cls(name=name, unit_price_cents=pricing.to_cents(unit_price, field="unit_price"))

    @property
    def unit_price(self) -> Decimal:
        return pricing.from_cents(self.unit_price_cents)


@dataclass(frozen=True)
class Cart:
    customer: Customer
    items: tuple[CartItem, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def subtotal_cents(self) -> int:
        return pricing.subtotal_cents(item.unit_price_cents for item in self.items)

    @property
    def total_cents(self) -> int:
        return pricing.apply_tier_discount(self.subtotal_cents, self.customer.tier)

    @property
    def subtotal(self) -> Decimal:
        return pricing.from_cents(self.subtotal_cents)

    @property
    def total(self) -> Decimal:
        """Amount to charge: subtotal less the customer's tier discount."""
        return pricing.from_cents(self.total_cents)

    def is_empty(self) -> bool:
        return not self.items
