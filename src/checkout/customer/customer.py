"""Customer aggregate: the buyer behind a cart and the recipient of the order email."""

from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from checkout.domain import checkout


class CustomerTier(Enum):
    """Enumeration of customer loyalty tiers."""

    STANDARD = "Standard"
    PREMIUM = "Premium"


@checkout.aggregate
class Customer:
    """A registered buyer with a contact email and a loyalty tier.

    The tier is a closed set; only PREMIUM customers are eligible for the
    checkout discount. A customer is created upstream and is not modified
    while a checkout is in flight.
    """

    name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    tier = String(choices=CustomerTier, default=CustomerTier.STANDARD.value)

    @invariant.post
    def email_must_not_be_blank(self):
        if self.email is not None and not self.email.strip():
            raise ValidationError({"email": ["Email address cannot be blank"]})

    @property
    def is_premium(self) -> bool:
        return self.tier == CustomerTier.PREMIUM.value
