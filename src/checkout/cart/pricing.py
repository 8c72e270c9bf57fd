"""Cart pricing: subtotal, loyalty-tier discount and BRL formatting.

Amounts live on entities as integer centavos. They are converted to
``Decimal`` (two places) only at port boundaries and for display, so the
10% premium discount never accumulates float rounding drift.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from protean.exceptions import ValidationError

from checkout.customer.customer import CustomerTier

CURRENCY = "BRL"
CURRENCY_SYMBOL = "R$"

CENTS = Decimal("0.01")

# Discount rate per tier; tiers not listed pay full price
TIER_DISCOUNT_RATES = {
    CustomerTier.PREMIUM.value: Decimal("0.10"),
}


def to_cents(amount, field: str = "amount") -> int:
    """Convert a currency amount (str, int, float or Decimal) to integer centavos.

    Raises ValidationError, keyed by ``field``, for anything that is not a finite number.
    """
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise ValidationError({field: [f"Invalid amount: {amount!r}"]}) from None

    if not value.is_finite():
        raise ValidationError({field: [f"Invalid amount: {amount!r}"]})

    value = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    return int(value * 100)


def from_cents(cents: int) -> Decimal:
    """Convert integer centavos back to a two-place Decimal."""
    return (Decimal(cents) / 100).quantize(CENTS)


def subtotal_cents(unit_prices_cents: Iterable[int]) -> int:
    """Sum unit prices; each entry counts once."""
    return sum(unit_prices_cents, 0)


def discount_rate_for(tier: str) -> Decimal:
    return TIER_DISCOUNT_RATES.get(tier, Decimal("0"))


def apply_tier_discount(amount_cents: int, tier: str) -> int:
    """Apply the tier's discount to an amount, rounding half-up to the centavo.

    The discount depends on the tier alone: no stacking, no proration.
    """
    rate = discount_rate_for(tier)
    if not rate:
        return amount_cents

    discounted = Decimal(amount_cents) * (Decimal("1") - rate)
    return int(discounted.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_brl(amount: Decimal) -> str:
    """Format an amount the pt-BR way: ``R$1.234,56``."""
    value = Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)
    us_style = f"{value:,.2f}"
    return CURRENCY_SYMBOL + us_style.translate(str.maketrans({",": ".", ".": ","}))
