"""Payment charger port and adapters.

- PaymentCharger / ChargeResult: the interface the checkout service depends on
- FakePaymentCharger: in-process adapter for development and tests
"""

from checkout.gateway.fake_adapter import FakePaymentCharger
from checkout.gateway.port import ChargeResult, PaymentCharger

__all__ = ["ChargeResult", "FakePaymentCharger", "PaymentCharger"]
