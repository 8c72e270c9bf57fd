"""Configurable fake payment charger for development and testing.

Simulates a gateway without external calls. It approves by default, can be
configured to decline with a reason, or to fault as if the network failed.
"""

from decimal import Decimal
from uuid import uuid4

from checkout.customer.customer import Customer
from checkout.exceptions import PaymentGatewayError
from checkout.gateway.port import ChargeResult, PaymentCharger


class FakePaymentCharger(PaymentCharger):
    """Configurable fake payment charger."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Card declined"
        self.fault: str | None = None
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Card declined") -> None:
        """Configure charge outcome at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def fail_with(self, message: str = "Gateway unavailable") -> None:
        """Make every following charge raise PaymentGatewayError."""
        self.fault = message

    async def charge(self, amount: Decimal, customer: Customer) -> ChargeResult:
        self.calls.append({"method": "charge", "amount": amount, "customer": customer})

        if self.fault is not None:
            raise PaymentGatewayError(self.fault)

        if self.should_succeed:
            return ChargeResult(
                success=True,
                transaction_id=f"fake_txn_{uuid4().hex[:12]}",
            )
        return ChargeResult(success=False, failure_reason=self.failure_reason)

    def reset(self) -> None:
        """Clear recorded calls and restore the approving default."""
        self.calls.clear()
        self.should_succeed = True
        self.failure_reason = "Card declined"
        self.fault = None
