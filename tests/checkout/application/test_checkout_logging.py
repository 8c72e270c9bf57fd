"""Log events emitted by CheckoutService.process_order."""

import asyncio

import pytest
import structlog
from checkout.exceptions import NotificationDeliveryError, PaymentGatewayError
from checkout.gateway import FakePaymentCharger
from structlog.testing import capture_logs


def _events(logs, name):
    return [entry for entry in logs if entry["event"] == name]


class TestDeclineLogging:
    def test_decline_logged_as_warning_with_reason(self, service, charger, cart_builder):
        charger.configure(should_succeed=False, failure_reason="Insufficient funds")

        with capture_logs() as logs:
            asyncio.run(service.process_order(cart_builder.build()))

        declined = _events(logs, "Charge declined")
        assert len(declined) == 1
        assert declined[0]["log_level"] == "warning"
        assert declined[0]["failure_reason"] == "Insufficient funds"
        assert declined[0]["total"] == "100.00"
        assert _events(logs, "Order placed") == []


class TestFaultLogging:
    def test_charger_fault_logged_as_error(self, service, charger, cart_builder):
        charger.fail_with("Gateway timeout")

        with capture_logs() as logs, pytest.raises(PaymentGatewayError):
            asyncio.run(service.process_order(cart_builder.build()))

        failed = _events(logs, "Charge attempt failed")
        assert len(failed) == 1
        assert failed[0]["log_level"] == "error"
        assert failed[0]["exc_info"] is True

    def test_notifier_fault_logged_as_error_before_propagating(self, service, notifier, cart_builder):
        notifier.configure(should_succeed=False, failure_reason="SMTP timeout")

        with capture_logs() as logs, pytest.raises(NotificationDeliveryError):
            asyncio.run(service.process_order(cart_builder.build()))

        failed = _events(logs, "Order confirmation email failed; order remains stored")
        assert len(failed) == 1
        assert failed[0]["log_level"] == "error"
        assert failed[0]["exc_info"] is True
        assert failed[0]["order_id"]
        assert _events(logs, "Order placed") == []


class TestSuccessLogging:
    def test_order_placed_logged_with_order_id(self, service, cart_builder):
        with capture_logs() as logs:
            order = asyncio.run(service.process_order(cart_builder.build()))

        placed = _events(logs, "Order placed")
        assert len(placed) == 1
        assert placed[0]["log_level"] == "info"
        assert placed[0]["order_id"] == str(order.id)
        assert placed[0]["transaction_id"].startswith("fake_txn_")


class ContextRecordingCharger(FakePaymentCharger):
    """Charger that remembers the log context visible while charging."""

    def __init__(self):
        super().__init__()
        self.seen_context = None

    async def charge(self, amount, customer):
        self.seen_context = structlog.contextvars.get_contextvars()
        return await super().charge(amount, customer)


class TestLogContext:
    def test_customer_id_bound_while_processing(self, store, notifier, cart_builder):
        from checkout.service import CheckoutService

        charger = ContextRecordingCharger()
        service = CheckoutService(charger=charger, store=store, notifier=notifier)
        cart = cart_builder.build()

        asyncio.run(service.process_order(cart))

        assert charger.seen_context["customer_id"] == str(cart.customer.id)

    def test_context_released_after_processing(self, service, charger, cart_builder):
        charger.fail_with()
        outer = structlog.contextvars.bind_contextvars(request_id="req-7")

        async def run_in_caller_context():
            with pytest.raises(PaymentGatewayError):
                await service.process_order(cart_builder.build())
            return structlog.contextvars.get_contextvars()

        try:
            context_after = asyncio.run(run_in_caller_context())
        finally:
            structlog.contextvars.reset_contextvars(**outer)

        assert context_after == {"request_id": "req-7"}
