"""Checkout service: turns a Cart into a persisted, notified Order.

Flow:
    1. Price the cart (subtotal less the tier discount)
    2. Charge the customer
    3a. Declined → stop, nothing stored, nothing sent, return None
    3b. Approved → store the Order, email the customer, return the stored Order

Collaborators are injected ports. Faults raised by any of them propagate
to the caller untouched; there is no retry and no compensation, so an Order
stored before a failed email stays stored.
"""

from checkout.cart.cart import Cart
from checkout.channel.notifier_port import Notifier
from checkout.gateway.port import PaymentCharger
from checkout.order.order import Order
from checkout.store.port import OrderStore
from checkout.templates.order_approved import OrderApprovedTemplate
from checkout.utils.logging import add_context, get_logger, reset_context

logger = get_logger(__name__)


class CheckoutService:
    """Sequences charge, persistence and notification for one cart at a time.

    Holds nothing but its ports, so concurrent ``process_order`` calls for
    different carts do not interfere.
    """

    def __init__(self, charger: PaymentCharger, store: OrderStore, notifier: Notifier) -> None:
        self.charger = charger
        self.store = store
        self.notifier = notifier

    async def process_order(self, cart: Cart) -> Order | None:
        # customer_id rides on every log event emitted while this cart is processed
        tokens = add_context(customer_id=str(cart.customer.id))
        try:
            return await self._process(cart)
        finally:
            reset_context(tokens)

    async def _process(self, cart: Cart) -> Order | None:
        customer = cart.customer
        total = cart.total

        log = logger.bind(
            tier=customer.tier,
            item_count=len(cart.items),
            subtotal=str(cart.subtotal),
            total=str(total),
        )
        log.info("Charging customer")

        try:
            result = await self.charger.charge(total, customer)
        except Exception:
            log.exception("Charge attempt failed")
            raise

        if not result.success:
            log.warning("Charge declined", failure_reason=result.failure_reason)
            return None

        log = log.bind(transaction_id=result.transaction_id)

        try:
            order = await self.store.save(total, customer)
        except Exception:
            log.exception("Order could not be stored after a successful charge")
            raise

        log = log.bind(order_id=str(order.id))
        message = OrderApprovedTemplate.render(
            {
                "order_id": order.id,
                "customer_name": customer.name,
                "total": total,
            }
        )

        try:
            await self.notifier.send(customer.email, message["subject"], message["body"])
        except Exception:
            log.exception("Order confirmation email failed; order remains stored")
            raise

        log.info("Order placed")
        return order
