from decimal import Decimal

import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def checkout_bed():
    from checkout.domain import checkout

    bed = DomainFixture(checkout)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(checkout_bed):
    with checkout_bed.domain_context():
        yield


class CustomerMother:
    """Canonical customers used across checkout tests."""

    @staticmethod
    def a_standard_customer():
        from checkout.customer.customer import Customer, CustomerTier

        return Customer(
            name="Usuario Padrao",
            email="padrao@email.com",
            tier=CustomerTier.STANDARD.value,
        )

    @staticmethod
    def a_premium_customer():
        from checkout.customer.customer import Customer, CustomerTier

        return Customer(
            name="Usuario Premium",
            email="premium@email.com",
            tier=CustomerTier.PREMIUM.value,
        )


class CartBuilder:
    """Fluent cart builder: a standard customer with one 100.00 item unless told otherwise."""

    def __init__(self):
        from checkout.cart.cart import CartItem

        self.customer = CustomerMother.a_standard_customer()
        self.items = [CartItem.priced("Item Padrao", Decimal("100.00"))]

    @classmethod
    def a_cart(cls):
        return cls()

    def with_customer(self, customer):
        self.customer = customer
        return self

    def with_items(self, items):
        self.items = list(items)
        return self

    def with_prices(self, *prices):
        from checkout.cart.cart import CartItem

        self.items = [CartItem.priced(f"Item {i}", price) for i, price in enumerate(prices, start=1)]
        return self

    def empty(self):
        self.items = []
        return self

    def build(self):
        from checkout.cart.cart import Cart

        return Cart(customer=self.customer, items=self.items)


@pytest.fixture
def customers():
    return CustomerMother


@pytest.fixture
def cart_builder():
    return CartBuilder.a_cart()


@pytest.fixture
def charger():
    from checkout.gateway import FakePaymentCharger

    return FakePaymentCharger()


@pytest.fixture
def store():
    from checkout.store import RepositoryOrderStore

    return RepositoryOrderStore()


@pytest.fixture
def notifier():
    from checkout.channel import FakeEmailNotifier

    return FakeEmailNotifier()


@pytest.fixture
def service(charger, store, notifier):
    from checkout.service import CheckoutService

    return CheckoutService(charger=charger, store=store, notifier=notifier)
