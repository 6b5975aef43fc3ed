"""
Pytest configuration and fixtures for the billdesk billing counter.
"""

import pytest

from billdesk.billing import BillBook, Cart
from billdesk.data import default_customers, default_products
from billdesk.session import ShopSession


@pytest.fixture
def products():
    """Demo catalog keyed by product id."""
    return {product.id: product for product in default_products()}


@pytest.fixture
def customers():
    return {customer.id: customer for customer in default_customers()}


@pytest.fixture
def cart():
    return Cart()


@pytest.fixture
def bills():
    return BillBook()


@pytest.fixture
def session():
    """A fresh in-memory shop session with the demo data loaded."""
    return ShopSession()


class SequenceRandom:
    """Stand-in for random.Random that returns scripted suffixes."""

    def __init__(self, values):
        self.values = list(values)

    def randrange(self, stop):
        return self.values.pop(0) % stop


@pytest.fixture
def scripted_rng():
    return SequenceRandom
