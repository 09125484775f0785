import pytest

from schemas import Account, Product
from store import create_demo_store


@pytest.fixture
def store():
    return create_demo_store()


@pytest.fixture
def account(store):
    return store.find_account("ivan")


@pytest.fixture
def book():
    return Product(title="Dune", price=99.5, category="Novels", rating=4.9)


@pytest.fixture
def fresh_account():
    return Account(username="olena", password="secret")
