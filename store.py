"""
Store composition root: one catalog, registered accounts, and purchase creation.
"""
import logging
from typing import Iterable, List, Optional

from catalog import Catalog
from schemas import Account, Order, Product

logger = logging.getLogger(__name__)

# Fixed startup data
DEMO_PRODUCTS = [
    {"title": "Book 1", "price": 150, "description": "An engaging book about programming.", "category": "Books", "rating": 4.5},
    {"title": "Book 2", "price": 200, "description": "A book on the history of Ukraine.", "category": "Books", "rating": 4.7},
    {"title": "Book 3", "price": 120, "description": "A mathematics study guide.", "category": "Textbooks", "rating": 3.8},
    {"title": "Book 4", "price": 180, "description": "A novel for teenagers.", "category": "Novels", "rating": 4.2},
]
DEMO_ACCOUNT = {"username": "ivan", "password": "password123"}


class Store:
    def __init__(self, catalog: Optional[Catalog] = None):
        self.catalog = catalog if catalog is not None else Catalog()
        self._accounts: List[Account] = []

    @property
    def products(self) -> List[Product]:
        return list(self.catalog)

    @property
    def accounts(self) -> List[Account]:
        return list(self._accounts)

    # ----- Registration -----

    def add_product(self, product: Product) -> None:
        self.catalog.add(product)
        logger.info("Product added: %s", product.title)

    def add_account(self, account: Account) -> None:
        self._accounts.append(account)
        logger.info("Account registered: %s", account.username)

    def find_account(self, username: str) -> Optional[Account]:
        for account in self._accounts:
            if account.username == username:
                return account
        return None

    # ----- Queries -----

    def search_by_price_range(self, min_price: float, max_price: float) -> List[Product]:
        return self.catalog.search_by_price_range(min_price, max_price)

    def search_by_category(self, name: Optional[str]) -> List[Product]:
        return self.catalog.search_by_category(name)

    def search_by_min_rating(self, min_rating: float) -> List[Product]:
        return self.catalog.search_by_min_rating(min_rating)

    def select_products(self, indices: Iterable[int]) -> List[Product]:
        return self.catalog.select(indices)

    # ----- Orders -----

    def purchase(self, account: Account, selected_products: Iterable[Product]) -> Order:
        """
        Create an order from the selection and append it to the account's history.
        An empty selection still produces an order, with a zero total.
        """
        order = Order.create(selected_products)
        if not order.products:
            logger.warning("Empty order recorded for %s", account.username)
        account.record_order(order)
        logger.info(
            "Order for %s: %d item(s), total %s",
            account.username, len(order.products), order.total_price,
        )
        return order


def create_demo_store() -> Store:
    store = Store()
    for data in DEMO_PRODUCTS:
        store.add_product(Product(**data))
    store.add_account(Account(**DEMO_ACCOUNT))
    return store
