import logging
import os
from typing import Callable, List, Optional, Sequence

from schemas import Account, Order, Product
from store import Store, create_demo_store

logger = logging.getLogger(__name__)

CURRENCY = os.getenv("STORE_CURRENCY", "UAH")
USERNAME = os.getenv("STORE_USERNAME", "ivan")
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

MENU = (
    "\n---- Menu ----\n"
    "1. Search products by price\n"
    "2. Search products by category\n"
    "3. Search products by rating\n"
    "4. Place an order\n"
    "5. View purchase history\n"
    "6. Exit"
)
NO_PRODUCTS = "No products found."
INVALID_CHOICE = "Invalid choice. Please try again."
INVALID_NUMBER = "Please enter a number."
INVALID_INDICES = "Please enter indices as comma-separated whole numbers."
ORDER_PLACED = "Order placed successfully!"
NO_ORDERS = "No orders yet."
GOODBYE = "Goodbye!"

# ----- Utilities -----

def format_amount(value: float) -> str:
    # 150.0 -> "150", 4.50 -> "4.5"
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_product(product: Product, currency: str = CURRENCY) -> str:
    return (
        f"{product.title} ({product.category}) - {format_amount(product.price)} {currency}, "
        f"rating: {format_amount(product.rating)}/5"
    )


def format_order(order: Order, currency: str = CURRENCY) -> str:
    return (
        f"Order: {len(order.products)} items, total: {format_amount(order.total_price)} {currency}, "
        f"status: {order.status}"
    )


def parse_indices(raw: str) -> List[int]:
    """Parse "0, 2,1" into [0, 2, 1]. Blank entries are skipped; anything else non-integer raises ValueError."""
    return [int(token) for token in (t.strip() for t in raw.split(",")) if token]


# ----- Command loop -----

class CommandInterface:
    """Numbered text menu over one store and the account placing orders."""

    def __init__(
        self,
        store: Store,
        account: Account,
        currency: str = CURRENCY,
        read: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ):
        self.store = store
        self.account = account
        self.currency = currency
        self.read = read or input
        self.write = write or print
        self.actions = {
            "1": self.search_by_price,
            "2": self.search_by_category,
            "3": self.search_by_rating,
            "4": self.place_order,
            "5": self.show_history,
        }

    def run(self) -> None:
        while True:
            self.write(MENU)
            try:
                choice = self.read("Choose an option: ").strip()
                if choice == "6":
                    break
                action = self.actions.get(choice)
                if action is None:
                    self.write(INVALID_CHOICE)
                    continue
                action()
            except EOFError:
                logger.debug("Input closed, leaving menu")
                break
        self.write(GOODBYE)

    # ----- Prompts -----

    def ask_number(self, prompt: str) -> float:
        while True:
            raw = self.read(prompt)
            try:
                return float(raw.strip())
            except ValueError:
                self.write(INVALID_NUMBER)

    def ask_indices(self, prompt: str) -> List[int]:
        while True:
            raw = self.read(prompt)
            try:
                return parse_indices(raw)
            except ValueError:
                self.write(INVALID_INDICES)

    # ----- Actions -----

    def show_products(self, products: Sequence[Product], numbered: bool = False) -> None:
        if not products:
            self.write(NO_PRODUCTS)
            return
        for idx, product in enumerate(products):
            line = format_product(product, self.currency)
            self.write(f"[{idx}] {line}" if numbered else line)

    def search_by_price(self) -> None:
        min_price = self.ask_number("Enter the minimum price: ")
        max_price = self.ask_number("Enter the maximum price: ")
        self.show_products(self.store.search_by_price_range(min_price, max_price))

    def search_by_category(self) -> None:
        category = self.read("Enter a product category: ")
        self.show_products(self.store.search_by_category(category))

    def search_by_rating(self) -> None:
        min_rating = self.ask_number("Enter the minimum rating: ")
        self.show_products(self.store.search_by_min_rating(min_rating))

    def place_order(self) -> Order:
        self.write("Choose products for your order:")
        self.show_products(self.store.products, numbered=True)
        indices = self.ask_indices("Enter product indices separated by commas (e.g. 0,1): ")
        order = self.store.purchase(self.account, self.store.select_products(indices))
        self.write(ORDER_PLACED)
        self.write(format_order(order, self.currency))
        return order

    def show_history(self) -> None:
        self.write("Purchase history:")
        if not self.account.history:
            self.write(NO_ORDERS)
            return
        for order in self.account.history:
            self.write(format_order(order, self.currency))


def resolve_log_level(name: str) -> Optional[int]:
    """Map a level name such as "info" to its number; None if logging does not know it."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


def main() -> None:
    level = resolve_log_level(LOG_LEVEL)
    logging.basicConfig(level=level if level is not None else logging.WARNING)
    if level is None:
        logger.warning("Unknown LOG_LEVEL %r, using WARNING", LOG_LEVEL)
    store = create_demo_store()
    account = store.find_account(USERNAME)
    if account is None:
        raise SystemExit(f"Unknown account: {USERNAME}")
    CommandInterface(store, account).run()


if __name__ == "__main__":
    main()
