"""
Product catalog with linear filter queries.
"""
import logging
from typing import Iterable, Iterator, List, Optional

from schemas import Product

logger = logging.getLogger(__name__)


class Catalog:
    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: List[Product] = list(products or [])

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __getitem__(self, index: int) -> Product:
        return self._products[index]

    def add(self, product: Product) -> None:
        self._products.append(product)

    # ----- Queries -----

    def search_by_price_range(self, min_price: float, max_price: float) -> List[Product]:
        found = [p for p in self._products if min_price <= p.price <= max_price]
        logger.debug("price range [%s, %s]: %d match(es)", min_price, max_price, len(found))
        return found

    def search_by_category(self, name: Optional[str]) -> List[Product]:
        wanted = (name or "").casefold()
        found = [p for p in self._products if p.category.casefold() == wanted]
        logger.debug("category %r: %d match(es)", name, len(found))
        return found

    def search_by_min_rating(self, min_rating: float) -> List[Product]:
        found = [p for p in self._products if p.rating >= min_rating]
        logger.debug("rating >= %s: %d match(es)", min_rating, len(found))
        return found

    # ----- Selection -----

    def select(self, indices: Iterable[int]) -> List[Product]:
        """
        Resolve catalog positions to products in the order given.
        Out-of-range positions (negative ones included) are dropped; repeats are kept.
        """
        selected: List[Product] = []
        size = len(self._products)
        for idx in indices:
            if 0 <= idx < size:
                selected.append(self._products[idx])
            else:
                logger.warning("Ignoring index %d outside catalog of %d product(s)", idx, size)
        return selected
