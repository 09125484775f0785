"""
Store Schemas

Bookstore catalog and ordering models.
Products and orders are immutable once built; an account's order history only grows.
"""
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator
from typing import Iterable, List, Tuple

ORDER_STATUS_ACCEPTED = "accepted"


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Product title")
    price: float = Field(..., ge=0, description="Unit price")
    description: str = Field("", description="Product description")
    category: str = Field("", description="Category, e.g., 'Books', 'Novels'")
    rating: float = Field(0, description="Average rating, 0 to 5 by convention")


class Order(BaseModel):
    model_config = ConfigDict(frozen=True)

    products: Tuple[Product, ...] = Field(default_factory=tuple, description="Selected products, repeats allowed")
    total_price: float = Field(0, ge=0, description="Sum of product prices at creation")
    status: str = Field(ORDER_STATUS_ACCEPTED, description="Order status")

    @model_validator(mode="after")
    def check_total(self) -> "Order":
        expected = sum(p.price for p in self.products)
        if self.total_price != expected:
            raise ValueError(f"total_price {self.total_price} does not match product prices ({expected})")
        return self

    @classmethod
    def create(cls, products: Iterable[Product]) -> "Order":
        """Snapshot the selection and its total; the total is never recomputed."""
        items = tuple(products)
        return cls(products=items, total_price=sum(p.price for p in items))


class Account(BaseModel):
    username: str = Field(..., description="Login name")
    password: str = Field(..., description="Stored as given")
    _orders: List[Order] = PrivateAttr(default_factory=list)

    @property
    def history(self) -> Tuple[Order, ...]:
        """Orders oldest first."""
        return tuple(self._orders)

    def record_order(self, order: Order) -> None:
        self._orders.append(order)
