from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from storefront.catalog.money import DEFAULT_CURRENCY, amount_to_str, format_money, to_amount


@dataclass(frozen=True, slots=True)
class Product:
    """
    A line in an order: product name and its price.

    Immutable; the price is always stored as Decimal.
    """

    name: str
    price: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "price", to_amount(self.price))

    def display(self, currency: str = DEFAULT_CURRENCY) -> str:
        return f"{self.name} ({format_money(self.price, currency)})"

    def __str__(self) -> str:
        return self.display()

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "price": amount_to_str(self.price)}
