# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Storefront Contributors
#
# This file is part of Storefront.
#
# Storefront is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Storefront is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from storefront.catalog.money import DEFAULT_CURRENCY, ZERO, amount_to_str
from storefront.catalog.types import Product
from storefront.delivery.types import Delivery


@dataclass(frozen=True, slots=True)
class OrderSummary:
    """
    Everything needed to display an order, computed at one point in time.

    Renderers only read summaries; they never call back into the order or
    its delivery, so the shipping cost shown always matches the subtotal
    shown next to it.
    """

    number: int
    description: str
    products: tuple[Product, ...]
    subtotal: Decimal
    shipping_cost: Decimal
    grand_total: Decimal
    delivery_date: date
    delivery_kind: str
    delivery_details: str
    delivery: Delivery

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "description": self.description,
            "products": [p.to_dict() for p in self.products],
            "subtotal": amount_to_str(self.subtotal),
            "shipping_cost": amount_to_str(self.shipping_cost),
            "grand_total": amount_to_str(self.grand_total),
            "delivery_date": self.delivery_date.isoformat(),
            "delivery": {
                **self.delivery.to_dict(),
                "details": self.delivery_details,
            },
        }


class Order:
    """
    A customer order: numbered, described, shipped by exactly one delivery.

    The delivery is bound at construction and cannot be swapped. Products may
    be added at any time and every total is recomputed from the current
    product list, so an order can be summarized at any point, even empty.
    """

    __slots__ = ("number", "description", "_delivery", "_products")

    def __init__(self, number: int, description: str, delivery: Delivery) -> None:
        self.number = number
        self.description = description
        self._delivery = delivery
        self._products: list[Product] = []

    def __repr__(self) -> str:
        return (
            f"Order(number={self.number!r}, description={self.description!r}, "
            f"delivery={self._delivery!r}, products={len(self._products)})"
        )

    @property
    def delivery(self) -> Delivery:
        return self._delivery

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    def add_product(self, product: Product) -> None:
        self._products.append(product)

    def total_product_price(self) -> Decimal:
        return sum((p.price for p in self._products), ZERO)

    def shipping_cost(self) -> Decimal:
        return self._delivery.shipping_cost(self.total_product_price())

    def grand_total(self) -> Decimal:
        return self.total_product_price() + self.shipping_cost()

    def estimated_delivery_date(self, now: date | datetime | None = None) -> date:
        return self._delivery.estimated_delivery_date(now)

    def summarize(self, now: date | datetime | None = None) -> OrderSummary:
        subtotal = self.total_product_price()
        shipping = self._delivery.shipping_cost(subtotal)
        return OrderSummary(
            number=self.number,
            description=self.description,
            products=self.products,
            subtotal=subtotal,
            shipping_cost=shipping,
            grand_total=subtotal + shipping,
            delivery_date=self._delivery.estimated_delivery_date(now),
            delivery_kind=str(self._delivery.kind),
            delivery_details=self._delivery.describe(),
            delivery=self._delivery,
        )

    def render_summary(
        self,
        now: date | datetime | None = None,
        *,
        currency: str = DEFAULT_CURRENCY,
        date_format: str | None = None,
        color: bool = False,
    ) -> str:
        """
        Human-readable block for this order (see TextOrderRenderer).
        """
        # renderer depends on this module
        from storefront.reporting.renderers.text import TextOrderRenderer

        renderer = TextOrderRenderer(currency=currency, date_format=date_format, color=color)
        return renderer.render_one(self.summarize(now))
