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

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from storefront.catalog.money import ZERO
from storefront.orders.book import OrderBook
from storefront.orders.types import Order

IssueCode = Literal[
    "negative_price",
    "zero_price",
    "empty_product_name",
    "duplicate_product",
    "empty_order",
    "duplicate_order_number",
]


@dataclass(frozen=True, slots=True)
class OrderIssue:
    """
    Suspicious order content. Never fatal on its own: orders are accepted
    and rendered as given; callers decide whether issues block anything.
    """

    code: IssueCode
    message: str
    order_number: int
    details: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "order_number": self.order_number,
            "details": dict(self.details),
        }


class DefaultOrdersValidator:
    def validate(self, book: OrderBook) -> list[OrderIssue]:
        issues: list[OrderIssue] = []

        seen_numbers: set[int] = set()
        for order in book:
            if order.number in seen_numbers:
                issues.append(
                    OrderIssue(
                        code="duplicate_order_number",
                        message=f"Order number {order.number} is used more than once.",
                        order_number=order.number,
                    )
                )
            seen_numbers.add(order.number)

            self._validate_order(order, issues)

        return issues

    def _validate_order(self, order: Order, issues: list[OrderIssue]) -> None:
        products = order.products
        if not products:
            issues.append(
                OrderIssue(
                    code="empty_order",
                    message=f"Order {order.number} has no products.",
                    order_number=order.number,
                )
            )
            return

        seen: set[tuple[str, Any]] = set()
        for idx, p in enumerate(products):
            if not p.name.strip():
                issues.append(
                    OrderIssue(
                        code="empty_product_name",
                        message=f"Order {order.number}: product #{idx + 1} has an empty name.",
                        order_number=order.number,
                        details={"index": idx},
                    )
                )

            if p.price < ZERO:
                issues.append(
                    OrderIssue(
                        code="negative_price",
                        message=f"Order {order.number}: product '{p.name}' has a negative price {p.price}.",
                        order_number=order.number,
                        details={"index": idx, "price": str(p.price)},
                    )
                )
            elif p.price == ZERO:
                issues.append(
                    OrderIssue(
                        code="zero_price",
                        message=f"Order {order.number}: product '{p.name}' is free.",
                        order_number=order.number,
                        details={"index": idx},
                    )
                )

            key = (p.name, p.price)
            if key in seen:
                issues.append(
                    OrderIssue(
                        code="duplicate_product",
                        message=f"Order {order.number}: product '{p.name}' is listed more than once.",
                        order_number=order.number,
                        details={"index": idx},
                    )
                )
            seen.add(key)
