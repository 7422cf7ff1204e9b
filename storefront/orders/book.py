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

from collections.abc import Iterable, Iterator
from datetime import date, datetime

from storefront.orders.types import Order, OrderSummary


class OrderBook:
    """
    Ordered collection of orders, whatever their delivery variant.

    Insertion order is display order. Order numbers are not required to be
    unique; get() returns the first match.
    """

    def __init__(self, orders: Iterable[Order] = ()) -> None:
        self._orders: list[Order] = list(orders)

    def add(self, order: Order) -> None:
        self._orders.append(order)

    def get(self, number: int) -> Order | None:
        for o in self._orders:
            if o.number == number:
                return o
        return None

    def __iter__(self) -> Iterator[Order]:
        return iter(self._orders)

    def __len__(self) -> int:
        return len(self._orders)

    def summaries(self, now: date | datetime | None = None) -> tuple[OrderSummary, ...]:
        return tuple(o.summarize(now) for o in self._orders)
