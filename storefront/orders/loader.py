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

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from storefront.catalog.types import Product
from storefront.delivery.registry import DeliveryRegistry
from storefront.delivery.types import Delivery
from storefront.orders.book import OrderBook
from storefront.orders.types import Order

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OrdersLoadError(Exception):
    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class DefaultOrdersLoader:
    """
    Loads an OrderBook from orders.yaml / orders.yml / orders.json

    Expected shape:

        orders:
          - number: 101
            description: New Year gift
            delivery:
              kind: home
              address: ...
              phone: "+79001112233"
              courier_service: Yandex Go
              time_slot: "18:00 - 20:00"
            products:
              - {name: Protective case, price: 2000}

    Content is not validated beyond shape (see DefaultOrdersValidator).
    """

    def __init__(self, registry: DeliveryRegistry | None = None) -> None:
        self.registry = registry if registry is not None else DeliveryRegistry.with_builtins()

    def load(self, path: Path) -> OrderBook:
        if not isinstance(path, Path):
            path = Path(path)

        if not path.exists():
            raise OrdersLoadError(code="orders_not_found", message=f"Orders file does not exist: {path}")

        data = self._read_orders_file(path)

        if not isinstance(data, dict):
            raise OrdersLoadError(code="invalid_orders", message="Orders file root must be a mapping/object.")

        raw_orders = data.get("orders")
        if raw_orders is None:
            raw_orders = []
        if not isinstance(raw_orders, list):
            raise OrdersLoadError(code="invalid_orders", message="'orders' must be a list.")

        book = OrderBook()
        for idx, item in enumerate(raw_orders):
            book.add(self._parse_order(idx, item))

        logger.debug("loaded %d orders from %s", len(book), path)
        return book

    def _read_orders_file(self, path: Path) -> Any:
        suffix = path.suffix.lower()
        raw = path.read_text(encoding="utf-8")

        if suffix == ".json":
            try:
                return json.loads(raw)
            except ValueError as e:
                raise OrdersLoadError(code="invalid_orders", message=f"Invalid JSON in {path}: {e}") from e

        try:
            import yaml
        except Exception as e:
            raise OrdersLoadError(
                code="yaml_dependency_missing",
                message="YAML orders file requires dependency PyYAML.",
                details={"hint": "pip install pyyaml", "path": str(path)},
            ) from e

        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise OrdersLoadError(code="invalid_orders", message=f"Invalid YAML in {path}: {e}") from e

    def _parse_order(self, idx: int, raw: Any) -> Order:
        if not isinstance(raw, dict):
            raise OrdersLoadError(code="invalid_order", message=f"Order #{idx + 1} must be an object.")

        number = raw.get("number")
        if not isinstance(number, int) or isinstance(number, bool):
            raise OrdersLoadError(
                code="invalid_order",
                message=f"Order #{idx + 1}: 'number' must be an integer.",
                details={"number": number},
            )

        description = raw.get("description")
        if description is None:
            description = ""
        elif not isinstance(description, str):
            description = str(description)

        order = Order(number, description, self._parse_delivery(number, raw.get("delivery")))

        products = raw.get("products")
        if products is None:
            products = []
        if not isinstance(products, list):
            raise OrdersLoadError(code="invalid_order", message=f"Order {number}: 'products' must be a list.")

        for p in products:
            order.add_product(self._parse_product(number, p))

        return order

    def _parse_delivery(self, number: int, raw: Any) -> Delivery:
        if not isinstance(raw, dict):
            raise OrdersLoadError(code="invalid_delivery", message=f"Order {number}: 'delivery' must be an object.")

        try:
            return self.registry.build(raw)
        except KeyError as e:
            raise OrdersLoadError(
                code="unknown_delivery_kind",
                message=f"Order {number}: unknown delivery kind {raw.get('kind')!r}."
                f" Available: {list(self.registry.kinds())}.",
                details={"kind": raw.get("kind"), "available": list(self.registry.kinds())},
            ) from e
        except ValueError as e:
            raise OrdersLoadError(code="invalid_delivery", message=f"Order {number}: {e}") from e

    def _parse_product(self, number: int, raw: Any) -> Product:
        if not isinstance(raw, dict):
            raise OrdersLoadError(code="invalid_product", message=f"Order {number}: product must be an object.")

        name = raw.get("name")
        if name is None:
            raise OrdersLoadError(code="invalid_product", message=f"Order {number}: product requires 'name'.")

        price = raw.get("price")
        if price is None:
            raise OrdersLoadError(
                code="invalid_product",
                message=f"Order {number}: product {name!r} requires 'price'.",
            )

        try:
            return Product(str(name), price)
        except ValueError as e:
            raise OrdersLoadError(
                code="invalid_product",
                message=f"Order {number}: product {name!r} has invalid price {price!r}.",
            ) from e
