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

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field, fields
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import auto
from typing import Any, ClassVar, Final

from storefront.catalog.money import to_amount
from storefront.utils.enum import StrEnum

DEFAULT_DELIVERY_DAYS: Final[int] = 3
SHOP_DELIVERY_DAYS: Final[int] = 1

BASE_SHIPPING_COST: Final[Decimal] = Decimal(200)
HOME_SHIPPING_COST: Final[Decimal] = Decimal(500)
HOME_FREE_SHIPPING_THRESHOLD: Final[Decimal] = Decimal(10000)
PICKPOINT_SHIPPING_COST: Final[Decimal] = Decimal(150)

PICKPOINT_STORAGE_DAYS: Final[int] = 5
SHOP_OPENING_HOURS: Final[str] = "09:00 - 21:00"


class DeliveryKind(StrEnum):
    HOME = auto()
    PICKPOINT = auto()
    SHOP = auto()


def _as_date(now: date | datetime | None) -> date:
    if now is None:
        return date.today()
    if isinstance(now, datetime):
        return now.date()
    return now


@dataclass(frozen=True, slots=True)
class Delivery(ABC):
    """
    How an order reaches the customer.

    A delivery is bound to exactly one order for the order's lifetime.
    Variants differ in three policies:
      - describe(): what the customer is told
      - estimated_delivery_date(): when the order arrives
      - shipping_cost(): what the customer pays on top of the products

    All three are pure functions of the delivery fields and their arguments.
    """

    address: str
    phone: str

    kind: ClassVar[str] = ""

    @abstractmethod
    def describe(self) -> str: ...

    def estimated_delivery_date(self, now: date | datetime | None = None) -> date:
        return _as_date(now) + timedelta(days=DEFAULT_DELIVERY_DAYS)

    def shipping_cost(self, order_total: Decimal) -> Decimal:
        return BASE_SHIPPING_COST

    def to_dict(self) -> dict[str, Any]:
        return {"kind": str(self.kind), **asdict(self)}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Delivery":
        """
        Build a variant from a plain mapping (orders file entry).

        Only constructor fields are read; fixed fields such as storage days
        are ignored if present. Text fields must already be strings: YAML
        turns an unquoted ``+79001112233`` into a number and drops the plus.

        Raises:
            ValueError if a required field is missing or has a bad value.
        """
        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            if not f.init:
                continue
            if data.get(f.name) is None:
                raise ValueError(f"Delivery '{cls.kind}' requires field '{f.name}'.")
            raw = data[f.name]
            if f.type is int:
                if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
                    raise ValueError(f"Delivery field '{f.name}' must be an integer, got {raw!r}.")
                try:
                    raw = int(raw)
                except (TypeError, ValueError) as e:
                    raise ValueError(f"Delivery field '{f.name}' must be an integer, got {raw!r}.") from e
            elif not isinstance(raw, str):
                raise ValueError(f"Delivery field '{f.name}' must be a string (quote it), got {raw!r}.")
            kwargs[f.name] = raw
        return cls(**kwargs)


@dataclass(frozen=True, slots=True)
class HomeDelivery(Delivery):
    """Courier delivery to the customer's door."""

    courier_service: str
    time_slot: str

    kind: ClassVar[str] = DeliveryKind.HOME

    def describe(self) -> str:
        return (
            f"Courier service '{self.courier_service}'. Await courier at: {self.address}. "
            f"Time: {self.time_slot}. Phone: {self.phone}"
        )

    def shipping_cost(self, order_total: Decimal) -> Decimal:
        # free above the threshold, strictly greater
        if to_amount(order_total) > HOME_FREE_SHIPPING_THRESHOLD:
            return Decimal(0)
        return HOME_SHIPPING_COST


@dataclass(frozen=True, slots=True)
class PickPointDelivery(Delivery):
    """Parcel locker / pickup point run by a partner company."""

    company: str
    point_id: str
    storage_days: int = field(default=PICKPOINT_STORAGE_DAYS, init=False)

    kind: ClassVar[str] = DeliveryKind.PICKPOINT

    def describe(self) -> str:
        return (
            f"Pickup point '{self.company}' (ID: {self.point_id}). "
            f"Address: {self.address}. Storage: {self.storage_days} days."
        )

    def shipping_cost(self, order_total: Decimal) -> Decimal:
        return PICKPOINT_SHIPPING_COST


@dataclass(frozen=True, slots=True)
class ShopDelivery(Delivery):
    """Customer picks the order up in one of our retail shops."""

    shop_id: int
    opening_hours: str = field(default=SHOP_OPENING_HOURS, init=False)

    kind: ClassVar[str] = DeliveryKind.SHOP

    def describe(self) -> str:
        return f"Pickup from shop #{self.shop_id}. Address: {self.address}. Opening hours: {self.opening_hours}."

    def estimated_delivery_date(self, now: date | datetime | None = None) -> date:
        # stock is local to the shop
        return _as_date(now) + timedelta(days=SHOP_DELIVERY_DAYS)

    def shipping_cost(self, order_total: Decimal) -> Decimal:
        return Decimal(0)
