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

from storefront.delivery.registry import DeliveryRegistry
from storefront.delivery.types import (
    Delivery,
    DeliveryKind,
    HomeDelivery,
    PickPointDelivery,
    ShopDelivery,
)

__all__ = [
    "Delivery",
    "DeliveryKind",
    "HomeDelivery",
    "PickPointDelivery",
    "ShopDelivery",
    "DeliveryRegistry",
]
