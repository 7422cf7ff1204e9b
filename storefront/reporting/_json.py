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
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from storefront.catalog.money import amount_to_str


def to_jsonable(obj: Any) -> Any:
    if obj is None:
        return None

    if isinstance(obj, Enum):
        return to_jsonable(obj.value)

    if isinstance(obj, (str, int, float, bool)):
        return obj

    # amounts as strings: no float rounding in the output
    if isinstance(obj, Decimal):
        return amount_to_str(obj)

    if isinstance(obj, date):
        return obj.isoformat()

    if hasattr(obj, "to_dict"):
        return to_jsonable(obj.to_dict())

    if isinstance(obj, Mapping):
        return {str(k): to_jsonable(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        return [to_jsonable(v) for v in obj]

    return repr(obj)


def dumps_pretty(data: Any) -> str:
    return json.dumps(to_jsonable(data), indent=2, ensure_ascii=False)
