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

from decimal import Decimal, InvalidOperation
from typing import Final

DEFAULT_CURRENCY: Final[str] = "₽"

ZERO: Final[Decimal] = Decimal(0)


def to_amount(value: Decimal | int | float | str) -> Decimal:
    """
    Coerce a price-like value to Decimal.

    Floats go through str() so 0.1 stays 0.1 instead of its binary expansion.

    Raises:
        ValueError if the value is not a number.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Invalid amount: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


def format_money(amount: Decimal, currency: str = DEFAULT_CURRENCY) -> str:
    """
    Display form: space-grouped thousands, two decimals, currency suffix.

        format_money(Decimal("29990")) -> "29 990.00 ₽"
    """
    text = f"{amount:,.2f}".replace(",", " ")
    return f"{text} {currency}" if currency else text


def amount_to_str(amount: Decimal) -> str:
    """Plain decimal string for machine output, never exponent form ("1E+3" -> "1000")."""
    return format(amount, "f")
