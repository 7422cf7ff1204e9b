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

from collections.abc import Sequence
from typing import Literal

from storefront.catalog.money import DEFAULT_CURRENCY, format_money
from storefront.core.config import DEFAULT_DATE_FORMAT
from storefront.orders.types import OrderSummary

Verbosity = Literal["quiet", "normal", "verbose"]

SEPARATOR = "=" * 40

_GREEN = "\033[32m"
_RESET = "\033[0m"


class TextOrderRenderer:
    """
    Human-readable CLI output. Pure rendering: does not sort or mutate.

    Verbosity levels:
    - quiet: one line per order (number, description, totals, date)
    - normal: one framed block per order
    - verbose: normal block plus the raw delivery fields
    """

    def __init__(
        self,
        verbosity: Verbosity = "normal",
        *,
        currency: str = DEFAULT_CURRENCY,
        date_format: str | None = None,
        color: bool = False,
    ):
        self.verbosity = verbosity
        self.currency = currency
        self.date_format = date_format or DEFAULT_DATE_FORMAT
        self.color = color

    def render(self, summaries: Sequence[OrderSummary]) -> str:
        if not summaries:
            return "No orders.\n"
        if self.verbosity == "quiet":
            return "".join(self._render_quiet(s) for s in summaries)
        return "\n".join(self.render_one(s) for s in summaries)

    def render_one(self, summary: OrderSummary) -> str:
        if self.verbosity == "quiet":
            return self._render_quiet(summary)

        s = summary
        lines: list[str] = [SEPARATOR]
        lines.append(f"Order #{s.number}: {s.description}")

        lines.append("Products:")
        if s.products:
            for p in s.products:
                lines.append(f" - {p.display(self.currency)}")
        else:
            lines.append(" (no products)")

        lines.append(f"Subtotal: {self._money(s.subtotal)}")
        lines.append(f"Shipping: {self._money(s.shipping_cost)} (Total: {self._money(s.grand_total)})")
        lines.append(f"Delivery date: {s.delivery_date.strftime(self.date_format)}")

        details = f"Delivery details: {s.delivery_details}"
        lines.append(f"{_GREEN}{details}{_RESET}" if self.color else details)

        if self.verbosity == "verbose":
            lines.append(f"Delivery: {s.delivery_kind}")
            fields = s.delivery.to_dict()
            for k in sorted(fields.keys()):
                if k == "kind":
                    continue
                lines.append(f"  {k}: {fields[k]}")

        lines.append(SEPARATOR)
        return "\n".join(lines) + "\n"

    def _render_quiet(self, s: OrderSummary) -> str:
        return (
            f"#{s.number} {s.description}: {self._money(s.grand_total)} "
            f"(shipping {self._money(s.shipping_cost)}), "
            f"arrives {s.delivery_date.strftime(self.date_format)}\n"
        )

    def _money(self, amount) -> str:
        return format_money(amount, self.currency)
