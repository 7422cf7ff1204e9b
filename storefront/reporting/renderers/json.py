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

from storefront.orders.types import OrderSummary
from storefront.orders.validator import OrderIssue
from storefront.reporting._json import dumps_pretty


class JsonOrderRenderer:
    """
    Machine-readable output: {"orders": [...], "count": N[, "issues": [...]]}.
    Amounts are decimal strings, dates are ISO-8601.
    """

    def render(self, summaries: Sequence[OrderSummary], issues: Sequence[OrderIssue] | None = None) -> str:
        payload: dict = {"orders": list(summaries), "count": len(summaries)}
        if issues is not None:
            payload["issues"] = list(issues)
        return dumps_pretty(payload) + "\n"

    def render_issues(self, issues: Sequence[OrderIssue], *, order_count: int) -> str:
        """Validation report: {"count": <orders checked>, "issues": [...]}."""
        return dumps_pretty({"count": order_count, "issues": list(issues)}) + "\n"
