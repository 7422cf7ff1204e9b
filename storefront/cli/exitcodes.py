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

from storefront.orders.validator import OrderIssue

# Script-friendly semantics
EXIT_OK = 0
EXIT_ORDER_ISSUES = 1
EXIT_ERROR = 2


def exit_code_from_issues(issues: Sequence[OrderIssue]) -> int:
    """
    Policy:
      - any order issue => EXIT_ORDER_ISSUES
      - else EXIT_OK
    """
    return EXIT_ORDER_ISSUES if issues else EXIT_OK
