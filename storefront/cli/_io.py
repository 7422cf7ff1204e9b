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

from pathlib import Path

ORDERS_FILE_NAMES = ("orders.yaml", "orders.yml", "orders.json")
CONFIG_FILE_NAMES = ("storefront.yaml", "storefront.yml", "storefront.json")


def ensure_file(path: str) -> Path:
    p = Path(path).resolve()
    if not p.is_file():
        raise FileNotFoundError(f"File does not exist: {p}")
    return p


def _first_existing(root: Path, names: tuple[str, ...]) -> Path | None:
    for name in names:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def default_orders_file(cwd: str = ".") -> Path | None:
    return _first_existing(Path(cwd), ORDERS_FILE_NAMES)


def default_config_file(cwd: str = ".") -> Path | None:
    return _first_existing(Path(cwd), CONFIG_FILE_NAMES)
