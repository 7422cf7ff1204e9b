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
from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path
from typing import Any

from storefront.catalog.money import DEFAULT_CURRENCY

DEFAULT_DATE_FORMAT = "%d.%m.%Y"


@dataclass(frozen=True, slots=True)
class ConfigLoadError(Exception):
    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


@dataclass(frozen=True)
class AppConfig:
    currency: str = DEFAULT_CURRENCY
    date_format: str = DEFAULT_DATE_FORMAT
    color: bool = False
    today: date | None = None  # pins "now" for delivery dates

    def reference_date(self) -> date:
        return self.today if self.today is not None else date.today()

    def merged(self, settings: Mapping[str, Any]) -> "AppConfig":
        """
        Return a copy with values from a ``settings`` mapping applied.

        Unknown keys are ignored; known keys with a wrong type raise
        ConfigLoadError.
        """
        changes: dict[str, Any] = {}

        for key in ("currency", "date_format"):
            if key in settings:
                value = settings[key]
                if not isinstance(value, str):
                    raise ConfigLoadError(code="invalid_setting", message=f"'{key}' must be a string.")
                changes[key] = value

        if "date_format" in changes:
            try:
                date(2000, 1, 1).strftime(changes["date_format"])
            except ValueError as e:
                raise ConfigLoadError(
                    code="invalid_setting",
                    message=f"'date_format' is not a valid strftime format: {changes['date_format']!r}",
                ) from e

        if "color" in settings:
            if not isinstance(settings["color"], bool):
                raise ConfigLoadError(code="invalid_setting", message="'color' must be a boolean.")
            changes["color"] = settings["color"]

        if "today" in settings and settings["today"] is not None:
            changes["today"] = parse_date(settings["today"])

        return replace(self, **changes)


def parse_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ConfigLoadError(code="invalid_date", message=f"Expected a date (YYYY-MM-DD), got {value!r}.")
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        raise ConfigLoadError(code="invalid_date", message=f"Expected a date (YYYY-MM-DD), got {value!r}.") from e


def load_config(path: Path | str | None, base: AppConfig | None = None) -> AppConfig:
    """
    Load storefront.yaml / storefront.yml / storefront.json.

    The file root must be a mapping; only its ``settings`` section is read.
    A missing ``path`` (None) returns ``base`` unchanged.
    """
    config = base if base is not None else AppConfig()
    if path is None:
        return config

    path = Path(path)
    if not path.exists():
        raise ConfigLoadError(code="config_not_found", message=f"Config file does not exist: {path}")

    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(raw)
    else:
        try:
            import yaml
        except Exception as e:
            raise ConfigLoadError(
                code="yaml_dependency_missing",
                message="YAML config requires dependency PyYAML.",
                details={"hint": "pip install pyyaml", "path": str(path)},
            ) from e
        data = yaml.safe_load(raw)

    if data is None:
        return config
    if not isinstance(data, dict):
        raise ConfigLoadError(code="invalid_config", message="Config root must be a mapping/object.")

    settings = data.get("settings") or {}
    if not isinstance(settings, dict):
        raise ConfigLoadError(code="invalid_config", message="'settings' must be a mapping/object.")

    return config.merged(settings)
