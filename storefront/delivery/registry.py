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

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from importlib.metadata import entry_points
from typing import Any, Final

from storefront.delivery.types import Delivery, HomeDelivery, PickPointDelivery, ShopDelivery

ENTRYPOINT_GROUP: Final[str] = "storefront.delivery"

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegisteredDelivery:
    """
    Delivery variant class together with its provenance (useful for debugging).
    """

    kind: str
    variant: type[Delivery]
    source: str  # e.g. "builtin" or "acme_post.delivery:PostDelivery"


@dataclass(frozen=True, slots=True)
class PluginLoadError:
    """
    Represents a failure to load a delivery plugin (kept non-fatal).
    """

    source: str
    error: str


class DeliveryRegistry:
    """
    Maps delivery kind strings ("home", "pickpoint", ...) to variant classes.

    Typical lifecycle:
      reg = DeliveryRegistry.with_builtins()
      reg.load_entrypoints()
      delivery = reg.build({"kind": "home", ...})
    """

    def __init__(self) -> None:
        self._by_kind: dict[str, RegisteredDelivery] = {}
        self._load_errors: list[PluginLoadError] = []
        self._entrypoints_loaded: bool = False

    @classmethod
    def with_builtins(cls) -> "DeliveryRegistry":
        reg = cls()
        for variant in (HomeDelivery, PickPointDelivery, ShopDelivery):
            reg.register(variant, source="builtin")
        return reg

    def register(self, variant: type[Delivery], *, source: str = "manual") -> None:
        """
        Register a variant under its ``kind``. A later registration of the
        same kind replaces the earlier one.
        """
        kind = str(variant.kind)
        if not kind:
            raise ValueError(f"Delivery variant {variant.__name__} has no kind.")
        if kind in self._by_kind:
            logger.info("delivery kind '%s' overridden by %s", kind, source)
        self._by_kind[kind] = RegisteredDelivery(kind=kind, variant=variant, source=source)

    def load_entrypoints(self) -> None:
        """
        Discover variants registered under entrypoint group 'storefront.delivery'.

        Plugin import errors must not crash the whole tool; they are collected
        and available through load_errors(). Does nothing after the first call.
        """
        if self._entrypoints_loaded:
            return

        for ep in entry_points().select(group=ENTRYPOINT_GROUP):
            source = f"{ep.module}:{ep.attr}"
            try:
                variant = ep.load()
                if not isinstance(variant, type) or not issubclass(variant, Delivery):
                    raise TypeError(f"{source} is not a Delivery subclass")
                self.register(variant, source=source)
            except Exception as e:
                logger.warning("failed to load delivery plugin %s: %r", source, e)
                self._load_errors.append(PluginLoadError(source=source, error=repr(e)))

        self._entrypoints_loaded = True

    def kinds(self) -> tuple[str, ...]:
        return tuple(sorted(self._by_kind))

    def get(self, kind: str) -> type[Delivery] | None:
        entry = self._by_kind.get(kind.strip().lower())
        return entry.variant if entry is not None else None

    def all(self) -> tuple[RegisteredDelivery, ...]:
        return tuple(self._by_kind[k] for k in self.kinds())

    def load_errors(self) -> tuple[PluginLoadError, ...]:
        return tuple(self._load_errors)

    def build(self, data: Mapping[str, Any]) -> Delivery:
        """
        Build a delivery from a mapping carrying a ``kind`` key.

        Raises:
            KeyError for an unknown kind, ValueError for bad variant fields.
        """
        kind = data.get("kind")
        variant = self.get(kind) if isinstance(kind, str) else None
        if variant is None:
            raise KeyError(kind)
        return variant.from_mapping(data)
