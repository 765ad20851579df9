from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from clinic_booking.domain.entities.treatment import PricingOption


DEFAULT_PACKAGE = "1 session"


@dataclass(frozen=True)
class SelectionState:
    package: str = DEFAULT_PACKAGE  # used when the service has no treatment subcategories
    subcategories: Mapping[str, PricingOption | None] = field(
        default_factory=lambda: MappingProxyType({})
    )  # subcategory name -> chosen option, used when it does

    def selected(self) -> dict[str, PricingOption]:
        """Present selections only, in insertion order."""
        return {name: option for name, option in self.subcategories.items() if option is not None}

    def has_selection(self) -> bool:
        return bool(self.selected())

    def toggle(self, subcategory: str, option: PricingOption) -> "SelectionState":
        """Select `option` for `subcategory`, or deselect it if it is already the chosen one."""
        updated = dict(self.subcategories)
        current = updated.get(subcategory)
        if current is not None and current.name == option.name and current.price == option.price:
            del updated[subcategory]
        else:
            updated[subcategory] = option
        return SelectionState(package=self.package, subcategories=MappingProxyType(updated))

    def with_package(self, package: str) -> "SelectionState":
        return SelectionState(package=package, subcategories=self.subcategories)
