from __future__ import annotations

import math
import re
from typing import Mapping

from clinic_booking.domain.entities.pricing import PricedSummary, SessionQuote
from clinic_booking.domain.entities.selection_state import DEFAULT_PACKAGE
from clinic_booking.domain.entities.treatment import PricingOption, TreatmentSubcategory


# Exact lookup, counts between entries get no discount.
SESSION_DISCOUNTS: dict[int, float] = {1: 0.0, 3: 0.25, 6: 0.35, 10: 0.45}

_INT_RE = re.compile(r"(\d+)")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def round2(value: float) -> float:
    return round_half_up(value * 100) / 100


def session_count_of(label: str) -> int:
    match = _INT_RE.search(str(label))
    return int(match.group(1)) if match else 1


def discount_of(label: str) -> float:
    return SESSION_DISCOUNTS.get(session_count_of(label), 0.0)


def quote_package(base_price: float, label: str) -> SessionQuote:
    count = session_count_of(label)
    discount = discount_of(label)
    per_session = round2(base_price * (1 - discount))
    total = round2(per_session * count)
    return SessionQuote(
        label=label,
        session_count=count,
        discount=discount,
        # rounded from the exact fraction, not from per_session
        discount_percent=round_half_up(discount * 100),
        per_session_price=per_session,
        total_amount=total,
        total_savings=base_price * count - total,
    )


def price_package(base_price: float, label: str) -> PricedSummary:
    quote = quote_package(base_price, label)
    return PricedSummary(
        session_count=quote.session_count,
        unit_price=quote.per_session_price,
        discount_percent=quote.discount_percent,
        total_amount=quote.total_amount,
    )


def price_subcategories(selections: Mapping[str, PricingOption | None]) -> PricedSummary:
    chosen = [option for option in selections.values() if option is not None]
    total = sum(option.price for option in chosen)
    return PricedSummary(
        session_count=len(chosen),
        unit_price=total,
        discount_percent=0,
        total_amount=total,
    )


def resolve_package(label: str | None, packages: list[str]) -> str:
    """Fall back to the single-session package when `label` is not offered."""
    if label and label in packages:
        return label
    return DEFAULT_PACKAGE


def resolve_selection(
    catalog: list[TreatmentSubcategory],
    selections: Mapping[str, PricingOption | None],
) -> dict[str, PricingOption] | None:
    """
    Map each selection onto the catalog's own option, matched by subcategory and option name.

    Returns None when any selection names a subcategory or option the catalog does not have.
    """
    by_name = {subcat.name: subcat for subcat in catalog}
    resolved: dict[str, PricingOption] = {}
    for name, chosen in selections.items():
        if chosen is None:
            continue
        subcat = by_name.get(name)
        stored = next((o for o in subcat.pricing if o.name == chosen.name), None) if subcat else None
        if stored is None:
            return None
        resolved[name] = stored
    return resolved


def describe_selection(selections: Mapping[str, PricingOption | None]) -> str:
    parts = []
    for name, option in selections.items():
        parts.append(f"{name} - {option.name}" if option is not None else name)
    return ", ".join(parts)


def format_price(value: float, symbol: str = "£") -> str:
    return f"{symbol}{value:.2f}"
