from __future__ import annotations

import json
import logging
import re
from typing import Any, Iterable

from clinic_booking.domain.entities.treatment import PricingOption, TreatmentSubcategory


LEGACY_PRICING_NAME = "Standard"
DEFAULT_MAX_SESSIONS = 10
MAX_SESSIONS_CAP = 10

_logger = logging.getLogger(__name__)
_INT_RE = re.compile(r"(\d+)")


def _load(raw: Any) -> Any:
    if isinstance(raw, (str, bytes)):
        try:
            return json.loads(raw)
        except ValueError:
            _logger.debug("Unparseable stored JSON, treating as empty", extra={"reason": "json_decode"})
            return None
    return raw


def _to_price(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _is_legacy(item: dict[str, Any]) -> bool:
    return bool(item.get("title")) and _to_price(item.get("price")) > 0 and item.get("pricing") is None


def _pricing_option(entry: Any) -> PricingOption | None:
    if isinstance(entry, PricingOption):
        return entry
    if not isinstance(entry, dict):
        return None
    return PricingOption(name=str(entry.get("name") or ""), price=_to_price(entry.get("price")))


def _subcategory(item: Any) -> TreatmentSubcategory:
    if isinstance(item, TreatmentSubcategory):
        return item
    if not isinstance(item, dict):
        return TreatmentSubcategory(name="")

    image = str(item.get("image") or "")
    if _is_legacy(item):
        return TreatmentSubcategory(
            name=str(item["title"]),
            image=image,
            pricing=(PricingOption(name=LEGACY_PRICING_NAME, price=_to_price(item["price"])),),
        )

    pricing = item.get("pricing")
    options: tuple[PricingOption, ...] = ()
    if isinstance(pricing, list):
        options = tuple(o for o in (_pricing_option(entry) for entry in pricing) if o is not None)
    return TreatmentSubcategory(
        name=str(item.get("name") or item.get("title") or ""),
        image=image,
        pricing=options,
    )


def normalize(raw: Any) -> list[TreatmentSubcategory]:
    """
    Turn stored treatment data into the canonical catalog.

    Accepts None, a list, or a JSON string of a list, with elements in either the
    legacy {title, price} shape or the {name, image, pricing[]} shape. Anything
    that cannot be read degrades to an empty catalog; this never raises.
    """
    if raw is None:
        return []
    parsed = _load(raw)
    if not isinstance(parsed, list):
        return []
    return [_subcategory(item) for item in parsed]


def serialize(catalog: Iterable[TreatmentSubcategory]) -> str:
    """JSON string of the canonical shape, the format catalog edits are persisted in."""
    return json.dumps([subcat.to_dict() for subcat in catalog])


def split_valid(
    catalog: Iterable[TreatmentSubcategory],
) -> tuple[list[TreatmentSubcategory], list[TreatmentSubcategory]]:
    valid: list[TreatmentSubcategory] = []
    invalid: list[TreatmentSubcategory] = []
    for subcat in catalog:
        (valid if subcat.is_valid() else invalid).append(subcat)
    return valid, invalid


def parse_session_options(raw: Any) -> list[str]:
    """Session option labels from a list, an {"options": [...]} object, or a JSON string of either."""
    if not raw:
        return []
    parsed = _load(raw)
    if isinstance(parsed, list):
        return [str(opt) for opt in parsed]
    if isinstance(parsed, dict) and isinstance(parsed.get("options"), list):
        return [str(opt) for opt in parsed["options"]]
    return []


def max_sessions(raw: Any, default: int = DEFAULT_MAX_SESSIONS) -> int:
    options = parse_session_options(raw)
    if not options:
        return max(1, min(MAX_SESSIONS_CAP, default))

    highest = 1
    for opt in options:
        match = _INT_RE.search(opt)
        if match:
            highest = max(highest, int(match.group(1)))
    return max(1, min(MAX_SESSIONS_CAP, highest))


def session_packages(count: int) -> list[str]:
    return [f"{n} {'session' if n == 1 else 'sessions'}" for n in range(1, count + 1)]


def allowed_times_of_day(raw: Any) -> list[str] | None:
    """Capitalized times of day from an object-shaped session_options; None means no restriction."""
    if not raw or isinstance(raw, list):
        return None
    parsed = _load(raw)
    if not isinstance(parsed, dict):
        return None
    times = parsed.get("times_of_day")
    if not isinstance(times, list) or not times:
        return None
    return [str(t).capitalize() for t in times]
