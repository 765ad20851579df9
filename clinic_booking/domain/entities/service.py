from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Service:
    id: str
    name: str
    base_price: float = 0.0
    treatment_options: Any = None  # raw stored value, legacy or canonical, list or JSON string
    session_options: Any = None  # list of labels, {"options": [...], "times_of_day": [...]}, or JSON string
    description: str | None = None
