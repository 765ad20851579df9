from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PricedSummary:
    session_count: int
    unit_price: float
    discount_percent: int
    total_amount: float


@dataclass(frozen=True)
class SessionQuote:
    label: str
    session_count: int
    discount: float
    discount_percent: int
    per_session_price: float
    total_amount: float
    total_savings: float
