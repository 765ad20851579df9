from __future__ import annotations

import json

import pytest

from clinic_booking.infrastructure.store.memory_store import MemoryStore


SERVICES = [
    {
        "id": "laser",
        "name": "Laser Hair Removal",
        "base_price": 100,
        "treatment_options": json.dumps(
            [
                {"name": "Upper Lip", "image": "", "pricing": [{"name": "Small", "price": 45}]},
                {"title": "Chin", "price": 60},
            ]
        ),
    },
    {
        "id": "facial",
        "name": "Hydra Facial",
        "base_price": 100,
        "session_options": {"options": ["1 session", "3 sessions", "6 sessions"], "times_of_day": ["morning"]},
    },
    {"id": "peel", "name": "Chemical Peel", "base_price": 80},
]

DOCTORS = [
    {"id": "d1", "first_name": "Amara", "last_name": "Okafor", "specialization": "Dermatology", "is_active": True},
    {"id": "d2", "first_name": "Jon", "last_name": "Reyes", "is_active": False},
]


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore(services=SERVICES, doctors=DOCTORS)
