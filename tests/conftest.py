"""Shared test fixtures and helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Sequence

import pytest

from landregistry.core.types import LandUseType
from landregistry.db.base import Base
from landregistry.db.engine import DatabaseManager
from landregistry.registry.models import (
    GeoPoint,
    GeoPolygon,
    LandParcel,
    OwnerCandidate,
    OwnerProfile,
    UserAccount,
    UserProfile,
)

import landregistry.db.models  # noqa: F401

FIXED_NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

OWNER_ADDRESS = "0x3456789012345678901234567890123456789012"
HEIR_ADDRESS = "0x4567890123456789012345678901234567890123"


class ScriptedDecisions:
    """Deterministic ``Decisions`` for tests.

    ``gates`` maps chance labels to outcomes; unlisted gates return
    ``default_chance``. ``picks`` maps choice labels to an option index and
    ``values`` maps randint/uniform labels to the value to return. Anything
    unlisted takes the first option or the low end of the range. Every call
    is recorded in ``calls`` as ``(method, label)``.
    """

    def __init__(
        self,
        gates: dict[str, bool] | None = None,
        picks: dict[str, int] | None = None,
        values: dict[str, float] | None = None,
        default_chance: bool = False,
    ) -> None:
        self.gates = gates or {}
        self.picks = picks or {}
        self.values = values or {}
        self.default_chance = default_chance
        self.calls: list[tuple[str, str]] = []

    def choice(self, options: Sequence[Any], what: str = "") -> Any:
        self.calls.append(("choice", what))
        if not options:
            raise ValueError(f"No options to choose {what}")
        return options[self.picks.get(what, 0) % len(options)]

    def chance(self, probability: float, what: str) -> bool:
        self.calls.append(("chance", what))
        return self.gates.get(what, self.default_chance)

    def randint(self, low: int, high: int, what: str = "") -> int:
        self.calls.append(("randint", what))
        return int(self.values.get(what, low))

    def uniform(self, low: float, high: float, what: str = "") -> float:
        self.calls.append(("uniform", what))
        return float(self.values.get(what, low))

    def labels(self, method: str) -> list[str]:
        return [label for m, label in self.calls if m == method]


def make_candidate(
    user_id: str = "user-1",
    wallet_address: str = OWNER_ADDRESS,
    email: str = "marie.mukamana@email.com",
    full_name: str | None = "Marie Mukamana",
    phone_number: str | None = "+250 788 123 456",
) -> OwnerCandidate:
    profile = None
    if full_name is not None or phone_number is not None:
        profile = OwnerProfile(full_name=full_name, phone_number=phone_number)
    return OwnerCandidate(
        user_id=user_id, wallet_address=wallet_address, email=email, profile=profile
    )


def make_account(
    email: str = "marie.mukamana@email.com",
    wallet_address: str = OWNER_ADDRESS,
    first_name: str | None = "Marie",
    last_name: str | None = "Mukamana",
    **kwargs: Any,
) -> UserAccount:
    profiles = []
    if first_name or last_name:
        profiles.append(
            UserProfile(first_name=first_name, last_name=last_name, phone_number="+250 788 123 456")
        )
    return UserAccount(email=email, wallet_address=wallet_address, profiles=profiles, **kwargs)


def make_parcel(
    parcel_id: str = "LP-2025-0001",
    owner_address: str = OWNER_ADDRESS,
    **kwargs: Any,
) -> LandParcel:
    fields: dict[str, Any] = {
        "owner_name": "Marie Mukamana",
        "owner_email": "marie.mukamana@email.com",
        "land_use": LandUseType.RESIDENTIAL,
        "area": 500,
        "estimated_value": 500 * 20_000,
        "address": "Tumba, Tumba",
        "district": "Huye",
        "sector": "Tumba",
        "cell": "Tumba",
        "village": "Tumba",
        "location": GeoPoint(coordinates=[29.7333, -2.5167]),
        "boundary": GeoPolygon(
            coordinates=[
                [
                    [29.7323, -2.5177],
                    [29.7343, -2.5177],
                    [29.7343, -2.5157],
                    [29.7323, -2.5157],
                    [29.7323, -2.5177],
                ]
            ]
        ),
    }
    fields.update(kwargs)
    return LandParcel(parcel_id=parcel_id, owner_address=owner_address, **fields)


@pytest.fixture
async def db_manager():
    """A DatabaseManager over an in-memory SQLite database with all tables."""
    manager = DatabaseManager("sqlite+aiosqlite:///:memory:")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.close()
