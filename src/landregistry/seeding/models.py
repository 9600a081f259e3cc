"""Result types reported by the seeders."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class SeedOutcome(StrEnum):
    SEEDED = "seeded"
    ALREADY_SEEDED = "already_seeded"
    NO_OWNER_CANDIDATES = "no_owner_candidates"


class SeedReport(BaseModel):
    """What a seeding run did. Parcel early exits write no parcels or cases."""

    outcome: SeedOutcome
    parcels_created: int = 0
    expropriations_created: int = 0
    parcels_expropriated: list[str] = Field(default_factory=list)
    notifications_created: int = 0
