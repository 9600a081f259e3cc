"""Synthetic record generation for empty registries."""

from landregistry.seeding.decisions import Decisions, RandomDecisions
from landregistry.seeding.models import SeedOutcome, SeedReport
from landregistry.seeding.notifications import NotificationSeeder
from landregistry.seeding.parcels import LandParcelSeeder
from landregistry.seeding.users import UserSeeder

__all__ = [
    "Decisions",
    "LandParcelSeeder",
    "NotificationSeeder",
    "RandomDecisions",
    "SeedOutcome",
    "SeedReport",
    "UserSeeder",
]
