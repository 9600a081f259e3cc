"""Tests for seed orchestration and the seeding CLI."""

from __future__ import annotations

import pytest

from landregistry.core.config import Settings
from landregistry.core.types import NotificationType
from landregistry.db.engine import DatabaseManager
from landregistry.repositories.postgres.expropriations import PostgresExpropriationRepository
from landregistry.repositories.postgres.notifications import PostgresNotificationRepository
from landregistry.repositories.postgres.parcels import PostgresParcelRepository
from landregistry.seeding.decisions import RandomDecisions
from landregistry.seeding.models import SeedOutcome
from landregistry.seeding.runner import build_settings, main, parse_args, run_seeds


def _sqlite_settings(url: str = "sqlite+aiosqlite:///:memory:") -> Settings:
    settings = Settings()
    settings.db.database_url = url
    settings.seed.create_schema = True
    settings.seed.parcel_count = 6
    return settings


async def test_run_seeds_against_sqlite():
    report = await run_seeds(_sqlite_settings(), RandomDecisions(seed=21))
    assert report.outcome == SeedOutcome.SEEDED
    assert report.parcels_created == 6
    assert report.expropriations_created == 3
    # Nine active accounts: 3..8 each plus two announcements each.
    assert 9 * 5 <= report.notifications_created <= 9 * 10


async def test_run_seeds_persists_cases_against_earliest_parcels(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'registry.db'}"
    report = await run_seeds(_sqlite_settings(url), RandomDecisions(seed=21))
    assert report.outcome == SeedOutcome.SEEDED

    db = DatabaseManager(url)
    try:
        parcels = PostgresParcelRepository(db)
        earliest = {p.id: p for p in await parcels.list_earliest(3)}
        assert sorted(p.parcel_id[-4:] for p in earliest.values()) == ["0001", "0002", "0003"]

        cases = await PostgresExpropriationRepository(db).list_all()
        assert len(cases) == 3
        assert {c.land_parcel_id for c in cases} == set(earliest)
        for case in cases:
            parcel = earliest[case.land_parcel_id]
            assert case.parcel_id == parcel.parcel_id
            assert case.owner_address == parcel.owner_address
            assert case.proposed_compensation == parcel.estimated_value * 1.2

        notifications = PostgresNotificationRepository(db)
        assert await notifications.count() == report.notifications_created
        parcel_ids = {p.id for p in await parcels.list_all()}
        for n in await notifications.list_all():
            if n.type == NotificationType.COMPLIANCE:
                assert n.related_entity_id in parcel_ids
    finally:
        await db.close()


async def test_second_run_against_same_database_is_noop(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'registry.db'}"
    first = await run_seeds(_sqlite_settings(url), RandomDecisions(seed=3))

    second = await run_seeds(_sqlite_settings(url), RandomDecisions(seed=3))

    assert second.outcome == SeedOutcome.ALREADY_SEEDED
    assert second.notifications_created == 0
    db = DatabaseManager(url)
    try:
        assert await PostgresNotificationRepository(db).count() == first.notifications_created
    finally:
        await db.close()


async def test_run_seeds_requires_database_url():
    settings = Settings()
    settings.db.database_url = None
    with pytest.raises(ValueError):
        await run_seeds(settings)


def test_parse_args_overrides_settings(monkeypatch):
    monkeypatch.delenv("LANDREGISTRY_DB_DATABASE_URL", raising=False)
    args = parse_args(
        ["--parcels", "10", "--expropriations", "1", "--seed", "5", "--create-schema",
         "--database-url", "sqlite+aiosqlite:///:memory:"]
    )
    settings = build_settings(args)
    assert settings.seed.parcel_count == 10
    assert settings.seed.expropriation_count == 1
    assert settings.seed.random_seed == 5
    assert settings.seed.create_schema is True
    assert settings.db.database_url == "sqlite+aiosqlite:///:memory:"


def test_main_seeds_database():
    main(["--database-url", "sqlite+aiosqlite:///:memory:", "--create-schema", "--parcels", "3"])


def test_main_exits_nonzero_on_error(monkeypatch):
    monkeypatch.delenv("LANDREGISTRY_DB_DATABASE_URL", raising=False)
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1
