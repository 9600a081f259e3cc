"""Tests for PostgresNotificationRepository with SQLite async."""

from __future__ import annotations

from datetime import timedelta

import pytest

from landregistry.core.types import NotificationStatus, NotificationType
from landregistry.notifications.models import Notification
from landregistry.repositories.postgres.notifications import PostgresNotificationRepository
from landregistry.repositories.postgres.parcels import PostgresParcelRepository
from landregistry.repositories.postgres.users import PostgresUserRepository
from landregistry.seeding.decisions import RandomDecisions
from landregistry.seeding.notifications import NotificationSeeder
from tests.conftest import FIXED_NOW, make_account, make_parcel


@pytest.fixture
def repo(db_manager):
    return PostgresNotificationRepository(db_manager)


def _notification(user_id="user-1", **kwargs):
    kwargs.setdefault("type", NotificationType.SECURITY)
    kwargs.setdefault("title", "New Login Detected")
    kwargs.setdefault("message", "A new login to your account was detected.")
    return Notification(user_id=user_id, **kwargs)


async def test_save_and_get(repo):
    n = _notification(data={"device": "mobile"}, icon="security")
    await repo.save(n)

    found = await repo.get(n.id)
    assert found is not None
    assert found.type == NotificationType.SECURITY
    assert found.status == NotificationStatus.UNREAD
    assert found.data == {"device": "mobile"}
    assert found.icon == "security"


async def test_get_missing_returns_none(repo):
    assert await repo.get("missing") is None


async def test_count_and_list_for_user(repo):
    older = _notification(created_at=FIXED_NOW - timedelta(days=1))
    newer = _notification(created_at=FIXED_NOW)
    await repo.save(older)
    await repo.save(newer)
    await repo.save(_notification(user_id="user-2"))

    assert await repo.count() == 3
    assert [n.id for n in await repo.list_for_user("user-1")] == [newer.id, older.id]
    assert len(await repo.list_all()) == 3


async def test_update_marks_read(repo):
    n = _notification()
    await repo.save(n)
    n.status = NotificationStatus.READ
    n.read_at = FIXED_NOW
    await repo.save(n)

    found = await repo.get(n.id)
    assert found.status == NotificationStatus.READ
    assert found.read_at is not None


async def test_seeder_against_database(db_manager, repo):
    users = PostgresUserRepository(db_manager)
    parcels = PostgresParcelRepository(db_manager)
    await users.save(make_account())
    await parcels.save(make_parcel())

    created = await NotificationSeeder(repo, users, parcels, RandomDecisions(seed=6)).run()

    assert created == await repo.count()
    assert 3 + 2 <= created <= 8 + 2
    assert await NotificationSeeder(repo, users, parcels, RandomDecisions(seed=6)).run() == 0
