"""Tests for NotificationSeeder and the notification builders."""

from __future__ import annotations

import logging
from datetime import timedelta

import pytest

from landregistry.core.config import SeedConfig
from landregistry.core.types import (
    NotificationPriority,
    NotificationStatus,
    NotificationType,
)
from landregistry.notifications.models import Notification
from landregistry.notifications.store import NotificationStore
from landregistry.registry.store import ExpropriationStore, ParcelStore, UserStore
from landregistry.seeding.decisions import RandomDecisions
from landregistry.seeding.notifications import (
    SYSTEM_ANNOUNCEMENTS,
    TEMPLATES,
    NotificationSeeder,
    build_notification,
)
from landregistry.seeding.runner import seed_stores
from tests.conftest import FIXED_NOW, ScriptedDecisions, make_account, make_parcel

COMPLIANCE_TEMPLATE = 6
TRANSACTION_TEMPLATE = 3
GOVERNANCE_TEMPLATE = 14


@pytest.fixture
def users():
    return UserStore()


@pytest.fixture
def parcels():
    return ParcelStore()


@pytest.fixture
def notifications():
    return NotificationStore()


def _add_accounts(users, count):
    for i in range(count):
        users.save(make_account(email=f"user{i}@email.com", wallet_address=f"0x{i + 1:040x}"))


def _seeder(notifications, users, parcels, decisions):
    return NotificationSeeder(notifications, users, parcels, decisions, clock=lambda: FIXED_NOW)


def test_template_indexes():
    assert TEMPLATES[COMPLIANCE_TEMPLATE].type == NotificationType.COMPLIANCE
    assert TEMPLATES[TRANSACTION_TEMPLATE].type == NotificationType.TRANSACTION
    assert TEMPLATES[GOVERNANCE_TEMPLATE].type == NotificationType.GOVERNANCE
    assert len(TEMPLATES) == 20


# --- early exits ---


async def test_skips_when_notifications_exist(notifications, users, parcels, caplog):
    _add_accounts(users, 2)
    notifications.save(
        Notification(user_id="someone", type=NotificationType.SYSTEM, title="t", message="m")
    )

    with caplog.at_level(logging.INFO):
        created = await _seeder(notifications, users, parcels, ScriptedDecisions()).run()

    assert created == 0
    assert notifications.count() == 1
    assert "already exist" in caplog.text


async def test_skips_without_active_accounts(notifications, users, parcels, caplog):
    users.save(make_account(is_active=False))

    with caplog.at_level(logging.WARNING):
        created = await _seeder(notifications, users, parcels, ScriptedDecisions()).run()

    assert created == 0
    assert notifications.count() == 0
    assert "cannot seed notifications" in caplog.text


# --- counts ---


async def test_per_user_count_plus_announcements(notifications, users, parcels):
    _add_accounts(users, 2)
    decisions = ScriptedDecisions(values={"notification_count": 5})

    created = await _seeder(notifications, users, parcels, decisions).run()

    assert created == 2 * 5 + 2 * len(SYSTEM_ANNOUNCEMENTS)
    assert notifications.count() == created
    for candidate in users.list_active():
        assert len(notifications.list_for_user(candidate.user_id)) == 7


async def test_announcements_reach_first_ten_accounts(notifications, users, parcels):
    _add_accounts(users, 12)

    await _seeder(notifications, users, parcels, ScriptedDecisions()).run()

    active = users.list_active()
    for announcement in SYSTEM_ANNOUNCEMENTS:
        recipients = [
            n.user_id for n in notifications.list_all() if n.title == announcement.title
        ]
        assert recipients == [c.user_id for c in active[:10]]
    updates = [n for n in notifications.list_all() if n.title == "Platform Update v2.0"]
    assert all(n.icon == "system" for n in updates)
    assert all(n.priority == NotificationPriority.MEDIUM for n in updates)


async def test_random_counts_stay_in_range(notifications, users, parcels):
    _add_accounts(users, 4)

    await _seeder(notifications, users, parcels, RandomDecisions(seed=17)).run()

    announcement_titles = {a.title for a in SYSTEM_ANNOUNCEMENTS}
    for candidate in users.list_active():
        own = [
            n for n in notifications.list_for_user(candidate.user_id)
            if n.title not in announcement_titles
        ]
        assert 3 <= len(own) <= 8


# --- payloads ---


async def test_compliance_points_at_earliest_parcels(notifications, users, parcels):
    _add_accounts(users, 1)
    first = parcels.save(make_parcel("LP-2025-0001", created_at=FIXED_NOW - timedelta(days=2)))
    parcels.save(make_parcel("LP-2025-0002", created_at=FIXED_NOW - timedelta(days=1)))
    decisions = ScriptedDecisions(
        picks={"template": COMPLIANCE_TEMPLATE}, values={"compliance_score": 42}
    )

    await _seeder(notifications, users, parcels, decisions).run()

    compliance = [n for n in notifications.list_all() if n.type == NotificationType.COMPLIANCE]
    assert len(compliance) == 3
    for n in compliance:
        assert n.related_entity_type == "land_parcel"
        assert n.related_entity_id == first.id
        assert n.data["parcel_id"] == "LP-2025-0001"
        assert n.data["compliance_score"] == 42
    assert "related_parcel" in decisions.labels("choice")


def test_compliance_without_parcels_has_no_payload():
    notification = build_notification(
        "user-1", TEMPLATES[COMPLIANCE_TEMPLATE], [], ScriptedDecisions(), FIXED_NOW
    )
    assert notification.related_entity_id is None
    assert notification.data == {}


def test_transaction_payload():
    notification = build_notification(
        "user-1", TEMPLATES[TRANSACTION_TEMPLATE], [], ScriptedDecisions(), FIXED_NOW
    )
    assert notification.data == {
        "transaction_hash": "0x" + "0" * 64,
        "block_number": 18_000_000,
        "gas_used": 21_000,
    }
    assert notification.action_text == "View Transaction"


def test_governance_payload():
    decisions = ScriptedDecisions(values={"proposal_number": 15})
    notification = build_notification(
        "user-1", TEMPLATES[GOVERNANCE_TEMPLATE], [], decisions, FIXED_NOW
    )
    assert notification.data["proposal_id"] == "PROP-15"
    assert notification.data["voting_deadline"] == (FIXED_NOW + timedelta(days=7)).isoformat()
    assert notification.action_url == "/governance"


# --- read, archive and e-mail state ---


def test_all_gates_closed_leaves_unread():
    notification = build_notification(
        "user-1", TEMPLATES[0], [], ScriptedDecisions(), FIXED_NOW
    )
    assert notification.status == NotificationStatus.UNREAD
    assert notification.read_at is None
    assert notification.expires_at is None
    assert notification.email_sent is False
    assert notification.created_at == FIXED_NOW


def test_all_gates_open_archives():
    decisions = ScriptedDecisions(
        default_chance=True,
        values={"created_age": 0.5, "read_age": 0.5, "expires_in": 0.5, "email_delay": 0.5},
    )
    notification = build_notification("user-1", TEMPLATES[0], [], decisions, FIXED_NOW)

    assert notification.status == NotificationStatus.ARCHIVED
    assert notification.archived_at == FIXED_NOW
    assert notification.read_at == FIXED_NOW - timedelta(days=3.5)
    assert notification.expires_at == FIXED_NOW + timedelta(days=15)
    assert notification.email_sent is True
    assert notification.email_sent_at == notification.created_at + timedelta(minutes=30)


def test_read_time_never_precedes_creation():
    decisions = ScriptedDecisions(
        gates={"read": True}, values={"created_age": 0.1, "read_age": 1.0}
    )
    notification = build_notification("user-1", TEMPLATES[0], [], decisions, FIXED_NOW)

    assert notification.status == NotificationStatus.READ
    assert notification.created_at == FIXED_NOW - timedelta(days=3)
    assert notification.read_at == notification.created_at


# --- orchestration ---


async def test_seed_stores_runs_notifications_after_parcels(notifications):
    users, parcels, expropriations = UserStore(), ParcelStore(), ExpropriationStore()
    config = SeedConfig(parcel_count=4, random_seed=8)

    report = await seed_stores(
        users, parcels, expropriations, config, notifications=notifications
    )

    assert report.parcels_created == 4
    assert report.notifications_created == notifications.count()
    parcel_ids = {p.id for p in parcels.list_all()}
    for n in notifications.list_all():
        if n.related_entity_id is not None:
            assert n.related_entity_id in parcel_ids


async def test_seed_stores_without_notification_store():
    report = await seed_stores(
        UserStore(), ParcelStore(), ExpropriationStore(), SeedConfig(parcel_count=2)
    )
    assert report.notifications_created == 0
