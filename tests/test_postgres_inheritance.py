"""Tests for PostgresInheritanceRequestRepository with SQLite async."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from landregistry.core.types import InheritanceStatus, VerificationSource
from landregistry.inheritance.models import InheritanceRequest
from landregistry.inheritance.schemas import (
    CreateInheritanceRequest,
    ExecuteInheritance,
    InheritanceRequestFilter,
    VerifyDeath,
)
from landregistry.inheritance.service import InheritanceService
from landregistry.repositories.postgres.inheritance import PostgresInheritanceRequestRepository
from landregistry.repositories.postgres.parcels import PostgresParcelRepository
from tests.conftest import HEIR_ADDRESS, OWNER_ADDRESS, make_parcel


@pytest.fixture
async def parcel(db_manager):
    parcel = make_parcel()
    await PostgresParcelRepository(db_manager).save(parcel)
    return parcel


@pytest.fixture
def repo(db_manager):
    return PostgresInheritanceRequestRepository(db_manager)


def _request(parcel, day: int = 1, **kwargs) -> InheritanceRequest:
    return InheritanceRequest(
        parcel_id=parcel.id,
        owner_address=OWNER_ADDRESS,
        heir_address=HEIR_ADDRESS,
        requested_by=HEIR_ADDRESS,
        request_date=datetime(2025, 5, day, tzinfo=timezone.utc),
        **kwargs,
    )


async def test_save_and_get(repo, parcel):
    request = _request(parcel, verification_data={"nida": "ok"})
    await repo.save(request)
    found = await repo.get(request.id)
    assert found is not None
    assert found.status == InheritanceStatus.PENDING
    assert found.verification_data == {"nida": "ok"}
    assert found.verification_source is None


async def test_get_missing_returns_none(repo):
    assert await repo.get("missing") is None


async def test_update_status(repo, parcel):
    request = _request(parcel)
    await repo.save(request)
    request.status = InheritanceStatus.DEATH_VERIFIED
    request.verification_source = VerificationSource.HOSPITAL
    await repo.save(request)
    found = await repo.get(request.id)
    assert found.status == InheritanceStatus.DEATH_VERIFIED
    assert found.verification_source == VerificationSource.HOSPITAL
    assert await repo.count() == 1


async def test_list_requests_paginates_and_sorts(repo, parcel):
    for day in range(1, 6):
        await repo.save(_request(parcel, day=day))

    items, total = await repo.list_requests(InheritanceRequestFilter(limit=2))
    assert total == 5
    assert [r.request_date.day for r in items] == [5, 4]

    items, _ = await repo.list_requests(
        InheritanceRequestFilter(page=3, limit=2, sort_order="ASC")
    )
    assert [r.request_date.day for r in items] == [5]


async def test_list_requests_filters(repo, parcel):
    await repo.save(_request(parcel, day=1, requires_manual_verification=True))
    await repo.save(_request(parcel, day=2, status=InheritanceStatus.CANCELLED))

    _, total = await repo.list_requests(
        InheritanceRequestFilter(requires_manual_verification=True)
    )
    assert total == 1
    _, total = await repo.list_requests(
        InheritanceRequestFilter(status=InheritanceStatus.CANCELLED)
    )
    assert total == 1
    _, total = await repo.list_requests(
        InheritanceRequestFilter(owner_address=OWNER_ADDRESS, parcel_id=parcel.id)
    )
    assert total == 2
    _, total = await repo.list_requests(
        InheritanceRequestFilter(request_date_from="2025-05-02")
    )
    assert total == 1


async def test_service_over_repositories(db_manager, repo, parcel):
    parcels = PostgresParcelRepository(db_manager)
    service = InheritanceService(repo, parcels)
    request = await service.create(
        CreateInheritanceRequest(
            parcel_id=parcel.id,
            owner_address=OWNER_ADDRESS,
            heir_address=HEIR_ADDRESS,
            request_date="2025-05-01",
        )
    )
    await service.verify_death(
        request.id,
        VerifyDeath(
            death_certificate_ref="DC-1",
            date_of_death="2025-04-20",
            verification_source=VerificationSource.NIDA,
        ),
    )
    await service.execute(
        request.id, ExecuteInheritance(transfer_transaction_hash="0x" + "c" * 64)
    )

    moved = await parcels.get(parcel.id)
    assert moved.owner_address == HEIR_ADDRESS
