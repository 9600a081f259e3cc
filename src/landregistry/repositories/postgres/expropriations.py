"""PostgreSQL expropriation repository."""

from __future__ import annotations

from sqlalchemy import func, select

from landregistry.core.types import ExpropriationReason, ExpropriationStatus
from landregistry.db.engine import DatabaseManager
from landregistry.db.models import ExpropriationRow
from landregistry.registry.models import Expropriation, TimelineEvent


class PostgresExpropriationRepository:
    """Postgres-backed expropriation case storage."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    async def save(self, case: Expropriation) -> Expropriation:
        async with self._db.session() as db:
            existing = await db.get(ExpropriationRow, case.id)
            if existing:
                existing.status = case.status.value
                existing.reason = case.reason.value
                existing.description = case.description
                existing.reason_document_hash = case.reason_document_hash
                existing.proposed_compensation = case.proposed_compensation
                existing.timeline = [e.model_dump(mode="json") for e in case.timeline]
                existing.metadata_json = case.metadata
                existing.updated_at = case.updated_at
            else:
                row = ExpropriationRow(
                    id=case.id,
                    land_parcel_id=case.land_parcel_id,
                    parcel_id=case.parcel_id,
                    owner_address=case.owner_address,
                    initiated_by=case.initiated_by,
                    status=case.status.value,
                    reason=case.reason.value,
                    description=case.description,
                    reason_document_hash=case.reason_document_hash,
                    proposed_compensation=case.proposed_compensation,
                    timeline=[e.model_dump(mode="json") for e in case.timeline],
                    metadata_json=case.metadata,
                    created_at=case.created_at,
                    updated_at=case.updated_at,
                )
                db.add(row)
            await db.commit()
        return case

    async def get(self, case_id: str) -> Expropriation | None:
        async with self._db.session() as db:
            row = await db.get(ExpropriationRow, case_id)
            if row is None:
                return None
            return self._row_to_case(row)

    async def count(self) -> int:
        async with self._db.session() as db:
            result = await db.execute(select(func.count()).select_from(ExpropriationRow))
            return result.scalar_one()

    async def list_all(self) -> list[Expropriation]:
        async with self._db.session() as db:
            result = await db.execute(select(ExpropriationRow).order_by(ExpropriationRow.created_at))
            return [self._row_to_case(r) for r in result.scalars().all()]

    async def list_for_parcel(self, land_parcel_id: str) -> list[Expropriation]:
        async with self._db.session() as db:
            result = await db.execute(
                select(ExpropriationRow).where(ExpropriationRow.land_parcel_id == land_parcel_id)
            )
            return [self._row_to_case(r) for r in result.scalars().all()]

    @staticmethod
    def _row_to_case(row: ExpropriationRow) -> Expropriation:
        return Expropriation(
            id=row.id,
            land_parcel_id=row.land_parcel_id,
            parcel_id=row.parcel_id,
            owner_address=row.owner_address,
            initiated_by=row.initiated_by,
            status=ExpropriationStatus(row.status),
            reason=ExpropriationReason(row.reason),
            description=row.description,
            reason_document_hash=row.reason_document_hash,
            proposed_compensation=row.proposed_compensation,
            timeline=[TimelineEvent(**e) for e in (row.timeline or [])],
            metadata=row.metadata_json or {},
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
