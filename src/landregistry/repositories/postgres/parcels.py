"""PostgreSQL land parcel repository."""

from __future__ import annotations

from sqlalchemy import func, select

from landregistry.core.types import ComplianceStatus, LandUseType, ParcelStatus
from landregistry.db.engine import DatabaseManager
from landregistry.db.models import LandParcelRow
from landregistry.registry.models import (
    ComplianceReport,
    GeoPoint,
    GeoPolygon,
    HeirDetails,
    LandParcel,
    ParcelDocument,
    ParcelMetadata,
)

# Columns copied verbatim between the model and the row.
_PLAIN_FIELDS = (
    "parcel_id",
    "owner_address",
    "owner_name",
    "owner_email",
    "owner_phone",
    "area",
    "estimated_value",
    "address",
    "district",
    "sector",
    "cell",
    "village",
    "token_id",
    "token_uri",
    "transaction_hash",
    "block_number",
    "compliance_score",
    "last_inspection_date",
    "next_inspection_date",
    "total_fines",
    "total_eco_credits",
    "description",
    "notes",
    "nominated_heir",
    "inheritance_active",
    "is_active",
    "updated_at",
)


class PostgresParcelRepository:
    """Postgres-backed land parcel storage."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    async def save(self, parcel: LandParcel) -> LandParcel:
        async with self._db.session() as db:
            row = await db.get(LandParcelRow, parcel.id)
            if row is None:
                row = LandParcelRow(id=parcel.id, created_at=parcel.created_at)
                db.add(row)
            self._apply(row, parcel)
            await db.commit()
        return parcel

    async def get(self, parcel_uuid: str) -> LandParcel | None:
        async with self._db.session() as db:
            row = await db.get(LandParcelRow, parcel_uuid)
            if row is None:
                return None
            return self._row_to_parcel(row)

    async def get_by_parcel_id(self, parcel_id: str) -> LandParcel | None:
        async with self._db.session() as db:
            result = await db.execute(
                select(LandParcelRow).where(LandParcelRow.parcel_id == parcel_id)
            )
            row = result.scalar_one_or_none()
            return self._row_to_parcel(row) if row is not None else None

    async def count(self) -> int:
        async with self._db.session() as db:
            result = await db.execute(select(func.count()).select_from(LandParcelRow))
            return result.scalar_one()

    async def list_all(self) -> list[LandParcel]:
        async with self._db.session() as db:
            result = await db.execute(
                select(LandParcelRow).order_by(LandParcelRow.created_at, LandParcelRow.parcel_id)
            )
            return [self._row_to_parcel(r) for r in result.scalars().all()]

    async def list_for_owner(self, owner_address: str) -> list[LandParcel]:
        async with self._db.session() as db:
            result = await db.execute(
                select(LandParcelRow).where(LandParcelRow.owner_address == owner_address)
            )
            return [self._row_to_parcel(r) for r in result.scalars().all()]

    async def list_earliest(self, limit: int) -> list[LandParcel]:
        async with self._db.session() as db:
            result = await db.execute(
                select(LandParcelRow)
                .order_by(LandParcelRow.created_at.asc(), LandParcelRow.parcel_id.asc())
                .limit(limit)
            )
            return [self._row_to_parcel(r) for r in result.scalars().all()]

    @staticmethod
    def _apply(row: LandParcelRow, parcel: LandParcel) -> None:
        for name in _PLAIN_FIELDS:
            setattr(row, name, getattr(parcel, name))
        row.land_use = parcel.land_use.value
        row.status = parcel.status.value
        row.compliance_status = parcel.compliance_status.value
        row.location = parcel.location.model_dump(mode="json")
        row.boundary = parcel.boundary.model_dump(mode="json")
        row.documents = [d.model_dump(mode="json") for d in parcel.documents]
        row.compliance_reports = [r.model_dump(mode="json") for r in parcel.compliance_reports]
        row.metadata_json = (
            parcel.metadata.model_dump(mode="json") if parcel.metadata is not None else None
        )
        row.heir_details = (
            parcel.heir_details.model_dump(mode="json") if parcel.heir_details is not None else None
        )

    @staticmethod
    def _row_to_parcel(row: LandParcelRow) -> LandParcel:
        return LandParcel(
            id=row.id,
            **{name: getattr(row, name) for name in _PLAIN_FIELDS},
            land_use=LandUseType(row.land_use),
            status=ParcelStatus(row.status),
            compliance_status=ComplianceStatus(row.compliance_status),
            location=GeoPoint(**row.location),
            boundary=GeoPolygon(**row.boundary),
            documents=[ParcelDocument(**d) for d in (row.documents or [])],
            compliance_reports=[ComplianceReport(**r) for r in (row.compliance_reports or [])],
            metadata=ParcelMetadata(**row.metadata_json) if row.metadata_json else None,
            heir_details=HeirDetails(**row.heir_details) if row.heir_details else None,
            created_at=row.created_at,
        )
