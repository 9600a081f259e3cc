"""PostgreSQL inheritance request repository."""

from __future__ import annotations

from sqlalchemy import func, select

from landregistry.core.types import InheritanceStatus, VerificationSource
from landregistry.db.engine import DatabaseManager
from landregistry.db.models import InheritanceRequestRow
from landregistry.inheritance.models import InheritanceRequest
from landregistry.inheritance.schemas import InheritanceRequestFilter
from landregistry.validation.common import parse_date_string

_PLAIN_FIELDS = (
    "parcel_id",
    "owner_address",
    "heir_address",
    "requested_by",
    "request_date",
    "chainlink_request_id",
    "death_certificate_ref",
    "date_of_death",
    "documents_hash",
    "verification_data",
    "transfer_transaction_hash",
    "completed_date",
    "rejection_reason",
    "notes",
    "requires_manual_verification",
    "dispute_id",
    "updated_at",
)


class PostgresInheritanceRequestRepository:
    """Postgres-backed inheritance request storage."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    async def save(self, request: InheritanceRequest) -> InheritanceRequest:
        async with self._db.session() as db:
            row = await db.get(InheritanceRequestRow, request.id)
            if row is None:
                row = InheritanceRequestRow(id=request.id, created_at=request.created_at)
                db.add(row)
            for name in _PLAIN_FIELDS:
                setattr(row, name, getattr(request, name))
            row.status = request.status.value
            row.verification_source = (
                request.verification_source.value if request.verification_source else None
            )
            await db.commit()
        return request

    async def get(self, request_id: str) -> InheritanceRequest | None:
        async with self._db.session() as db:
            row = await db.get(InheritanceRequestRow, request_id)
            if row is None:
                return None
            return self._row_to_request(row)

    async def count(self) -> int:
        async with self._db.session() as db:
            result = await db.execute(select(func.count()).select_from(InheritanceRequestRow))
            return result.scalar_one()

    async def list_requests(
        self, filters: InheritanceRequestFilter
    ) -> tuple[list[InheritanceRequest], int]:
        conditions = []
        if filters.parcel_id is not None:
            conditions.append(InheritanceRequestRow.parcel_id == filters.parcel_id)
        if filters.owner_address is not None:
            conditions.append(
                func.lower(InheritanceRequestRow.owner_address) == filters.owner_address.lower()
            )
        if filters.heir_address is not None:
            conditions.append(
                func.lower(InheritanceRequestRow.heir_address) == filters.heir_address.lower()
            )
        if filters.status is not None:
            conditions.append(InheritanceRequestRow.status == filters.status.value)
        if filters.verification_source is not None:
            conditions.append(
                InheritanceRequestRow.verification_source == filters.verification_source.value
            )
        if filters.requires_manual_verification is not None:
            conditions.append(
                InheritanceRequestRow.requires_manual_verification
                == filters.requires_manual_verification
            )
        if filters.request_date_from is not None:
            conditions.append(
                InheritanceRequestRow.request_date >= parse_date_string(filters.request_date_from)
            )
        if filters.request_date_to is not None:
            conditions.append(
                InheritanceRequestRow.request_date <= parse_date_string(filters.request_date_to)
            )

        sort_column = getattr(InheritanceRequestRow, filters.sort_by)
        order = sort_column.desc() if filters.sort_order == "DESC" else sort_column.asc()

        async with self._db.session() as db:
            total = (
                await db.execute(
                    select(func.count()).select_from(InheritanceRequestRow).where(*conditions)
                )
            ).scalar_one()
            result = await db.execute(
                select(InheritanceRequestRow)
                .where(*conditions)
                .order_by(order)
                .offset((filters.page - 1) * filters.limit)
                .limit(filters.limit)
            )
            return [self._row_to_request(r) for r in result.scalars().all()], total

    @staticmethod
    def _row_to_request(row: InheritanceRequestRow) -> InheritanceRequest:
        return InheritanceRequest(
            id=row.id,
            **{name: getattr(row, name) for name in _PLAIN_FIELDS},
            status=InheritanceStatus(row.status),
            verification_source=(
                VerificationSource(row.verification_source) if row.verification_source else None
            ),
            created_at=row.created_at,
        )
