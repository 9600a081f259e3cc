"""PostgreSQL account repository."""

from __future__ import annotations

from sqlalchemy import func, select

from landregistry.core.types import UserRole, UserStatus
from landregistry.db.engine import DatabaseManager
from landregistry.db.models import UserProfileRow, UserRow
from landregistry.registry.models import OwnerCandidate, UserAccount, UserProfile


class PostgresUserRepository:
    """Postgres-backed account storage."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    async def save(self, account: UserAccount) -> UserAccount:
        async with self._db.session() as db:
            existing = await db.get(UserRow, account.id)
            if existing:
                existing.email = account.email
                existing.wallet_address = account.wallet_address
                existing.role = account.role.value
                existing.status = account.status.value
                existing.email_verified = account.email_verified
                existing.is_active = account.is_active
            else:
                row = UserRow(
                    id=account.id,
                    email=account.email,
                    wallet_address=account.wallet_address,
                    role=account.role.value,
                    status=account.status.value,
                    email_verified=account.email_verified,
                    is_active=account.is_active,
                    created_at=account.created_at,
                    profiles=[self._profile_to_row(p) for p in account.profiles],
                )
                db.add(row)
            await db.commit()
        return account

    async def get(self, user_id: str) -> UserAccount | None:
        async with self._db.session() as db:
            row = await db.get(UserRow, user_id)
            if row is None:
                return None
            return self._row_to_account(row)

    async def count(self) -> int:
        async with self._db.session() as db:
            result = await db.execute(select(func.count()).select_from(UserRow))
            return result.scalar_one()

    async def list_active(self) -> list[OwnerCandidate]:
        async with self._db.session() as db:
            result = await db.execute(
                select(UserRow)
                .where(UserRow.is_active.is_(True))
                .order_by(UserRow.created_at)
            )
            return [
                OwnerCandidate.from_account(self._row_to_account(r))
                for r in result.scalars().all()
            ]

    @staticmethod
    def _profile_to_row(profile: UserProfile) -> UserProfileRow:
        return UserProfileRow(
            id=profile.id,
            first_name=profile.first_name,
            last_name=profile.last_name,
            phone_number=profile.phone_number,
            occupation=profile.occupation,
            address=profile.address,
            district=profile.district,
            sector=profile.sector,
            cell=profile.cell,
            village=profile.village,
            country=profile.country,
            is_public=profile.is_public,
            is_verified=profile.is_verified,
            preferences=profile.preferences,
            created_at=profile.created_at,
        )

    @staticmethod
    def _row_to_account(row: UserRow) -> UserAccount:
        return UserAccount(
            id=row.id,
            email=row.email,
            wallet_address=row.wallet_address,
            role=UserRole(row.role),
            status=UserStatus(row.status),
            email_verified=row.email_verified,
            is_active=row.is_active,
            created_at=row.created_at,
            profiles=[
                UserProfile(
                    id=p.id,
                    first_name=p.first_name,
                    last_name=p.last_name,
                    phone_number=p.phone_number,
                    occupation=p.occupation,
                    address=p.address,
                    district=p.district,
                    sector=p.sector,
                    cell=p.cell,
                    village=p.village,
                    country=p.country,
                    is_public=p.is_public,
                    is_verified=p.is_verified,
                    preferences=p.preferences or {},
                    created_at=p.created_at,
                )
                for p in row.profiles
            ],
        )
