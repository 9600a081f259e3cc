"""In-memory stores for accounts, parcels and expropriations."""

from __future__ import annotations

from landregistry.registry.models import (
    Expropriation,
    LandParcel,
    OwnerCandidate,
    UserAccount,
)


class UserStore:
    """In-memory dict store for accounts.

    Suitable for single-instance deployment and tests.
    """

    def __init__(self) -> None:
        self._users: dict[str, UserAccount] = {}

    def save(self, account: UserAccount) -> UserAccount:
        self._users[account.id] = account
        return account

    def get(self, user_id: str) -> UserAccount | None:
        return self._users.get(user_id)

    def count(self) -> int:
        return len(self._users)

    def list_active(self) -> list[OwnerCandidate]:
        return [
            OwnerCandidate.from_account(u)
            for u in self._users.values()
            if u.is_active
        ]


class ParcelStore:
    """In-memory dict store for land parcels."""

    def __init__(self) -> None:
        self._parcels: dict[str, LandParcel] = {}

    def save(self, parcel: LandParcel) -> LandParcel:
        self._parcels[parcel.id] = parcel
        return parcel

    def get(self, parcel_uuid: str) -> LandParcel | None:
        return self._parcels.get(parcel_uuid)

    def get_by_parcel_id(self, parcel_id: str) -> LandParcel | None:
        for parcel in self._parcels.values():
            if parcel.parcel_id == parcel_id:
                return parcel
        return None

    def count(self) -> int:
        return len(self._parcels)

    def list_all(self) -> list[LandParcel]:
        return list(self._parcels.values())

    def list_for_owner(self, owner_address: str) -> list[LandParcel]:
        return [
            p for p in self._parcels.values()
            if p.owner_address == owner_address
        ]

    def list_earliest(self, limit: int) -> list[LandParcel]:
        ordered = sorted(self._parcels.values(), key=lambda p: (p.created_at, p.parcel_id))
        return ordered[:limit]


class ExpropriationStore:
    """In-memory dict store for expropriation cases."""

    def __init__(self) -> None:
        self._cases: dict[str, Expropriation] = {}

    def save(self, case: Expropriation) -> Expropriation:
        self._cases[case.id] = case
        return case

    def get(self, case_id: str) -> Expropriation | None:
        return self._cases.get(case_id)

    def count(self) -> int:
        return len(self._cases)

    def list_all(self) -> list[Expropriation]:
        return list(self._cases.values())

    def list_for_parcel(self, land_parcel_id: str) -> list[Expropriation]:
        return [
            c for c in self._cases.values()
            if c.land_parcel_id == land_parcel_id
        ]
