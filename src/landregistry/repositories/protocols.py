"""Protocol definitions for all repository interfaces.

Each protocol mirrors the public methods of the corresponding in-memory
store class, so both sync (in-memory) and async (Postgres)
implementations satisfy the same interface.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from landregistry.inheritance.models import InheritanceRequest
from landregistry.inheritance.schemas import InheritanceRequestFilter
from landregistry.notifications.models import Notification
from landregistry.registry.models import (
    Expropriation,
    LandParcel,
    OwnerCandidate,
    UserAccount,
)


@runtime_checkable
class UserRepository(Protocol):
    """Protocol for account storage and the owner-candidate query."""

    def save(self, account: UserAccount) -> UserAccount: ...

    def get(self, user_id: str) -> UserAccount | None: ...

    def count(self) -> int: ...

    def list_active(self) -> list[OwnerCandidate]: ...


@runtime_checkable
class ParcelRepository(Protocol):
    """Protocol for land parcel storage."""

    def save(self, parcel: LandParcel) -> LandParcel: ...

    def get(self, parcel_uuid: str) -> LandParcel | None: ...

    def get_by_parcel_id(self, parcel_id: str) -> LandParcel | None: ...

    def count(self) -> int: ...

    def list_all(self) -> list[LandParcel]: ...

    def list_for_owner(self, owner_address: str) -> list[LandParcel]: ...

    def list_earliest(self, limit: int) -> list[LandParcel]: ...


@runtime_checkable
class ExpropriationRepository(Protocol):
    """Protocol for expropriation case storage."""

    def save(self, case: Expropriation) -> Expropriation: ...

    def get(self, case_id: str) -> Expropriation | None: ...

    def count(self) -> int: ...

    def list_all(self) -> list[Expropriation]: ...

    def list_for_parcel(self, land_parcel_id: str) -> list[Expropriation]: ...


@runtime_checkable
class InheritanceRequestRepository(Protocol):
    """Protocol for inheritance request storage."""

    def save(self, request: InheritanceRequest) -> InheritanceRequest: ...

    def get(self, request_id: str) -> InheritanceRequest | None: ...

    def count(self) -> int: ...

    def list_requests(
        self, filters: InheritanceRequestFilter
    ) -> tuple[list[InheritanceRequest], int]: ...


@runtime_checkable
class NotificationRepository(Protocol):
    """Protocol for notification storage."""

    def save(self, notification: Notification) -> Notification: ...

    def get(self, notification_id: str) -> Notification | None: ...

    def count(self) -> int: ...

    def list_for_user(self, user_id: str) -> list[Notification]: ...

    def list_all(self) -> list[Notification]: ...
