"""Inheritance request data model."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from landregistry.core.types import InheritanceStatus, VerificationSource


class InheritanceRequest(BaseModel):
    """An heir's claim to take over a parcel after the owner's death."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    parcel_id: str
    owner_address: str
    heir_address: str
    requested_by: str
    status: InheritanceStatus = InheritanceStatus.PENDING
    request_date: datetime
    chainlink_request_id: str | None = None
    verification_source: VerificationSource | None = None
    death_certificate_ref: str | None = None
    date_of_death: datetime | None = None
    documents_hash: str | None = None
    verification_data: dict[str, Any] | None = None
    transfer_transaction_hash: str | None = None
    completed_date: datetime | None = None
    rejection_reason: str | None = None
    notes: str | None = None
    requires_manual_verification: bool = False
    dispute_id: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def can_execute(self) -> bool:
        return (
            self.status == InheritanceStatus.DEATH_VERIFIED
            and not self.transfer_transaction_hash
        )
