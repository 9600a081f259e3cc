"""Request schemas for inheritance request operations.

Each schema declares field presence, type, length, format and range rules.
Pydantic raises a ValidationError carrying one message per failing field;
FastAPI turns it into a 422 response.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from landregistry.core.types import InheritanceStatus, VerificationSource
from landregistry.validation.common import check

SORTABLE_FIELDS = ("request_date", "created_at", "updated_at", "status")


def _coerce_flag(value: Any) -> Any:
    if value is None:
        return None
    return value == "true" or value is True


class CreateInheritanceRequest(BaseModel):
    """Body for opening an inheritance request."""

    parcel_id: str
    owner_address: str
    heir_address: str
    request_date: str
    death_certificate_ref: str | None = None
    date_of_death: str | None = None
    documents_hash: str | None = None
    notes: str | None = None
    requires_manual_verification: bool = False

    @field_validator("parcel_id")
    @classmethod
    def _parcel_id(cls, v: str) -> str:
        return check("uuid", v)

    @field_validator("owner_address", "heir_address")
    @classmethod
    def _addresses(cls, v: str) -> str:
        return check("address", v)

    @field_validator("request_date", "date_of_death")
    @classmethod
    def _dates(cls, v: str | None) -> str | None:
        return check("date_string", v)

    @field_validator("death_certificate_ref", "documents_hash")
    @classmethod
    def _refs(cls, v: str | None) -> str | None:
        return check("length", v, min_len=1, max_len=100)

    @field_validator("notes")
    @classmethod
    def _notes(cls, v: str | None) -> str | None:
        return check("length", v, max_len=1000)

    @field_validator("requires_manual_verification", mode="before")
    @classmethod
    def _flag(cls, v: Any) -> Any:
        return bool(_coerce_flag(v))


class UpdateInheritanceRequest(BaseModel):
    """Partial update; only fields that are set are applied.

    ``status`` and ``requires_manual_verification`` may be omitted but not
    sent as null.
    """

    status: InheritanceStatus | None = None
    chainlink_request_id: str | None = None
    verification_source: VerificationSource | None = None
    death_certificate_ref: str | None = None
    date_of_death: str | None = None
    documents_hash: str | None = None
    verification_data: dict[str, Any] | None = None
    transfer_transaction_hash: str | None = None
    rejection_reason: str | None = None
    notes: str | None = None
    requires_manual_verification: bool | None = None
    dispute_id: str | None = None

    @field_validator("chainlink_request_id", "transfer_transaction_hash")
    @classmethod
    def _hashes(cls, v: str | None) -> str | None:
        return check("length", v, min_len=66, max_len=66)

    @field_validator("death_certificate_ref", "documents_hash")
    @classmethod
    def _refs(cls, v: str | None) -> str | None:
        return check("length", v, min_len=1, max_len=100)

    @field_validator("date_of_death")
    @classmethod
    def _date_of_death(cls, v: str | None) -> str | None:
        return check("date_string", v)

    @field_validator("rejection_reason", "notes")
    @classmethod
    def _text(cls, v: str | None) -> str | None:
        return check("length", v, max_len=1000)

    @field_validator("dispute_id")
    @classmethod
    def _dispute_id(cls, v: str | None) -> str | None:
        return check("uuid", v)

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Must not be null.")
        return v

    @field_validator("requires_manual_verification", mode="before")
    @classmethod
    def _flag(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Must not be null.")
        return _coerce_flag(v)


class InheritanceRequestFilter(BaseModel):
    """Query parameters for listing inheritance requests."""

    parcel_id: str | None = None
    owner_address: str | None = None
    heir_address: str | None = None
    status: InheritanceStatus | None = None
    verification_source: VerificationSource | None = None
    request_date_from: str | None = None
    request_date_to: str | None = None
    requires_manual_verification: bool | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    sort_by: str = "request_date"
    sort_order: Literal["ASC", "DESC"] = "DESC"

    @field_validator("parcel_id")
    @classmethod
    def _parcel_id(cls, v: str | None) -> str | None:
        return check("uuid", v)

    @field_validator("owner_address", "heir_address")
    @classmethod
    def _addresses(cls, v: str | None) -> str | None:
        return check("address", v)

    @field_validator("request_date_from", "request_date_to")
    @classmethod
    def _dates(cls, v: str | None) -> str | None:
        return check("date_string", v)

    @field_validator("requires_manual_verification", mode="before")
    @classmethod
    def _flag(cls, v: Any) -> Any:
        return _coerce_flag(v)

    @field_validator("sort_by")
    @classmethod
    def _sort_by(cls, v: str) -> str:
        if v not in SORTABLE_FIELDS:
            raise ValueError(f"Must be one of: {', '.join(SORTABLE_FIELDS)}.")
        return v


class VerifyDeath(BaseModel):
    """Body for recording a death verification."""

    death_certificate_ref: str
    date_of_death: str
    verification_source: VerificationSource
    documents_hash: str | None = None
    verification_data: dict[str, Any] | None = None

    @field_validator("death_certificate_ref", "documents_hash")
    @classmethod
    def _refs(cls, v: str | None) -> str | None:
        return check("length", v, min_len=1, max_len=100)

    @field_validator("date_of_death")
    @classmethod
    def _date_of_death(cls, v: str) -> str:
        return check("date_string", v)


class ExecuteInheritance(BaseModel):
    """Body for executing a verified inheritance transfer."""

    transfer_transaction_hash: str
    notes: str | None = None

    @field_validator("transfer_transaction_hash")
    @classmethod
    def _hash(cls, v: str) -> str:
        return check("length", v, min_len=66, max_len=66)

    @field_validator("notes")
    @classmethod
    def _notes(cls, v: str | None) -> str | None:
        return check("length", v, max_len=500)
