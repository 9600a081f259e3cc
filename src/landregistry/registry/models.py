"""Registry data models: accounts, owner candidates, parcels and expropriations."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, Field

from landregistry.core.types import (
    Amenity,
    ComplianceStatus,
    DocumentType,
    ExpropriationReason,
    ExpropriationStatus,
    HeirRelationship,
    LandUseType,
    ParcelStatus,
    SoilType,
    UserRole,
    UserStatus,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


class UserProfile(BaseModel):
    """Personal details attached to an account."""

    id: str = Field(default_factory=_new_id)
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    occupation: str | None = None
    address: str | None = None
    district: str | None = None
    sector: str | None = None
    cell: str | None = None
    village: str | None = None
    country: str | None = None
    is_public: bool = False
    is_verified: bool = False
    preferences: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=_utcnow)

    @property
    def full_name(self) -> str | None:
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) if parts else None


class UserAccount(BaseModel):
    """A registered account. Profiles keep their creation order."""

    id: str = Field(default_factory=_new_id)
    email: str
    wallet_address: str
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE
    email_verified: bool = False
    is_active: bool = True
    profiles: list[UserProfile] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow)


class OwnerProfile(BaseModel):
    full_name: str | None = None
    phone_number: str | None = None


class OwnerCandidate(BaseModel):
    """An active account that may own or inherit parcels.

    Holds zero or one profile. When an account has several, the first one
    wins.
    """

    user_id: str
    wallet_address: str
    email: str
    profile: OwnerProfile | None = None

    @classmethod
    def from_account(cls, account: UserAccount) -> OwnerCandidate:
        profile = None
        if account.profiles:
            first = account.profiles[0]
            profile = OwnerProfile(full_name=first.full_name, phone_number=first.phone_number)
        return cls(
            user_id=account.id,
            wallet_address=account.wallet_address,
            email=account.email,
            profile=profile,
        )

    @property
    def display_name(self) -> str:
        """Profile name, or the local part of the e-mail address."""
        if self.profile is not None and self.profile.full_name:
            return self.profile.full_name
        return self.email.split("@")[0]

    @property
    def phone_number(self) -> str | None:
        return self.profile.phone_number if self.profile is not None else None


# ---------------------------------------------------------------------------
# Parcels
# ---------------------------------------------------------------------------


class GeoPoint(BaseModel):
    """GeoJSON point, coordinates are ``[lng, lat]``."""

    type: Literal["Point"] = "Point"
    coordinates: list[float]


class GeoPolygon(BaseModel):
    """GeoJSON polygon, one ring of ``[lng, lat]`` pairs."""

    type: Literal["Polygon"] = "Polygon"
    coordinates: list[list[list[float]]]

    @property
    def ring(self) -> list[list[float]]:
        return self.coordinates[0]


class ParcelDocument(BaseModel):
    id: str
    name: str
    type: DocumentType
    hash: str
    uploaded_at: datetime = Field(default_factory=_utcnow)
    verified: bool = False


class ComplianceReport(BaseModel):
    id: str
    score: int
    inspector: str
    report_date: datetime = Field(default_factory=_utcnow)
    findings: str
    recommendations: str


class ParcelMetadata(BaseModel):
    soil_type: SoilType
    elevation: int
    water_access: bool = False
    road_access: bool = False
    electricity_access: bool = False
    nearby_amenities: list[Amenity] = Field(default_factory=list)


class HeirContact(BaseModel):
    email: str
    phone: str | None = None


class HeirDetails(BaseModel):
    """Snapshot of a nominated heir taken at nomination time."""

    name: str
    relationship: HeirRelationship
    contact_info: HeirContact
    nominated_at: datetime = Field(default_factory=_utcnow)


class LandParcel(BaseModel):
    """A land unit with ownership, geography, compliance and valuation."""

    id: str = Field(default_factory=_new_id)
    parcel_id: str
    owner_address: str
    owner_name: str
    owner_email: str | None = None
    owner_phone: str | None = None
    land_use: LandUseType
    status: ParcelStatus = ParcelStatus.ACTIVE
    compliance_status: ComplianceStatus = ComplianceStatus.PENDING_ASSESSMENT
    area: float
    estimated_value: float
    address: str = ""
    district: str
    sector: str
    cell: str
    village: str
    location: GeoPoint
    boundary: GeoPolygon
    token_id: str | None = None
    token_uri: str | None = None
    transaction_hash: str | None = None
    block_number: str | None = None
    compliance_score: int = 0
    last_inspection_date: datetime | None = None
    next_inspection_date: datetime | None = None
    total_fines: int = 0
    total_eco_credits: int = 0
    documents: list[ParcelDocument] = Field(default_factory=list)
    compliance_reports: list[ComplianceReport] = Field(default_factory=list)
    metadata: ParcelMetadata | None = None
    description: str = ""
    notes: str | None = None
    nominated_heir: str | None = None
    heir_details: HeirDetails | None = None
    inheritance_active: bool = False
    is_active: bool = True
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


# ---------------------------------------------------------------------------
# Expropriations
# ---------------------------------------------------------------------------


class TimelineEvent(BaseModel):
    timestamp: datetime = Field(default_factory=_utcnow)
    event: str
    details: str = ""
    status: ExpropriationStatus


class Expropriation(BaseModel):
    """A government-initiated reclamation case against one parcel."""

    id: str = Field(default_factory=_new_id)
    land_parcel_id: str
    parcel_id: str
    owner_address: str
    initiated_by: str
    status: ExpropriationStatus = ExpropriationStatus.FLAGGED
    reason: ExpropriationReason
    description: str = ""
    reason_document_hash: str | None = None
    proposed_compensation: float
    timeline: list[TimelineEvent] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
