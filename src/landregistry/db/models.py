"""SQLAlchemy ORM models for all persistent tables."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB as PG_JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.types import JSON

from landregistry.db.base import Base


def _jsonb() -> type:
    """Return JSONB for Postgres, plain JSON for SQLite."""
    return JSON().with_variant(PG_JSONB(), "postgresql")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Accounts & Profiles
# ---------------------------------------------------------------------------


class UserRow(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    email: Mapped[str] = mapped_column(String(256), unique=True)
    wallet_address: Mapped[str] = mapped_column(String(42), unique=True)
    role: Mapped[str] = mapped_column(String(32), default="USER")
    status: Mapped[str] = mapped_column(String(32), default="ACTIVE")
    email_verified: Mapped[bool] = mapped_column(Boolean, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    profiles: Mapped[list[UserProfileRow]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="UserProfileRow.created_at",
        lazy="selectin",
    )

    __table_args__ = (
        Index("ix_users_is_active", "is_active"),
    )


class UserProfileRow(Base):
    __tablename__ = "user_profiles"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("users.id", ondelete="CASCADE")
    )
    first_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    occupation: Mapped[str | None] = mapped_column(String(128), nullable=True)
    address: Mapped[str | None] = mapped_column(String(256), nullable=True)
    district: Mapped[str | None] = mapped_column(String(100), nullable=True)
    sector: Mapped[str | None] = mapped_column(String(100), nullable=True)
    cell: Mapped[str | None] = mapped_column(String(100), nullable=True)
    village: Mapped[str | None] = mapped_column(String(100), nullable=True)
    country: Mapped[str | None] = mapped_column(String(64), nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, default=False)
    is_verified: Mapped[bool] = mapped_column(Boolean, default=False)
    preferences: Mapped[dict] = mapped_column(_jsonb(), default=dict)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    user: Mapped[UserRow] = relationship(back_populates="profiles")

    __table_args__ = (
        Index("ix_user_profiles_user_id", "user_id"),
    )


# ---------------------------------------------------------------------------
# Land Parcels
# ---------------------------------------------------------------------------


class LandParcelRow(Base):
    __tablename__ = "land_parcels"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    parcel_id: Mapped[str] = mapped_column(String(32), unique=True)
    owner_address: Mapped[str] = mapped_column(String(42))
    owner_name: Mapped[str] = mapped_column(String(256))
    owner_email: Mapped[str | None] = mapped_column(String(256), nullable=True)
    owner_phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    land_use: Mapped[str] = mapped_column(String(32))
    status: Mapped[str] = mapped_column(String(32), default="ACTIVE")
    compliance_status: Mapped[str] = mapped_column(String(32), default="PENDING_ASSESSMENT")
    area: Mapped[float] = mapped_column(Float)
    estimated_value: Mapped[float] = mapped_column(Float)
    address: Mapped[str] = mapped_column(String(256), default="")
    district: Mapped[str] = mapped_column(String(100))
    sector: Mapped[str] = mapped_column(String(100))
    cell: Mapped[str] = mapped_column(String(100))
    village: Mapped[str] = mapped_column(String(100))
    location: Mapped[dict] = mapped_column(_jsonb(), default=dict)
    boundary: Mapped[dict] = mapped_column(_jsonb(), default=dict)
    token_id: Mapped[str | None] = mapped_column(String(78), nullable=True)
    token_uri: Mapped[str | None] = mapped_column(String(256), nullable=True)
    transaction_hash: Mapped[str | None] = mapped_column(String(66), nullable=True)
    block_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    compliance_score: Mapped[int] = mapped_column(Integer, default=0)
    last_inspection_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    next_inspection_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    total_fines: Mapped[int] = mapped_column(Integer, default=0)
    total_eco_credits: Mapped[int] = mapped_column(Integer, default=0)
    documents: Mapped[list] = mapped_column(_jsonb(), default=list)
    compliance_reports: Mapped[list] = mapped_column(_jsonb(), default=list)
    metadata_json: Mapped[dict | None] = mapped_column("metadata", _jsonb(), nullable=True)
    description: Mapped[str] = mapped_column(Text, default="")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    nominated_heir: Mapped[str | None] = mapped_column(String(42), nullable=True)
    heir_details: Mapped[dict | None] = mapped_column(_jsonb(), nullable=True)
    inheritance_active: Mapped[bool] = mapped_column(Boolean, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        Index("ix_land_parcels_owner_address", "owner_address"),
        Index("ix_land_parcels_land_use", "land_use"),
        Index("ix_land_parcels_compliance_status", "compliance_status"),
        Index("ix_land_parcels_created_at", "created_at"),
    )


# ---------------------------------------------------------------------------
# Expropriations
# ---------------------------------------------------------------------------


class ExpropriationRow(Base):
    __tablename__ = "expropriations"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    land_parcel_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("land_parcels.id", ondelete="CASCADE")
    )
    parcel_id: Mapped[str] = mapped_column(String(32))
    owner_address: Mapped[str] = mapped_column(String(42))
    initiated_by: Mapped[str] = mapped_column(String(42))
    status: Mapped[str] = mapped_column(String(32), default="FLAGGED")
    reason: Mapped[str] = mapped_column(String(32))
    description: Mapped[str] = mapped_column(Text, default="")
    reason_document_hash: Mapped[str | None] = mapped_column(String(128), nullable=True)
    proposed_compensation: Mapped[float] = mapped_column(Float)
    timeline: Mapped[list] = mapped_column(_jsonb(), default=list)
    metadata_json: Mapped[dict] = mapped_column("metadata", _jsonb(), default=dict)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        Index("ix_expropriations_land_parcel_id", "land_parcel_id"),
        Index("ix_expropriations_status", "status"),
    )


# ---------------------------------------------------------------------------
# Inheritance Requests
# ---------------------------------------------------------------------------


class InheritanceRequestRow(Base):
    __tablename__ = "inheritance_requests"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    parcel_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("land_parcels.id", ondelete="CASCADE")
    )
    owner_address: Mapped[str] = mapped_column(String(42))
    heir_address: Mapped[str] = mapped_column(String(42))
    requested_by: Mapped[str] = mapped_column(String(42))
    status: Mapped[str] = mapped_column(String(32), default="PENDING")
    request_date: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    chainlink_request_id: Mapped[str | None] = mapped_column(String(66), nullable=True)
    verification_source: Mapped[str | None] = mapped_column(String(16), nullable=True)
    death_certificate_ref: Mapped[str | None] = mapped_column(String(100), nullable=True)
    date_of_death: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    documents_hash: Mapped[str | None] = mapped_column(String(100), nullable=True)
    verification_data: Mapped[dict | None] = mapped_column(_jsonb(), nullable=True)
    transfer_transaction_hash: Mapped[str | None] = mapped_column(String(66), nullable=True)
    completed_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    rejection_reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    requires_manual_verification: Mapped[bool] = mapped_column(Boolean, default=False)
    dispute_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        Index("ix_inheritance_requests_parcel_id", "parcel_id"),
        Index("ix_inheritance_requests_heir_address", "heir_address"),
        Index("ix_inheritance_requests_status", "status"),
        Index("ix_inheritance_requests_request_date", "request_date"),
    )


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------


class NotificationRow(Base):
    __tablename__ = "notifications"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), ForeignKey("users.id", ondelete="CASCADE"))
    type: Mapped[str] = mapped_column(String(32))
    priority: Mapped[str] = mapped_column(String(16), default="MEDIUM")
    status: Mapped[str] = mapped_column(String(16), default="UNREAD")
    title: Mapped[str] = mapped_column(String(256))
    message: Mapped[str] = mapped_column(Text)
    icon: Mapped[str | None] = mapped_column(String(64), nullable=True)
    action_text: Mapped[str | None] = mapped_column(String(128), nullable=True)
    action_url: Mapped[str | None] = mapped_column(String(256), nullable=True)
    data: Mapped[dict] = mapped_column(_jsonb(), default=dict)
    related_entity_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    related_entity_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    read_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    archived_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    expires_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    email_sent: Mapped[bool] = mapped_column(Boolean, default=False)
    email_sent_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        Index("ix_notifications_user_id", "user_id"),
        Index("ix_notifications_status", "status"),
    )
