"""Initial schema: accounts, parcels, expropriations, inheritance requests.

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _json() -> sa.types.TypeEngine:
    return sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    # -- Accounts --
    op.create_table(
        "users",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("email", sa.String(256), nullable=False, unique=True),
        sa.Column("wallet_address", sa.String(42), nullable=False, unique=True),
        sa.Column("role", sa.String(32), server_default="USER"),
        sa.Column("status", sa.String(32), server_default="ACTIVE"),
        sa.Column("email_verified", sa.Boolean, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_users_is_active", "users", ["is_active"])

    # -- Profiles --
    op.create_table(
        "user_profiles",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column(
            "user_id",
            sa.String(64),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("first_name", sa.String(128), nullable=True),
        sa.Column("last_name", sa.String(128), nullable=True),
        sa.Column("phone_number", sa.String(32), nullable=True),
        sa.Column("occupation", sa.String(128), nullable=True),
        sa.Column("address", sa.String(256), nullable=True),
        sa.Column("district", sa.String(100), nullable=True),
        sa.Column("sector", sa.String(100), nullable=True),
        sa.Column("cell", sa.String(100), nullable=True),
        sa.Column("village", sa.String(100), nullable=True),
        sa.Column("country", sa.String(64), nullable=True),
        sa.Column("is_public", sa.Boolean, server_default=sa.false()),
        sa.Column("is_verified", sa.Boolean, server_default=sa.false()),
        sa.Column("preferences", _json(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_user_profiles_user_id", "user_profiles", ["user_id"])

    # -- Land Parcels --
    op.create_table(
        "land_parcels",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("parcel_id", sa.String(32), nullable=False, unique=True),
        sa.Column("owner_address", sa.String(42), nullable=False),
        sa.Column("owner_name", sa.String(256), nullable=False),
        sa.Column("owner_email", sa.String(256), nullable=True),
        sa.Column("owner_phone", sa.String(32), nullable=True),
        sa.Column("land_use", sa.String(32), nullable=False),
        sa.Column("status", sa.String(32), server_default="ACTIVE"),
        sa.Column("compliance_status", sa.String(32), server_default="PENDING_ASSESSMENT"),
        sa.Column("area", sa.Float, nullable=False),
        sa.Column("estimated_value", sa.Float, nullable=False),
        sa.Column("address", sa.String(256), server_default=""),
        sa.Column("district", sa.String(100), nullable=False),
        sa.Column("sector", sa.String(100), nullable=False),
        sa.Column("cell", sa.String(100), nullable=False),
        sa.Column("village", sa.String(100), nullable=False),
        sa.Column("location", _json(), nullable=False),
        sa.Column("boundary", _json(), nullable=False),
        sa.Column("token_id", sa.String(78), nullable=True),
        sa.Column("token_uri", sa.String(256), nullable=True),
        sa.Column("transaction_hash", sa.String(66), nullable=True),
        sa.Column("block_number", sa.String(32), nullable=True),
        sa.Column("compliance_score", sa.Integer, server_default="0"),
        sa.Column("last_inspection_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("next_inspection_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("total_fines", sa.Integer, server_default="0"),
        sa.Column("total_eco_credits", sa.Integer, server_default="0"),
        sa.Column("documents", _json(), nullable=True),
        sa.Column("compliance_reports", _json(), nullable=True),
        sa.Column("metadata", _json(), nullable=True),
        sa.Column("description", sa.Text, server_default=""),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("nominated_heir", sa.String(42), nullable=True),
        sa.Column("heir_details", _json(), nullable=True),
        sa.Column("inheritance_active", sa.Boolean, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_land_parcels_owner_address", "land_parcels", ["owner_address"])
    op.create_index("ix_land_parcels_land_use", "land_parcels", ["land_use"])
    op.create_index("ix_land_parcels_compliance_status", "land_parcels", ["compliance_status"])
    op.create_index("ix_land_parcels_created_at", "land_parcels", ["created_at"])

    # -- Expropriations --
    op.create_table(
        "expropriations",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column(
            "land_parcel_id",
            sa.String(64),
            sa.ForeignKey("land_parcels.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("parcel_id", sa.String(32), nullable=False),
        sa.Column("owner_address", sa.String(42), nullable=False),
        sa.Column("initiated_by", sa.String(42), nullable=False),
        sa.Column("status", sa.String(32), server_default="FLAGGED"),
        sa.Column("reason", sa.String(32), nullable=False),
        sa.Column("description", sa.Text, server_default=""),
        sa.Column("reason_document_hash", sa.String(128), nullable=True),
        sa.Column("proposed_compensation", sa.Float, nullable=False),
        sa.Column("timeline", _json(), nullable=True),
        sa.Column("metadata", _json(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_expropriations_land_parcel_id", "expropriations", ["land_parcel_id"])
    op.create_index("ix_expropriations_status", "expropriations", ["status"])

    # -- Inheritance Requests --
    op.create_table(
        "inheritance_requests",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column(
            "parcel_id",
            sa.String(64),
            sa.ForeignKey("land_parcels.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("owner_address", sa.String(42), nullable=False),
        sa.Column("heir_address", sa.String(42), nullable=False),
        sa.Column("requested_by", sa.String(42), nullable=False),
        sa.Column("status", sa.String(32), server_default="PENDING"),
        sa.Column("request_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("chainlink_request_id", sa.String(66), nullable=True),
        sa.Column("verification_source", sa.String(16), nullable=True),
        sa.Column("death_certificate_ref", sa.String(100), nullable=True),
        sa.Column("date_of_death", sa.DateTime(timezone=True), nullable=True),
        sa.Column("documents_hash", sa.String(100), nullable=True),
        sa.Column("verification_data", _json(), nullable=True),
        sa.Column("transfer_transaction_hash", sa.String(66), nullable=True),
        sa.Column("completed_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("rejection_reason", sa.Text, nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("requires_manual_verification", sa.Boolean, server_default=sa.false()),
        sa.Column("dispute_id", sa.String(64), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_inheritance_requests_parcel_id", "inheritance_requests", ["parcel_id"])
    op.create_index(
        "ix_inheritance_requests_heir_address", "inheritance_requests", ["heir_address"]
    )
    op.create_index("ix_inheritance_requests_status", "inheritance_requests", ["status"])
    op.create_index(
        "ix_inheritance_requests_request_date", "inheritance_requests", ["request_date"]
    )


def downgrade() -> None:
    op.drop_table("inheritance_requests")
    op.drop_table("expropriations")
    op.drop_table("land_parcels")
    op.drop_table("user_profiles")
    op.drop_table("users")
