"""Tests for SQLAlchemy ORM model definitions."""

from __future__ import annotations

from landregistry.db.base import Base
from landregistry.db.models import (
    ExpropriationRow,
    InheritanceRequestRow,
    LandParcelRow,
    NotificationRow,
    UserProfileRow,
    UserRow,
)


EXPECTED_TABLES = {
    "users",
    "user_profiles",
    "land_parcels",
    "expropriations",
    "inheritance_requests",
    "notifications",
}


def test_all_tables_registered():
    assert EXPECTED_TABLES == set(Base.metadata.tables.keys())


def test_parcel_metadata_column_name():
    """The ``metadata`` attribute is reserved on declarative classes."""
    assert "metadata" in LandParcelRow.__table__.columns
    assert "metadata" in ExpropriationRow.__table__.columns


def test_parcel_indexes():
    names = {ix.name for ix in LandParcelRow.__table__.indexes}
    assert {
        "ix_land_parcels_owner_address",
        "ix_land_parcels_created_at",
    } <= names


def test_foreign_keys():
    fk_targets = {fk.target_fullname for fk in ExpropriationRow.__table__.foreign_keys}
    assert "land_parcels.id" in fk_targets
    fk_targets = {fk.target_fullname for fk in InheritanceRequestRow.__table__.foreign_keys}
    assert "land_parcels.id" in fk_targets
    fk_targets = {fk.target_fullname for fk in UserProfileRow.__table__.foreign_keys}
    assert "users.id" in fk_targets
    fk_targets = {fk.target_fullname for fk in NotificationRow.__table__.foreign_keys}
    assert "users.id" in fk_targets


def test_parcel_code_unique():
    assert LandParcelRow.__table__.columns["parcel_id"].unique
    assert UserRow.__table__.columns["wallet_address"].unique
