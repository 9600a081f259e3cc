"""Closed value sets shared across all land registry modules."""

from __future__ import annotations

from enum import StrEnum


class UserRole(StrEnum):
    """Account roles."""

    ADMIN = "ADMIN"
    RLMUA_OFFICER = "RLMUA_OFFICER"
    USER = "USER"


class UserStatus(StrEnum):
    """Account lifecycle status."""

    ACTIVE = "ACTIVE"
    PENDING_VERIFICATION = "PENDING_VERIFICATION"
    SUSPENDED = "SUSPENDED"
    INACTIVE = "INACTIVE"


class LandUseType(StrEnum):
    """Land use classification of a parcel."""

    RESIDENTIAL = "RESIDENTIAL"
    COMMERCIAL = "COMMERCIAL"
    AGRICULTURAL = "AGRICULTURAL"
    INDUSTRIAL = "INDUSTRIAL"
    CONSERVATION = "CONSERVATION"
    RECREATIONAL = "RECREATIONAL"
    INSTITUTIONAL = "INSTITUTIONAL"
    MIXED_USE = "MIXED_USE"
    UNDEVELOPED = "UNDEVELOPED"


class ParcelStatus(StrEnum):
    """Lifecycle status of a parcel. EXPROPRIATED is terminal."""

    ACTIVE = "ACTIVE"
    PENDING_REGISTRATION = "PENDING_REGISTRATION"
    UNDER_DISPUTE = "UNDER_DISPUTE"
    TRANSFERRED = "TRANSFERRED"
    EXPROPRIATED = "EXPROPRIATED"
    INACTIVE = "INACTIVE"


class ComplianceStatus(StrEnum):
    """Compliance assessment status of a parcel."""

    COMPLIANT = "COMPLIANT"
    NON_COMPLIANT = "NON_COMPLIANT"
    UNDER_REVIEW = "UNDER_REVIEW"
    PENDING_ASSESSMENT = "PENDING_ASSESSMENT"
    EXEMPTED = "EXEMPTED"


class ExpropriationStatus(StrEnum):
    """Status of an expropriation case."""

    FLAGGED = "FLAGGED"
    UNDER_REVIEW = "UNDER_REVIEW"
    APPROVED = "APPROVED"
    COMPENSATION_DEPOSITED = "COMPENSATION_DEPOSITED"
    COMPENSATION_CLAIMED = "COMPENSATION_CLAIMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class ExpropriationReason(StrEnum):
    """Why the state is reclaiming a parcel."""

    PUBLIC_INFRASTRUCTURE = "PUBLIC_INFRASTRUCTURE"
    URBAN_DEVELOPMENT = "URBAN_DEVELOPMENT"
    ENVIRONMENTAL_PROTECTION = "ENVIRONMENTAL_PROTECTION"
    NATIONAL_SECURITY = "NATIONAL_SECURITY"
    OTHER = "OTHER"


class HeirRelationship(StrEnum):
    """Relationship of a nominated heir to the parcel owner."""

    SPOUSE = "spouse"
    CHILD = "child"
    PARENT = "parent"
    SIBLING = "sibling"


class SoilType(StrEnum):
    CLAY = "clay"
    LOAM = "loam"
    SAND = "sand"


class Amenity(StrEnum):
    SCHOOL = "school"
    HOSPITAL = "hospital"
    MARKET = "market"
    CHURCH = "church"


class DocumentType(StrEnum):
    TITLE = "title"
    SURVEY = "survey"


class InheritanceStatus(StrEnum):
    """Status of an inheritance request."""

    PENDING = "PENDING"
    VERIFICATION_REQUESTED = "VERIFICATION_REQUESTED"
    DEATH_VERIFIED = "DEATH_VERIFIED"
    DEATH_REJECTED = "DEATH_REJECTED"
    APPROVED = "APPROVED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    DISPUTED = "DISPUTED"


class VerificationSource(StrEnum):
    """Authority that confirmed a death for an inheritance request."""

    NIDA = "NIDA"
    HOSPITAL = "HOSPITAL"
    COURT = "COURT"
    MANUAL = "MANUAL"


class NotificationType(StrEnum):
    """Subject area of an in-app notification."""

    SYSTEM = "SYSTEM"
    TRANSACTION = "TRANSACTION"
    COMPLIANCE = "COMPLIANCE"
    INHERITANCE = "INHERITANCE"
    DISPUTE = "DISPUTE"
    GOVERNANCE = "GOVERNANCE"
    EXPROPRIATION = "EXPROPRIATION"
    SECURITY = "SECURITY"


class NotificationPriority(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class NotificationStatus(StrEnum):
    """Read state of a notification. ARCHIVED wins over READ."""

    UNREAD = "UNREAD"
    READ = "READ"
    ARCHIVED = "ARCHIVED"
