"""Synthetic land parcel and expropriation generator.

Populates an empty parcel store with internally consistent sample parcels
owned by existing accounts, then derives a few expropriation cases from the
earliest parcels. Randomness comes from an injected ``Decisions`` source.
Builders are pure; only ``LandParcelSeeder.run`` touches storage.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Sequence

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
)
from landregistry.registry.gazetteer import Gazetteer, Location
from landregistry.registry.models import (
    ComplianceReport,
    Expropriation,
    GeoPoint,
    GeoPolygon,
    HeirContact,
    HeirDetails,
    LandParcel,
    OwnerCandidate,
    ParcelDocument,
    ParcelMetadata,
    TimelineEvent,
)
from landregistry.repositories import resolve
from landregistry.seeding.decisions import Decisions
from landregistry.seeding.models import SeedOutcome, SeedReport
from landregistry.seeding.users import ADMIN_ADDRESS

logger = logging.getLogger(__name__)

DEFAULT_PARCEL_COUNT = 50
DEFAULT_EXPROPRIATION_COUNT = 3

AREA_MIN = 100
AREA_MAX = 9999

# RWF per square metre. Placeholder two-tier pricing, not a valuation model.
CAPITAL_BASE_RATE = 50_000
BASE_RATE = 20_000
VALUE_MULTIPLIER_RANGE = (0.8, 1.2)

# Degrees, roughly 100 metres.
BOUNDARY_OFFSET = 0.001

COMPENSATION_FACTOR = 1.2
GOOD_COMPLIANCE_THRESHOLD = 80
INSPECTOR = "RLMUA Inspector"

SEEDED_EXPROPRIATION_STATUSES = (
    ExpropriationStatus.FLAGGED,
    ExpropriationStatus.UNDER_REVIEW,
    ExpropriationStatus.APPROVED,
)
SEEDED_EXPROPRIATION_REASONS = (
    ExpropriationReason.PUBLIC_INFRASTRUCTURE,
    ExpropriationReason.URBAN_DEVELOPMENT,
    ExpropriationReason.ENVIRONMENTAL_PROTECTION,
)

_YEAR = timedelta(days=365)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parcel_code(year: int, index: int) -> str:
    """Code for the ``index``-th (0-based) parcel created in ``year``."""
    return f"LP-{year}-{index + 1:04d}"


def boundary_ring(location: Location, offset: float = BOUNDARY_OFFSET) -> list[list[float]]:
    """Closed square ring around the location: SW, SE, NE, NW, SW."""
    lng, lat = location.lng, location.lat
    ring = [
        [lng - offset, lat - offset],
        [lng + offset, lat - offset],
        [lng + offset, lat + offset],
        [lng - offset, lat + offset],
    ]
    ring.append(list(ring[0]))
    return ring


def base_rate(location: Location) -> int:
    return CAPITAL_BASE_RATE if location.is_capital else BASE_RATE


def estimate_value(area: float, location: Location, multiplier: float) -> float:
    return area * base_rate(location) * multiplier


def compliance_narrative(score: int) -> tuple[str, str]:
    """Findings and recommendations for a compliance score."""
    if score > GOOD_COMPLIANCE_THRESHOLD:
        return "No major issues found", "Continue current practices"
    return "Minor compliance issues detected", "Address identified issues"


def build_documents(number: int, decisions: Decisions, now: datetime) -> list[ParcelDocument]:
    return [
        ParcelDocument(
            id=f"doc-{number}-1",
            name="Land Title Certificate",
            type=DocumentType.TITLE,
            hash=f"ipfs://QmDoc{number}Title",
            uploaded_at=now,
            verified=True,
        ),
        ParcelDocument(
            id=f"doc-{number}-2",
            name="Survey Report",
            type=DocumentType.SURVEY,
            hash=f"ipfs://QmDoc{number}Survey",
            uploaded_at=now,
            verified=decisions.chance(0.8, "survey_verified"),
        ),
    ]


def build_metadata(decisions: Decisions) -> ParcelMetadata:
    return ParcelMetadata(
        soil_type=decisions.choice(list(SoilType), "soil_type"),
        elevation=decisions.randint(1000, 2999, "elevation"),
        water_access=decisions.chance(0.7, "water_access"),
        road_access=decisions.chance(0.8, "road_access"),
        electricity_access=decisions.chance(0.6, "electricity_access"),
        nearby_amenities=[a for a in Amenity if decisions.chance(0.5, f"amenity_{a.value}")],
    )


def build_parcel(
    index: int,
    owner: OwnerCandidate,
    decisions: Decisions,
    now: datetime,
) -> LandParcel:
    """Build the ``index``-th parcel for ``owner`` without persisting it."""
    number = index + 1
    location = decisions.choice(list(Gazetteer), "location").location
    land_use = decisions.choice(list(LandUseType), "land_use")
    status = decisions.choice(list(ParcelStatus), "parcel_status")
    compliance_status = decisions.choice(list(ComplianceStatus), "compliance_status")

    area = decisions.randint(AREA_MIN, AREA_MAX, "area")
    multiplier = decisions.uniform(*VALUE_MULTIPLIER_RANGE, what="value_multiplier")
    score = decisions.randint(0, 99, "compliance_score")
    findings, recommendations = compliance_narrative(score)

    fines = decisions.randint(0, 499_999, "fine_amount") if decisions.chance(0.3, "fines") else 0
    credits = (
        decisions.randint(0, 999, "credit_amount") if decisions.chance(0.5, "eco_credits") else 0
    )

    return LandParcel(
        parcel_id=parcel_code(now.year, index),
        owner_address=owner.wallet_address,
        owner_name=owner.display_name,
        owner_email=owner.email,
        owner_phone=owner.phone_number,
        land_use=land_use,
        status=status,
        compliance_status=compliance_status,
        area=area,
        estimated_value=estimate_value(area, location, multiplier),
        address=location.address,
        district=location.district,
        sector=location.sector,
        cell=location.cell,
        village=location.village,
        location=GeoPoint(coordinates=[location.lng, location.lat]),
        boundary=GeoPolygon(coordinates=[boundary_ring(location)]),
        token_id=str(number),
        token_uri=f"ipfs://QmHash{number}",
        transaction_hash=f"0x{decisions.randint(0, 2**256 - 1, 'transaction_hash'):064x}",
        block_number=str(decisions.randint(18_000_000, 18_999_999, "block_number")),
        compliance_score=score,
        last_inspection_date=now - _YEAR * decisions.uniform(0.0, 1.0, "last_inspection"),
        next_inspection_date=now + _YEAR * decisions.uniform(0.0, 1.0, "next_inspection"),
        total_fines=fines,
        total_eco_credits=credits,
        documents=build_documents(number, decisions, now),
        compliance_reports=[
            ComplianceReport(
                id=f"report-{number}-1",
                score=score,
                inspector=INSPECTOR,
                report_date=now,
                findings=findings,
                recommendations=recommendations,
            )
        ],
        metadata=build_metadata(decisions),
        description=f"{land_use.value.replace('_', ' ', 1)} land parcel in {location.district} district",
        notes="Additional notes about this parcel" if decisions.chance(0.3, "notes") else None,
        created_at=now,
        updated_at=now,
    )


def nominate_heir(
    parcel: LandParcel,
    owner: OwnerCandidate,
    candidates: Sequence[OwnerCandidate],
    decisions: Decisions,
    now: datetime,
) -> bool:
    """Attach an heir picked from the other candidates.

    Returns False, leaving the parcel untouched, when the owner is the only
    candidate.
    """
    others = [c for c in candidates if c.user_id != owner.user_id]
    if not others:
        return False
    heir = decisions.choice(others, "heir")
    parcel.nominated_heir = heir.wallet_address
    parcel.heir_details = HeirDetails(
        name=heir.display_name,
        relationship=decisions.choice(list(HeirRelationship), "heir_relationship"),
        contact_info=HeirContact(email=heir.email, phone=heir.phone_number),
        nominated_at=now,
    )
    parcel.inheritance_active = decisions.chance(0.5, "inheritance_active")
    return True


def build_expropriation(
    parcel: LandParcel,
    decisions: Decisions,
    now: datetime,
    initiated_by: str,
) -> Expropriation:
    """Expropriation case for ``parcel``, compensation at 1.2x its value."""
    return Expropriation(
        land_parcel_id=parcel.id,
        parcel_id=parcel.parcel_id,
        owner_address=parcel.owner_address,
        initiated_by=initiated_by,
        status=decisions.choice(SEEDED_EXPROPRIATION_STATUSES, "expropriation_status"),
        reason=decisions.choice(SEEDED_EXPROPRIATION_REASONS, "expropriation_reason"),
        description="Land required for public infrastructure development project",
        reason_document_hash=f"ipfs://QmExpropriationReason{parcel.id}",
        proposed_compensation=parcel.estimated_value * COMPENSATION_FACTOR,
        timeline=[
            TimelineEvent(
                timestamp=now,
                event="Expropriation initiated",
                details="Land flagged for public infrastructure project",
                status=ExpropriationStatus.FLAGGED,
            )
        ],
        metadata={
            "project_name": "Rwanda Infrastructure Development Project",
            "project_type": "Road Construction",
            "expected_completion_date": (now + _YEAR).isoformat(),
        },
        created_at=now,
        updated_at=now,
    )


class LandParcelSeeder:
    """Seeds parcels and derived expropriations into empty stores.

    Runs strictly sequentially: each parcel is persisted before the next
    one is built, and expropriations are derived only after the parcel loop.
    There is no transaction around the run; a storage failure propagates
    and leaves whatever was already written.
    """

    def __init__(
        self,
        parcels: Any,
        expropriations: Any,
        users: Any,
        decisions: Decisions,
        parcel_count: int = DEFAULT_PARCEL_COUNT,
        expropriation_count: int = DEFAULT_EXPROPRIATION_COUNT,
        admin_address: str = ADMIN_ADDRESS,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._parcels = parcels
        self._expropriations = expropriations
        self._users = users
        self._decisions = decisions
        self._parcel_count = parcel_count
        self._expropriation_count = expropriation_count
        self._admin_address = admin_address
        self._clock = clock

    async def run(self) -> SeedReport:
        if await resolve(self._parcels.count()) > 0:
            logger.info("Land parcels already exist, skipping land parcel seeding")
            return SeedReport(outcome=SeedOutcome.ALREADY_SEEDED)

        candidates: list[OwnerCandidate] = await resolve(self._users.list_active())
        if not candidates:
            logger.warning("No active accounts found, cannot seed land parcels")
            return SeedReport(outcome=SeedOutcome.NO_OWNER_CANDIDATES)

        logger.info("Seeding %d land parcels...", self._parcel_count)
        for index in range(self._parcel_count):
            now = self._clock()
            owner = self._decisions.choice(candidates, "owner")
            parcel = build_parcel(index, owner, self._decisions, now)
            if self._decisions.chance(0.3, "nomination"):
                nominate_heir(parcel, owner, candidates, self._decisions, now)
            await resolve(self._parcels.save(parcel))
        logger.info("Created %d land parcels", self._parcel_count)

        created, expropriated = await self._seed_expropriations()
        return SeedReport(
            outcome=SeedOutcome.SEEDED,
            parcels_created=self._parcel_count,
            expropriations_created=created,
            parcels_expropriated=expropriated,
        )

    async def _seed_expropriations(self) -> tuple[int, list[str]]:
        earliest: list[LandParcel] = await resolve(
            self._parcels.list_earliest(self._expropriation_count)
        )
        expropriated: list[str] = []
        for parcel in earliest:
            now = self._clock()
            case = build_expropriation(parcel, self._decisions, now, self._admin_address)
            await resolve(self._expropriations.save(case))

            # Seeding side effect only; no workflow ties case status to parcel status.
            if self._decisions.chance(0.5, "mark_expropriated"):
                parcel.status = ParcelStatus.EXPROPRIATED
                parcel.updated_at = now
                await resolve(self._parcels.save(parcel))
                expropriated.append(parcel.parcel_id)
        if earliest:
            logger.info("Created %d sample expropriations", len(earliest))
        return len(earliest), expropriated
