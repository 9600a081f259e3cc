"""Inheritance request workflow: create, update, verify death, execute."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from landregistry.core.types import InheritanceStatus, ParcelStatus
from landregistry.inheritance.models import InheritanceRequest
from landregistry.inheritance.schemas import (
    CreateInheritanceRequest,
    ExecuteInheritance,
    InheritanceRequestFilter,
    UpdateInheritanceRequest,
    VerifyDeath,
)
from landregistry.repositories import resolve
from landregistry.validation.common import parse_date_string

logger = logging.getLogger(__name__)

_VERIFIABLE = {InheritanceStatus.PENDING, InheritanceStatus.VERIFICATION_REQUESTED}


class InheritanceStateError(ValueError):
    """Raised when a request cannot move to the asked-for state."""


class InheritanceService:
    """Drives inheritance requests through their lifecycle.

    Works with either in-memory stores or Postgres repositories; every
    store call goes through ``resolve()``.
    """

    def __init__(self, requests: Any, parcels: Any) -> None:
        self._requests = requests
        self._parcels = parcels

    async def create(
        self, body: CreateInheritanceRequest, requested_by: str | None = None
    ) -> InheritanceRequest:
        parcel = await resolve(self._parcels.get(body.parcel_id))
        if parcel is None:
            raise KeyError(body.parcel_id)
        if parcel.owner_address.lower() != body.owner_address.lower():
            raise InheritanceStateError("Owner address does not match the parcel owner")
        if parcel.nominated_heir and parcel.nominated_heir.lower() != body.heir_address.lower():
            raise InheritanceStateError("Only the designated heir can request inheritance")

        request = InheritanceRequest(
            parcel_id=body.parcel_id,
            owner_address=body.owner_address,
            heir_address=body.heir_address,
            requested_by=requested_by or body.heir_address,
            request_date=parse_date_string(body.request_date),
            death_certificate_ref=body.death_certificate_ref,
            date_of_death=parse_date_string(body.date_of_death) if body.date_of_death else None,
            documents_hash=body.documents_hash,
            notes=body.notes,
            requires_manual_verification=body.requires_manual_verification,
        )
        await resolve(self._requests.save(request))
        logger.info("Inheritance request %s opened for parcel %s", request.id, parcel.parcel_id)
        return request

    async def get(self, request_id: str) -> InheritanceRequest:
        request = await resolve(self._requests.get(request_id))
        if request is None:
            raise KeyError(request_id)
        return request

    async def update(
        self, request_id: str, body: UpdateInheritanceRequest
    ) -> InheritanceRequest:
        request = await self.get(request_id)
        changes = body.model_dump(exclude_unset=True)
        if "date_of_death" in changes and changes["date_of_death"] is not None:
            changes["date_of_death"] = parse_date_string(changes["date_of_death"])
        for name, value in changes.items():
            setattr(request, name, value)
        request.updated_at = datetime.now(timezone.utc)
        await resolve(self._requests.save(request))
        return request

    async def list_requests(
        self, filters: InheritanceRequestFilter
    ) -> tuple[list[InheritanceRequest], int]:
        return await resolve(self._requests.list_requests(filters))

    async def verify_death(self, request_id: str, body: VerifyDeath) -> InheritanceRequest:
        request = await self.get(request_id)
        if request.status not in _VERIFIABLE:
            raise InheritanceStateError(
                f"Request is {request.status.value}, cannot verify death"
            )
        request.death_certificate_ref = body.death_certificate_ref
        request.date_of_death = parse_date_string(body.date_of_death)
        request.verification_source = body.verification_source
        if body.documents_hash is not None:
            request.documents_hash = body.documents_hash
        if body.verification_data is not None:
            request.verification_data = body.verification_data
        request.status = InheritanceStatus.DEATH_VERIFIED
        request.updated_at = datetime.now(timezone.utc)
        await resolve(self._requests.save(request))
        logger.info("Death verified for inheritance request %s via %s", request.id,
                    body.verification_source.value)
        return request

    async def execute(self, request_id: str, body: ExecuteInheritance) -> InheritanceRequest:
        """Complete a verified request and hand the parcel to the heir."""
        request = await self.get(request_id)
        if not request.can_execute:
            raise InheritanceStateError(
                f"Request is {request.status.value}, cannot execute transfer"
            )
        parcel = await resolve(self._parcels.get(request.parcel_id))
        if parcel is None:
            raise KeyError(request.parcel_id)

        now = datetime.now(timezone.utc)
        request.transfer_transaction_hash = body.transfer_transaction_hash
        if body.notes is not None:
            request.notes = body.notes
        request.status = InheritanceStatus.COMPLETED
        request.completed_date = now
        request.updated_at = now
        await resolve(self._requests.save(request))

        parcel.owner_address = request.heir_address
        if parcel.heir_details is not None:
            parcel.owner_name = parcel.heir_details.name
            parcel.owner_email = parcel.heir_details.contact_info.email
            parcel.owner_phone = parcel.heir_details.contact_info.phone
        parcel.nominated_heir = None
        parcel.heir_details = None
        parcel.inheritance_active = False
        parcel.status = ParcelStatus.TRANSFERRED
        parcel.updated_at = now
        await resolve(self._parcels.save(parcel))
        logger.info("Parcel %s transferred to %s", parcel.parcel_id, request.heir_address)
        return request
