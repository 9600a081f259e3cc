"""In-memory store for inheritance requests."""

from __future__ import annotations

from landregistry.inheritance.models import InheritanceRequest
from landregistry.inheritance.schemas import InheritanceRequestFilter
from landregistry.validation.common import parse_date_string


class InheritanceRequestStore:
    """In-memory dict store for inheritance requests."""

    def __init__(self) -> None:
        self._requests: dict[str, InheritanceRequest] = {}

    def save(self, request: InheritanceRequest) -> InheritanceRequest:
        self._requests[request.id] = request
        return request

    def get(self, request_id: str) -> InheritanceRequest | None:
        return self._requests.get(request_id)

    def count(self) -> int:
        return len(self._requests)

    def list_requests(
        self, filters: InheritanceRequestFilter
    ) -> tuple[list[InheritanceRequest], int]:
        """Return one page of matching requests and the total match count."""
        matches = [r for r in self._requests.values() if _matches(r, filters)]
        matches.sort(
            key=lambda r: getattr(r, filters.sort_by),
            reverse=filters.sort_order == "DESC",
        )
        start = (filters.page - 1) * filters.limit
        return matches[start:start + filters.limit], len(matches)


def _matches(request: InheritanceRequest, f: InheritanceRequestFilter) -> bool:
    if f.parcel_id is not None and request.parcel_id != f.parcel_id:
        return False
    if f.owner_address is not None and request.owner_address.lower() != f.owner_address.lower():
        return False
    if f.heir_address is not None and request.heir_address.lower() != f.heir_address.lower():
        return False
    if f.status is not None and request.status != f.status:
        return False
    if f.verification_source is not None and request.verification_source != f.verification_source:
        return False
    if (
        f.requires_manual_verification is not None
        and request.requires_manual_verification != f.requires_manual_verification
    ):
        return False
    if f.request_date_from is not None and request.request_date < parse_date_string(f.request_date_from):
        return False
    if f.request_date_to is not None and request.request_date > parse_date_string(f.request_date_to):
        return False
    return True
