"""FastAPI router for inheritance request endpoints."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, HTTPException, Query, Request

from landregistry.inheritance.schemas import (
    CreateInheritanceRequest,
    ExecuteInheritance,
    InheritanceRequestFilter,
    UpdateInheritanceRequest,
    VerifyDeath,
)
from landregistry.inheritance.service import InheritanceStateError

router = APIRouter()


@router.post("/api/inheritance/requests", status_code=201)
async def create_request(
    body: CreateInheritanceRequest, request: Request
) -> dict[str, Any]:
    service = request.app.state.inheritance_service
    try:
        created = await service.create(body)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Parcel {body.parcel_id!r} not found")
    except InheritanceStateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return created.model_dump(mode="json")


@router.get("/api/inheritance/requests")
async def list_requests(
    request: Request,
    filters: Annotated[InheritanceRequestFilter, Query()],
) -> dict[str, Any]:
    service = request.app.state.inheritance_service
    items, total = await service.list_requests(filters)
    return {
        "items": [r.model_dump(mode="json") for r in items],
        "total": total,
        "page": filters.page,
        "limit": filters.limit,
    }


@router.get("/api/inheritance/requests/{request_id}")
async def get_request(request_id: str, request: Request) -> dict[str, Any]:
    service = request.app.state.inheritance_service
    try:
        found = await service.get(request_id)
    except KeyError:
        raise HTTPException(
            status_code=404, detail=f"Inheritance request {request_id!r} not found"
        )
    return found.model_dump(mode="json")


@router.patch("/api/inheritance/requests/{request_id}")
async def update_request(
    request_id: str, body: UpdateInheritanceRequest, request: Request
) -> dict[str, Any]:
    service = request.app.state.inheritance_service
    try:
        updated = await service.update(request_id, body)
    except KeyError:
        raise HTTPException(
            status_code=404, detail=f"Inheritance request {request_id!r} not found"
        )
    return updated.model_dump(mode="json")


@router.post("/api/inheritance/requests/{request_id}/verify")
async def verify_death(
    request_id: str, body: VerifyDeath, request: Request
) -> dict[str, Any]:
    """Record a death verification for a pending request."""
    service = request.app.state.inheritance_service
    try:
        verified = await service.verify_death(request_id, body)
    except KeyError:
        raise HTTPException(
            status_code=404, detail=f"Inheritance request {request_id!r} not found"
        )
    except InheritanceStateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return verified.model_dump(mode="json")


@router.post("/api/inheritance/requests/{request_id}/execute")
async def execute_request(
    request_id: str, body: ExecuteInheritance, request: Request
) -> dict[str, Any]:
    """Complete a verified request and transfer the parcel to the heir."""
    service = request.app.state.inheritance_service
    try:
        executed = await service.execute(request_id, body)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=f"{e.args[0]!r} not found")
    except InheritanceStateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return executed.model_dump(mode="json")
