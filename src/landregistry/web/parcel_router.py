"""FastAPI router for read-only parcel and expropriation endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request

from landregistry.repositories import resolve

router = APIRouter()


@router.get("/api/parcels")
async def list_parcels(
    request: Request,
    owner_address: str | None = None,
) -> list[dict[str, Any]]:
    """List parcels, optionally only those owned by one wallet."""
    store = request.app.state.parcel_store
    if owner_address:
        parcels = await resolve(store.list_for_owner(owner_address))
    else:
        parcels = await resolve(store.list_all())
    return [p.model_dump(mode="json") for p in parcels]


@router.get("/api/parcels/{parcel_id}")
async def get_parcel(parcel_id: str, request: Request) -> dict[str, Any]:
    """Get a parcel by its registry code (``LP-YYYY-NNNN``) or record id."""
    store = request.app.state.parcel_store
    parcel = await resolve(store.get_by_parcel_id(parcel_id))
    if parcel is None:
        parcel = await resolve(store.get(parcel_id))
    if parcel is None:
        raise HTTPException(status_code=404, detail=f"Parcel {parcel_id!r} not found")
    return parcel.model_dump(mode="json")


@router.get("/api/expropriations")
async def list_expropriations(
    request: Request,
    land_parcel_id: str | None = None,
) -> list[dict[str, Any]]:
    store = request.app.state.expropriation_store
    if land_parcel_id:
        cases = await resolve(store.list_for_parcel(land_parcel_id))
    else:
        cases = await resolve(store.list_all())
    return [c.model_dump(mode="json") for c in cases]


@router.get("/api/expropriations/{case_id}")
async def get_expropriation(case_id: str, request: Request) -> dict[str, Any]:
    store = request.app.state.expropriation_store
    case = await resolve(store.get(case_id))
    if case is None:
        raise HTTPException(status_code=404, detail=f"Expropriation {case_id!r} not found")
    return case.model_dump(mode="json")
