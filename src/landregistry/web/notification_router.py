"""FastAPI router for reading account notifications."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request

from landregistry.repositories import resolve

router = APIRouter()


@router.get("/api/notifications")
async def list_notifications(request: Request, user_id: str) -> list[dict[str, Any]]:
    """List one account's notifications, newest first."""
    store = request.app.state.notification_store
    notifications = await resolve(store.list_for_user(user_id))
    return [n.model_dump(mode="json") for n in notifications]


@router.get("/api/notifications/{notification_id}")
async def get_notification(notification_id: str, request: Request) -> dict[str, Any]:
    store = request.app.state.notification_store
    notification = await resolve(store.get(notification_id))
    if notification is None:
        raise HTTPException(status_code=404, detail="Notification not found")
    return notification.model_dump(mode="json")
