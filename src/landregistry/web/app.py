"""FastAPI application for the land registry backend.

Serves parcel, expropriation, inheritance request and notification
endpoints plus a health check.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from landregistry import __version__
from landregistry.core.config import Settings
from landregistry.db.engine import DatabaseManager
from landregistry.inheritance.service import InheritanceService
from landregistry.inheritance.store import InheritanceRequestStore
from landregistry.notifications.store import NotificationStore
from landregistry.registry.store import ExpropriationStore, ParcelStore, UserStore
from landregistry.web.inheritance_router import router as inheritance_router
from landregistry.web.notification_router import router as notification_router
from landregistry.web.parcel_router import router as parcel_router

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str = __version__
    storage: str


# --- Application factory ---


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Uses the factory pattern so tests can create isolated app instances.
    When ``settings.db.database_url`` is set the Postgres repositories are
    wired in; otherwise everything lives in in-memory stores.
    """
    if settings is None:
        settings = Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        if app.state.db_manager is not None:
            await app.state.db_manager.close()

    app = FastAPI(
        title="Land Registry",
        description="Land parcel, expropriation and inheritance records",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    db_manager = None
    if settings.db.database_url:
        from landregistry.repositories.postgres.expropriations import (
            PostgresExpropriationRepository,
        )
        from landregistry.repositories.postgres.inheritance import (
            PostgresInheritanceRequestRepository,
        )
        from landregistry.repositories.postgres.notifications import (
            PostgresNotificationRepository,
        )
        from landregistry.repositories.postgres.parcels import PostgresParcelRepository
        from landregistry.repositories.postgres.users import PostgresUserRepository

        db_manager = DatabaseManager.from_config(settings.db)
        user_store = PostgresUserRepository(db_manager)
        parcel_store = PostgresParcelRepository(db_manager)
        expropriation_store = PostgresExpropriationRepository(db_manager)
        inheritance_store = PostgresInheritanceRequestRepository(db_manager)
        notification_store = PostgresNotificationRepository(db_manager)
        logger.info("Using Postgres repositories")
    else:
        user_store = UserStore()
        parcel_store = ParcelStore()
        expropriation_store = ExpropriationStore()
        inheritance_store = InheritanceRequestStore()
        notification_store = NotificationStore()

    inheritance_service = InheritanceService(inheritance_store, parcel_store)

    # Store on app state for access in route handlers
    app.state.settings = settings
    app.state.db_manager = db_manager
    app.state.user_store = user_store
    app.state.parcel_store = parcel_store
    app.state.expropriation_store = expropriation_store
    app.state.inheritance_store = inheritance_store
    app.state.notification_store = notification_store
    app.state.inheritance_service = inheritance_service

    app.include_router(parcel_router)
    app.include_router(inheritance_router)
    app.include_router(notification_router)

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            service="landregistry",
            storage="postgres" if db_manager is not None else "memory",
        )

    return app
