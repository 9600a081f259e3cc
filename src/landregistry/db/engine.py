"""Engine and session lifecycle for the registry database."""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from landregistry.core.config import DBConfig
from landregistry.db.base import Base


class DatabaseManager:
    """Owns the async engine and session factory behind the Postgres repositories.

    The seeding runner and the web app build one from ``Settings.db``,
    hand it to every repository, and dispose of it on shutdown::

        db = DatabaseManager.from_config(settings.db)
        await db.create_all()
        parcels = PostgresParcelRepository(db)
        await parcels.count()
        await db.close()

    SQLite URLs skip the connection pool options so tests can run on
    ``sqlite+aiosqlite:///:memory:``.
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 5,
    ) -> None:
        options: dict[str, Any] = {"echo": echo}
        if not database_url.startswith("sqlite"):
            options.update(pool_size=pool_size, pool_pre_ping=True)
        self._engine: AsyncEngine = create_async_engine(database_url, **options)
        self._session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self._engine,
            expire_on_commit=False,
        )

    @classmethod
    def from_config(cls, config: DBConfig) -> DatabaseManager:
        if not config.database_url:
            raise ValueError("DBConfig.database_url is not set")
        return cls(config.database_url, echo=config.echo, pool_size=config.pool_size)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def session(self) -> AsyncSession:
        """Create a new async session."""
        return self._session_factory()

    async def create_all(self) -> None:
        """Create every registered table. Alembic owns production schemas."""
        import landregistry.db.models  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        """Dispose of the engine connection pool."""
        await self._engine.dispose()
