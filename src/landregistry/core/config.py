"""Application configuration loaded from environment."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class DBConfig(BaseSettings):
    """Database configuration. No URL means in-memory stores."""

    model_config = {"env_prefix": "LANDREGISTRY_DB_"}

    database_url: str | None = None
    echo: bool = False
    pool_size: int = 5


class SeedConfig(BaseSettings):
    """Synthetic record generator configuration."""

    model_config = {"env_prefix": "LANDREGISTRY_SEED_"}

    parcel_count: int = 50
    expropriation_count: int = 3
    random_seed: int | None = None
    admin_address: str = "0x1234567890123456789012345678901234567890"
    create_schema: bool = False


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "LANDREGISTRY_"}

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:3001"]
    )

    db: DBConfig = Field(default_factory=DBConfig)
    seed: SeedConfig = Field(default_factory=SeedConfig)
