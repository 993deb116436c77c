"""Engine construction and schema creation for gatehouse tables."""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from gatehouse_auth.persistence.sqlalchemy.base import AuthBase
from gatehouse_config import Settings, get_settings
from gatehouse_identity.infrastructure.persistence.sqlalchemy import IdentityBase

METADATA = (IdentityBase.metadata, AuthBase.metadata)


def create_engine_from_settings(settings: Settings | None = None) -> AsyncEngine:
    """Create an async engine for the configured database."""
    settings = settings or get_settings()
    return create_async_engine(settings.database_url, future=True)


async def create_all(engine: AsyncEngine) -> None:
    """Create the identity and auth tables if they do not exist."""
    # Import models to register them with the metadata
    import gatehouse_auth.persistence.sqlalchemy.models  # noqa: F401
    import gatehouse_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401

    async with engine.begin() as conn:
        for metadata in METADATA:
            await conn.run_sync(metadata.create_all)


async def drop_all(engine: AsyncEngine) -> None:
    """Drop the identity and auth tables."""
    async with engine.begin() as conn:
        for metadata in reversed(METADATA):
            await conn.run_sync(metadata.drop_all)
