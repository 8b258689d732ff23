import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from backend.app.core.config import settings

logger = logging.getLogger(__name__)

engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    """Naive UTC now. SQLite hands timestamps back naive, so they are stored that way too."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


async def get_db() -> AsyncSession:
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def persist(session: AsyncSession):
    """Commit, logging and rolling back if the write fails."""
    try:
        await session.commit()
    except SQLAlchemyError as e:
        logger.error("Failed to persist changes: %s", e)
        await session.rollback()
        raise


async def init_db():
    # Import models to register them with SQLAlchemy
    from backend.app.models import (  # noqa: F401
        brand,
        filament_color,
        filament_type,
        inventory_item,
        material_type,
        spool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    await seed_catalog()
    await seed_filament_types()
    if settings.seed_sample_inventory:
        await seed_sample_inventory()


async def seed_catalog():
    """Seed the filament library on first launch."""
    from backend.app.services.catalog import CatalogRepository

    async with async_session() as session:
        seeded = await CatalogRepository(session).seed_if_empty()
        if not seeded:
            logger.debug("Filament library already present, skipping seed")


async def seed_filament_types():
    """Seed the material type picker list if it doesn't exist."""
    from backend.app.services.filament_types import FilamentTypeRegistry

    async with async_session() as session:
        await FilamentTypeRegistry(session).seed_defaults()


async def seed_sample_inventory():
    """Give an empty inventory a few demo items."""
    from backend.app.services.inventory import InventoryStore

    async with async_session() as session:
        await InventoryStore(session).seed_sample_data()
