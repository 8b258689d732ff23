"""Material type names offered when adding inventory.

Seeded from the old fixed list (PLA, ABS, ...) and editable afterwards.
Names compare case-insensitively, so "pla" finds "PLA".
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.catalog_defaults import DEFAULT_FILAMENT_TYPES
from backend.app.core.database import persist
from backend.app.models.filament_type import FilamentTypeRecord

logger = logging.getLogger(__name__)


class FilamentTypeRegistry:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def seed_defaults(self) -> bool:
        count = await self.db.scalar(select(func.count()).select_from(FilamentTypeRecord))
        if count:
            return False

        for name in DEFAULT_FILAMENT_TYPES:
            self.db.add(FilamentTypeRecord(name=name))
        await persist(self.db)
        logger.info("Seeded %d filament types", len(DEFAULT_FILAMENT_TYPES))
        return True

    async def list_types(self) -> list[FilamentTypeRecord]:
        result = await self.db.execute(select(FilamentTypeRecord).order_by(FilamentTypeRecord.name))
        return list(result.scalars().all())

    async def find_type(self, name: str) -> FilamentTypeRecord | None:
        wanted = name.strip().casefold()
        for record in await self.list_types():
            if record.name.casefold() == wanted:
                return record
        return None

    async def add_type(self, name: str) -> FilamentTypeRecord:
        """Add a type name; an existing name (any case) is returned unchanged."""
        existing = await self.find_type(name)
        if existing:
            return existing

        record = FilamentTypeRecord(name=name.strip())
        self.db.add(record)
        await persist(self.db)
        logger.info("Added filament type %r", record.name)
        return record

    async def find_or_create(self, name: str) -> FilamentTypeRecord:
        return await self.add_type(name)

    async def rename_type(self, type_id: int, name: str) -> FilamentTypeRecord | None:
        record = await self.db.get(FilamentTypeRecord, type_id)
        if not record:
            logger.debug("Filament type %d not found, rename skipped", type_id)
            return None

        record.name = name.strip()
        await persist(self.db)
        return record

    async def delete_type(self, type_id: int) -> bool:
        record = await self.db.get(FilamentTypeRecord, type_id)
        if not record:
            logger.debug("Filament type %d not found, nothing to delete", type_id)
            return False

        await self.db.delete(record)
        await persist(self.db)
        logger.info("Deleted filament type %r", record.name)
        return True
