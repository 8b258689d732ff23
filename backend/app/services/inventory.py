"""User inventory: owned filaments and their spools.

Mutations on an unknown item or spool id are skipped and reported through
the return value (None/False), never raised. Every mutation commits.
"""

import logging
from collections.abc import Iterable
from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.catalog_defaults import SAMPLE_INVENTORY
from backend.app.core.colors import ColorValue
from backend.app.core.database import persist
from backend.app.core.config import settings
from backend.app.models.inventory_item import FilamentDiameter, InventoryItem
from backend.app.models.spool import Spool
from backend.app.services.catalog import CatalogRepository

logger = logging.getLogger(__name__)

# Fields a PATCH may change; created_at and spools are not among them
EDITABLE_FIELDS = ("brand", "material_type_name", "color_name", "color", "weight_grams", "diameter_mm", "notes")


def clamp_percentage(value: float) -> float:
    return max(0.0, min(100.0, float(value)))


def _parse_datetime(value) -> datetime | None:
    """Parse an exported timestamp to naive UTC, the form SQLite hands back."""
    if not value:
        return None
    if not isinstance(value, datetime):
        value = datetime.fromisoformat(value)
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _sort_timestamp(value: datetime | None) -> datetime:
    if value is None:
        return datetime.min
    return _parse_datetime(value)


def _color_dict(color) -> dict | None:
    if color is None:
        return None
    if isinstance(color, ColorValue):
        return color.to_dict()
    if isinstance(color, dict):
        return ColorValue.from_dict(color).to_dict()
    # pydantic ColorSchema
    return ColorValue(color.red, color.green, color.blue, color.alpha).to_dict()


class InventoryStore:
    """Reads and edits the inventory through one database session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ── Items ────────────────────────────────────────────────────────────

    async def list_items(self) -> list[InventoryItem]:
        result = await self.db.execute(
            select(InventoryItem).order_by(InventoryItem.created_at.desc(), InventoryItem.id.desc())
        )
        return list(result.scalars().all())

    async def get_item(self, item_id: int) -> InventoryItem | None:
        return await self.db.get(InventoryItem, item_id)

    async def add_item(
        self,
        brand: str,
        material_type_name: str,
        color_name: str,
        color: ColorValue | dict | None = None,
        weight_grams: float | None = None,
        diameter_mm: float = FilamentDiameter.MM_175,
        notes: str = "",
        spools: Iterable[tuple[float, str]] | None = None,
    ) -> InventoryItem:
        """Create an item. ``spools`` is (percentage, notes) pairs; default one full spool.

        Raises ValueError for an empty ``spools``: a new item holds at least one spool.
        """
        spool_rows = list(spools) if spools is not None else [(100.0, "")]
        if not spool_rows:
            raise ValueError("An inventory item needs at least one spool")
        item = InventoryItem(
            brand=brand,
            material_type_name=material_type_name,
            color_name=color_name,
            color=_color_dict(color),
            weight_grams=weight_grams if weight_grams is not None else settings.default_spool_weight,
            diameter_mm=float(FilamentDiameter(diameter_mm)),
            notes=notes,
        )
        item.spools = [
            Spool(remaining_percentage=clamp_percentage(pct), notes=spool_notes) for pct, spool_notes in spool_rows
        ]
        self.db.add(item)
        await persist(self.db)
        logger.info(
            "Added inventory item %d: %s %s %s (%d spools)",
            item.id,
            item.brand,
            item.material_type_name,
            item.color_name,
            len(item.spools),
        )
        return item

    async def add_from_catalog(
        self,
        color_id: int,
        spool_count: int = 1,
        weight_grams: float | None = None,
        diameter_mm: float = FilamentDiameter.MM_175,
        notes: str = "",
    ) -> InventoryItem | None:
        """Copy a library color into the inventory by value."""
        catalog_color = await CatalogRepository(self.db).get_color(color_id)
        if not catalog_color:
            logger.debug("Library color %d not found, nothing added", color_id)
            return None

        return await self.add_item(
            brand=catalog_color.brand_name,
            material_type_name=catalog_color.material_type_name,
            color_name=catalog_color.base_name,
            color=catalog_color.color_value,
            weight_grams=weight_grams,
            diameter_mm=diameter_mm,
            notes=notes,
            spools=[(100.0, "")] * max(1, spool_count),
        )

    async def update_item(self, item_id: int, **fields) -> InventoryItem | None:
        item = await self.get_item(item_id)
        if not item:
            logger.debug("Inventory item %d not found, update skipped", item_id)
            return None

        for field, value in fields.items():
            if field not in EDITABLE_FIELDS:
                raise ValueError(f"Field {field!r} cannot be edited")
            if field == "color":
                value = _color_dict(value)
            elif field == "diameter_mm":
                value = float(FilamentDiameter(value))
            setattr(item, field, value)

        await persist(self.db)
        logger.info("Updated inventory item %d: %s", item_id, ", ".join(fields))
        return item

    async def delete_item(self, item_id: int) -> bool:
        """Delete an item together with all its spools."""
        item = await self.get_item(item_id)
        if not item:
            logger.debug("Inventory item %d not found, nothing to delete", item_id)
            return False

        await self.db.delete(item)
        await persist(self.db)
        logger.info("Deleted inventory item %d", item_id)
        return True

    # ── Spools ───────────────────────────────────────────────────────────

    async def _find_spool(self, item_id: int, spool_id: int) -> tuple[InventoryItem | None, Spool | None]:
        item = await self.get_item(item_id)
        if not item:
            return None, None
        spool = next((s for s in item.spools if s.id == spool_id), None)
        return item, spool

    async def update_percentage(self, item_id: int, spool_id: int, percentage: float) -> Spool | None:
        """Set a spool's remaining percentage, clamped to 0-100."""
        _, spool = await self._find_spool(item_id, spool_id)
        if not spool:
            logger.debug("Spool %d of item %d not found, percentage update skipped", spool_id, item_id)
            return None

        spool.remaining_percentage = clamp_percentage(percentage)
        await persist(self.db)
        logger.info("Spool %d of item %d now at %.1f%%", spool_id, item_id, spool.remaining_percentage)
        return spool

    async def update_spool_notes(self, item_id: int, spool_id: int, notes: str) -> Spool | None:
        _, spool = await self._find_spool(item_id, spool_id)
        if not spool:
            logger.debug("Spool %d of item %d not found, notes update skipped", spool_id, item_id)
            return None

        spool.notes = notes
        await persist(self.db)
        return spool

    async def add_spool(self, item_id: int, percentage: float = 100, notes: str = "") -> Spool | None:
        item = await self.get_item(item_id)
        if not item:
            logger.debug("Inventory item %d not found, spool not added", item_id)
            return None

        spool = Spool(remaining_percentage=clamp_percentage(percentage), notes=notes)
        item.spools.append(spool)
        await persist(self.db)
        logger.info("Added spool %d to item %d", spool.id, item_id)
        return spool

    async def remove_spool(self, item_id: int, spool_id: int) -> bool:
        """Remove a spool. Removing the last one leaves the item with no spools."""
        item, spool = await self._find_spool(item_id, spool_id)
        if not spool:
            logger.debug("Spool %d of item %d not found, nothing to remove", spool_id, item_id)
            return False

        item.spools.remove(spool)
        await persist(self.db)
        logger.info("Removed spool %d from item %d (%d left)", spool_id, item_id, len(item.spools))
        return True

    # ── Seeding and interchange ──────────────────────────────────────────

    async def seed_sample_data(self) -> bool:
        """Add demo items when the inventory is empty."""
        count = await self.db.scalar(select(func.count()).select_from(InventoryItem))
        if count:
            return False

        for brand, material_type_name, color_name, weight in SAMPLE_INVENTORY:
            await self.add_item(brand, material_type_name, color_name, weight_grams=weight)
        logger.info("Seeded %d sample inventory items", len(SAMPLE_INVENTORY))
        return True

    async def export_items(self) -> list[dict]:
        """JSON-ready dicts, one per item, oldest first."""
        items = sorted(await self.list_items(), key=lambda i: (_sort_timestamp(i.created_at), i.id))
        return [
            {
                "brand": item.brand,
                "material_type_name": item.material_type_name,
                "color_name": item.color_name,
                "color": item.color,
                "weight_grams": item.weight_grams,
                "diameter_mm": item.diameter_mm,
                "notes": item.notes,
                "created_at": item.created_at.isoformat() if item.created_at else None,
                "spools": [
                    {
                        "remaining_percentage": spool.remaining_percentage,
                        "notes": spool.notes,
                        "created_at": spool.created_at.isoformat() if spool.created_at else None,
                    }
                    for spool in item.spools
                ],
            }
            for item in items
        ]

    async def import_items(self, payload: Iterable[dict]) -> int:
        """Append items from export_items() output. Returns the number imported."""
        imported = 0
        for entry in payload:
            item = InventoryItem(
                brand=entry["brand"],
                material_type_name=entry["material_type_name"],
                color_name=entry["color_name"],
                color=_color_dict(entry.get("color")),
                weight_grams=entry.get("weight_grams", settings.default_spool_weight),
                diameter_mm=float(FilamentDiameter(entry.get("diameter_mm", FilamentDiameter.MM_175))),
                notes=entry.get("notes", ""),
            )
            created_at = _parse_datetime(entry.get("created_at"))
            if created_at:
                item.created_at = created_at
            item.spools = [
                Spool(
                    remaining_percentage=clamp_percentage(s["remaining_percentage"]),
                    notes=s.get("notes", ""),
                    **({"created_at": _parse_datetime(s["created_at"])} if s.get("created_at") else {}),
                )
                for s in entry.get("spools", [])
            ]
            self.db.add(item)
            imported += 1

        await persist(self.db)
        logger.info("Imported %d inventory items", imported)
        return imported
