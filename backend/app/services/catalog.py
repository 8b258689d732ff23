"""Filament library: brands, their material types, and the colors of each type.

The library is reference data. Users pick a color from it to add inventory,
but inventory items keep their own copy of the names and color.
"""

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backend.app.core.catalog_defaults import DEFAULT_LIBRARY, NO_SPOOL_SUFFIX, SPOOL_SUFFIX
from backend.app.core.colors import ColorValue
from backend.app.core.database import persist
from backend.app.models.brand import Brand
from backend.app.models.filament_color import FilamentColor, GradientKind
from backend.app.models.material_type import MaterialType

logger = logging.getLogger(__name__)


def _lists_both_variants(colors: Sequence[tuple]) -> bool:
    """True if some color name appears both with and without a spool."""
    seen: dict[str, set[bool]] = {}
    for name, _code, _hex, options in colors:
        seen.setdefault(name, set()).add(options.get("has_spool", True))
    return any(len(flags) == 2 for flags in seen.values())


def _preset_color(name: str, code: str | None, hex_color: str, options: dict, has_spool: bool) -> FilamentColor:
    gradient_kind = GradientKind(options.get("gradient_kind", GradientKind.NONE))
    additional = options.get("additional", []) if gradient_kind != GradientKind.NONE else []
    return FilamentColor(
        name=name + (SPOOL_SUFFIX if has_spool else NO_SPOOL_SUFFIX),
        code=code,
        color=ColorValue.from_hex(hex_color).to_dict(),
        is_transparent=options.get("is_transparent", False),
        is_metallic=options.get("is_metallic", False),
        has_spool=has_spool,
        gradient_kind=gradient_kind,
        additional_colors=[ColorValue.from_hex(h).to_dict() for h in additional] or None,
    )


def _search_key(color: FilamentColor) -> tuple[str, str, str]:
    return (color.brand_name.casefold(), color.material_type_name.casefold(), color.name.casefold())


class CatalogRepository:
    """Reads and edits the filament library through one database session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ── Seeding ──────────────────────────────────────────────────────────

    async def seed_if_empty(self) -> bool:
        """Insert the starter library unless any brand already exists."""
        count = await self.db.scalar(select(func.count()).select_from(Brand))
        if count:
            return False

        color_count = 0
        for brand_data in DEFAULT_LIBRARY:
            brand = Brand(name=brand_data["name"])
            for type_data in brand_data["material_types"]:
                material_type = MaterialType(name=type_data["name"], properties=type_data.get("properties"))
                colors = type_data["colors"]
                listed_separately = _lists_both_variants(colors)
                for name, code, hex_color, options in colors:
                    has_spool = options.get("has_spool", True)
                    material_type.colors.append(_preset_color(name, code, hex_color, options, has_spool))
                    color_count += 1
                    if has_spool and not listed_separately:
                        material_type.colors.append(_preset_color(name, code, hex_color, options, False))
                        color_count += 1
                brand.material_types.append(material_type)
            self.db.add(brand)

        await persist(self.db)
        logger.info("Seeded filament library: %d brands, %d colors", len(DEFAULT_LIBRARY), color_count)
        return True

    # ── Lookups ──────────────────────────────────────────────────────────

    async def fetch_brands(self) -> list[Brand]:
        result = await self.db.execute(select(Brand).order_by(Brand.name, Brand.id))
        return list(result.scalars().all())

    async def get_brand(self, brand_id: int) -> Brand | None:
        return await self.db.get(Brand, brand_id)

    async def get_material_type(self, material_type_id: int) -> MaterialType | None:
        return await self.db.get(MaterialType, material_type_id)

    async def get_color(self, color_id: int) -> FilamentColor | None:
        result = await self.db.execute(
            select(FilamentColor)
            .options(selectinload(FilamentColor.material_type).selectinload(MaterialType.brand))
            .where(FilamentColor.id == color_id)
        )
        return result.scalar_one_or_none()

    async def fetch_material_types(self, brand_id: int | None) -> list[MaterialType]:
        if brand_id is None:
            return []
        result = await self.db.execute(
            select(MaterialType).where(MaterialType.brand_id == brand_id).order_by(MaterialType.name, MaterialType.id)
        )
        return list(result.scalars().all())

    async def fetch_colors(self, material_type_id: int | None) -> list[FilamentColor]:
        if material_type_id is None:
            return []
        result = await self.db.execute(
            select(FilamentColor)
            .where(FilamentColor.material_type_id == material_type_id)
            .order_by(FilamentColor.name, FilamentColor.id)
        )
        return list(result.scalars().all())

    async def search(self, query: str) -> list[FilamentColor]:
        """Colors whose own, material type or brand name contains the query.

        Matching is done in Python with casefold() since SQLite's lower() only
        folds ASCII. An empty query returns nothing rather than everything.
        Colors without a material type are never returned.
        """
        needle = (query or "").strip().casefold()
        if not needle:
            return []

        result = await self.db.execute(
            select(FilamentColor)
            .options(selectinload(FilamentColor.material_type).selectinload(MaterialType.brand))
            .where(FilamentColor.material_type_id.is_not(None))
        )
        matches = [
            color
            for color in result.scalars().all()
            if needle in color.name.casefold()
            or needle in color.material_type_name.casefold()
            or needle in color.brand_name.casefold()
        ]
        return sorted(matches, key=_search_key)

    # ── Management ───────────────────────────────────────────────────────

    async def add_brand(self, name: str) -> Brand:
        brand = Brand(name=name.strip())
        self.db.add(brand)
        await persist(self.db)
        logger.info("Added brand %r (id=%d)", brand.name, brand.id)
        return brand

    async def delete_brand(self, brand_id: int) -> bool:
        """Delete a brand with all its material types and their colors."""
        result = await self.db.execute(
            select(Brand)
            .options(selectinload(Brand.material_types).selectinload(MaterialType.colors))
            .where(Brand.id == brand_id)
            .execution_options(populate_existing=True)
        )
        brand = result.scalar_one_or_none()
        if not brand:
            logger.debug("Brand %d not found, nothing to delete", brand_id)
            return False

        await self.db.delete(brand)
        await persist(self.db)
        logger.info("Deleted brand %r (id=%d)", brand.name, brand_id)
        return True

    async def add_material_type(self, brand_id: int, name: str, properties: str | None = None) -> MaterialType | None:
        brand = await self.get_brand(brand_id)
        if not brand:
            logger.debug("Brand %d not found, material type %r not added", brand_id, name)
            return None

        material_type = MaterialType(name=name.strip(), properties=properties, brand=brand)
        self.db.add(material_type)
        await persist(self.db)
        logger.info("Added material type %r to brand %r", material_type.name, brand.name)
        return material_type

    async def delete_material_type(self, material_type_id: int) -> bool:
        result = await self.db.execute(
            select(MaterialType)
            .options(selectinload(MaterialType.colors))
            .where(MaterialType.id == material_type_id)
            .execution_options(populate_existing=True)
        )
        material_type = result.scalar_one_or_none()
        if not material_type:
            logger.debug("Material type %d not found, nothing to delete", material_type_id)
            return False

        await self.db.delete(material_type)
        await persist(self.db)
        logger.info("Deleted material type %r (id=%d)", material_type.name, material_type_id)
        return True

    async def add_color(
        self,
        material_type_id: int,
        name: str,
        color: ColorValue,
        code: str | None = None,
        is_transparent: bool = False,
        is_metallic: bool = False,
        has_spool: bool = True,
        gradient_kind: GradientKind = GradientKind.NONE,
        additional_colors: Iterable[ColorValue] = (),
    ) -> FilamentColor | None:
        material_type = await self.get_material_type(material_type_id)
        if not material_type:
            logger.debug("Material type %d not found, color %r not added", material_type_id, name)
            return None

        gradient_kind = GradientKind(gradient_kind)
        extra = [c.to_dict() for c in additional_colors] if gradient_kind != GradientKind.NONE else []
        filament_color = FilamentColor(
            name=name.strip(),
            code=code,
            color=color.to_dict(),
            is_transparent=is_transparent,
            is_metallic=is_metallic,
            has_spool=has_spool,
            gradient_kind=gradient_kind,
            additional_colors=extra or None,
            material_type=material_type,
        )
        self.db.add(filament_color)
        await persist(self.db)
        logger.info("Added color %r to material type %r", filament_color.name, material_type.name)
        return filament_color

    async def delete_color(self, color_id: int) -> bool:
        filament_color = await self.db.get(FilamentColor, color_id)
        if not filament_color:
            logger.debug("Color %d not found, nothing to delete", color_id)
            return False

        await self.db.delete(filament_color)
        await persist(self.db)
        logger.info("Deleted color %r (id=%d)", filament_color.name, color_id)
        return True
