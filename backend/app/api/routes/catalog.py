from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.colors import ColorValue
from backend.app.core.database import get_db
from backend.app.schemas.catalog import (
    BrandCreate,
    BrandResponse,
    ColorSchema,
    FilamentColorCreate,
    FilamentColorResponse,
    FilamentColorSearchResult,
    MaterialTypeCreate,
    MaterialTypeResponse,
)
from backend.app.services.catalog import CatalogRepository

router = APIRouter(prefix="/catalog", tags=["catalog"])


def _color_value(schema: ColorSchema) -> ColorValue:
    return ColorValue(schema.red, schema.green, schema.blue, schema.alpha)


# ── Brands ─────────────────────────────────────────────────────────────────


@router.get("/brands", response_model=list[BrandResponse])
async def list_brands(db: AsyncSession = Depends(get_db)):
    """List library brands by name."""
    return await CatalogRepository(db).fetch_brands()


@router.post("/brands", response_model=BrandResponse)
async def create_brand(data: BrandCreate, db: AsyncSession = Depends(get_db)):
    return await CatalogRepository(db).add_brand(data.name)


@router.delete("/brands/{brand_id}")
async def delete_brand(brand_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a brand with all its material types and colors."""
    if not await CatalogRepository(db).delete_brand(brand_id):
        raise HTTPException(404, "Brand not found")
    return {"status": "deleted"}


# ── Material types ─────────────────────────────────────────────────────────


@router.get("/brands/{brand_id}/material-types", response_model=list[MaterialTypeResponse])
async def list_material_types(brand_id: int, db: AsyncSession = Depends(get_db)):
    repo = CatalogRepository(db)
    if not await repo.get_brand(brand_id):
        raise HTTPException(404, "Brand not found")
    return await repo.fetch_material_types(brand_id)


@router.post("/brands/{brand_id}/material-types", response_model=MaterialTypeResponse)
async def create_material_type(brand_id: int, data: MaterialTypeCreate, db: AsyncSession = Depends(get_db)):
    material_type = await CatalogRepository(db).add_material_type(brand_id, data.name, data.properties)
    if not material_type:
        raise HTTPException(404, "Brand not found")
    return material_type


@router.delete("/material-types/{material_type_id}")
async def delete_material_type(material_type_id: int, db: AsyncSession = Depends(get_db)):
    if not await CatalogRepository(db).delete_material_type(material_type_id):
        raise HTTPException(404, "Material type not found")
    return {"status": "deleted"}


# ── Colors ─────────────────────────────────────────────────────────────────


@router.get("/material-types/{material_type_id}/colors", response_model=list[FilamentColorResponse])
async def list_colors(material_type_id: int, db: AsyncSession = Depends(get_db)):
    repo = CatalogRepository(db)
    if not await repo.get_material_type(material_type_id):
        raise HTTPException(404, "Material type not found")
    return await repo.fetch_colors(material_type_id)


@router.post("/material-types/{material_type_id}/colors", response_model=FilamentColorResponse)
async def create_color(material_type_id: int, data: FilamentColorCreate, db: AsyncSession = Depends(get_db)):
    filament_color = await CatalogRepository(db).add_color(
        material_type_id,
        data.name,
        _color_value(data.color),
        code=data.code,
        is_transparent=data.is_transparent,
        is_metallic=data.is_metallic,
        has_spool=data.has_spool,
        gradient_kind=data.gradient_kind,
        additional_colors=[_color_value(c) for c in data.additional_colors],
    )
    if not filament_color:
        raise HTTPException(404, "Material type not found")
    return filament_color


@router.get("/colors/search", response_model=list[FilamentColorSearchResult])
async def search_colors(
    q: str = Query("", description="Substring of color, material type or brand name"),
    db: AsyncSession = Depends(get_db),
):
    """Search colors across the whole library. Empty query returns nothing."""
    return await CatalogRepository(db).search(q)


@router.get("/colors/{color_id}", response_model=FilamentColorSearchResult)
async def get_color(color_id: int, db: AsyncSession = Depends(get_db)):
    filament_color = await CatalogRepository(db).get_color(color_id)
    if not filament_color:
        raise HTTPException(404, "Color not found")
    return filament_color


@router.delete("/colors/{color_id}")
async def delete_color(color_id: int, db: AsyncSession = Depends(get_db)):
    if not await CatalogRepository(db).delete_color(color_id):
        raise HTTPException(404, "Color not found")
    return {"status": "deleted"}


@router.post("/seed")
async def seed_catalog(db: AsyncSession = Depends(get_db)):
    """Load the starter library if no brands exist yet."""
    seeded = await CatalogRepository(db).seed_if_empty()
    return {"status": "seeded" if seeded else "skipped"}
