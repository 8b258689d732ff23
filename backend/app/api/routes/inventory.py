from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import get_db
from backend.app.schemas.inventory import (
    ImportResult,
    InventoryItemCreate,
    InventoryItemExport,
    InventoryItemFromCatalog,
    InventoryItemResponse,
    InventoryItemUpdate,
    InventoryStatistics,
    SpoolCreate,
    SpoolResponse,
    SpoolUpdate,
)
from backend.app.services.inventory import InventoryStore
from backend.app.services.statistics import summarize

router = APIRouter(prefix="/inventory", tags=["inventory"])


# ── Items ──────────────────────────────────────────────────────────────────


@router.get("/items", response_model=list[InventoryItemResponse])
async def list_items(db: AsyncSession = Depends(get_db)):
    """List owned filaments, newest first."""
    return await InventoryStore(db).list_items()


@router.post("/items", response_model=InventoryItemResponse)
async def create_item(data: InventoryItemCreate, db: AsyncSession = Depends(get_db)):
    return await InventoryStore(db).add_item(
        brand=data.brand,
        material_type_name=data.material_type_name,
        color_name=data.color_name,
        color=data.color,
        weight_grams=data.weight_grams,
        diameter_mm=data.diameter_mm,
        notes=data.notes,
        spools=[(s.remaining_percentage, s.notes) for s in data.spools],
    )


@router.post("/items/from-catalog", response_model=InventoryItemResponse)
async def create_item_from_catalog(data: InventoryItemFromCatalog, db: AsyncSession = Depends(get_db)):
    """Add a library color to the inventory with `spool_count` full spools."""
    item = await InventoryStore(db).add_from_catalog(
        data.color_id,
        spool_count=data.spool_count,
        weight_grams=data.weight_grams,
        diameter_mm=data.diameter_mm,
        notes=data.notes,
    )
    if not item:
        raise HTTPException(404, "Color not found")
    return item


@router.get("/items/{item_id}", response_model=InventoryItemResponse)
async def get_item(item_id: int, db: AsyncSession = Depends(get_db)):
    item = await InventoryStore(db).get_item(item_id)
    if not item:
        raise HTTPException(404, "Item not found")
    return item


@router.patch("/items/{item_id}", response_model=InventoryItemResponse)
async def update_item(item_id: int, data: InventoryItemUpdate, db: AsyncSession = Depends(get_db)):
    # Only color may be cleared with null; it falls back to the name-based guess
    fields = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None or k == "color"}
    item = await InventoryStore(db).update_item(item_id, **fields)
    if not item:
        raise HTTPException(404, "Item not found")
    return item


@router.delete("/items/{item_id}")
async def delete_item(item_id: int, db: AsyncSession = Depends(get_db)):
    if not await InventoryStore(db).delete_item(item_id):
        raise HTTPException(404, "Item not found")
    return {"status": "deleted"}


# ── Spools ─────────────────────────────────────────────────────────────────


@router.post("/items/{item_id}/spools", response_model=SpoolResponse)
async def add_spool(item_id: int, data: SpoolCreate, db: AsyncSession = Depends(get_db)):
    spool = await InventoryStore(db).add_spool(item_id, data.remaining_percentage, data.notes)
    if not spool:
        raise HTTPException(404, "Item not found")
    return spool


@router.patch("/items/{item_id}/spools/{spool_id}", response_model=SpoolResponse)
async def update_spool(item_id: int, spool_id: int, data: SpoolUpdate, db: AsyncSession = Depends(get_db)):
    """Update a spool's remaining percentage (clamped to 0-100) and/or notes."""
    store = InventoryStore(db)
    spool = None
    if data.remaining_percentage is not None:
        spool = await store.update_percentage(item_id, spool_id, data.remaining_percentage)
        if not spool:
            raise HTTPException(404, "Spool not found")
    if data.notes is not None:
        spool = await store.update_spool_notes(item_id, spool_id, data.notes)
        if not spool:
            raise HTTPException(404, "Spool not found")
    if spool is None:
        item = await store.get_item(item_id)
        spool = next((s for s in item.spools if s.id == spool_id), None) if item else None
        if not spool:
            raise HTTPException(404, "Spool not found")
    return spool


@router.delete("/items/{item_id}/spools/{spool_id}")
async def remove_spool(item_id: int, spool_id: int, db: AsyncSession = Depends(get_db)):
    if not await InventoryStore(db).remove_spool(item_id, spool_id):
        raise HTTPException(404, "Spool not found")
    return {"status": "deleted"}


# ── Statistics and interchange ─────────────────────────────────────────────


@router.get("/statistics", response_model=InventoryStatistics)
async def get_statistics(db: AsyncSession = Depends(get_db)):
    return summarize(await InventoryStore(db).list_items())


@router.get("/export", response_model=list[InventoryItemExport])
async def export_inventory(db: AsyncSession = Depends(get_db)):
    return await InventoryStore(db).export_items()


@router.post("/import", response_model=ImportResult)
async def import_inventory(payload: list[InventoryItemExport], db: AsyncSession = Depends(get_db)):
    """Append exported items to the inventory. Existing items are kept."""
    imported = await InventoryStore(db).import_items(entry.model_dump() for entry in payload)
    return ImportResult(imported=imported)
