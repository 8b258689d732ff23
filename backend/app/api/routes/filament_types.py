from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import get_db
from backend.app.schemas.filament_type import FilamentTypeCreate, FilamentTypeResponse
from backend.app.services.filament_types import FilamentTypeRegistry

router = APIRouter(prefix="/filament-types", tags=["filament-types"])


@router.get("/", response_model=list[FilamentTypeResponse])
async def list_filament_types(db: AsyncSession = Depends(get_db)):
    return await FilamentTypeRegistry(db).list_types()


@router.post("/", response_model=FilamentTypeResponse)
async def create_filament_type(data: FilamentTypeCreate, db: AsyncSession = Depends(get_db)):
    """Add a type name. An existing name, in any letter case, is returned as is."""
    return await FilamentTypeRegistry(db).add_type(data.name)


@router.put("/{type_id}", response_model=FilamentTypeResponse)
async def rename_filament_type(type_id: int, data: FilamentTypeCreate, db: AsyncSession = Depends(get_db)):
    record = await FilamentTypeRegistry(db).rename_type(type_id, data.name)
    if not record:
        raise HTTPException(404, "Filament type not found")
    return record


@router.delete("/{type_id}")
async def delete_filament_type(type_id: int, db: AsyncSession = Depends(get_db)):
    if not await FilamentTypeRegistry(db).delete_type(type_id):
        raise HTTPException(404, "Filament type not found")
    return {"status": "deleted"}
