from datetime import datetime

from pydantic import BaseModel, Field

from backend.app.models.inventory_item import FilamentDiameter
from backend.app.schemas.catalog import ColorSchema


class SpoolCreate(BaseModel):
    # Out-of-range values are clamped to 0-100, not rejected
    remaining_percentage: float = 100
    notes: str = ""


class SpoolUpdate(BaseModel):
    remaining_percentage: float | None = None
    notes: str | None = None


class SpoolResponse(BaseModel):
    id: int
    remaining_percentage: float
    notes: str
    created_at: datetime

    class Config:
        from_attributes = True


class InventoryItemBase(BaseModel):
    brand: str = Field(..., min_length=1, max_length=100)
    material_type_name: str = Field(..., min_length=1, max_length=100)
    color_name: str = Field(..., min_length=1, max_length=200)
    color: ColorSchema | None = None
    weight_grams: float = Field(1000, gt=0)
    diameter_mm: FilamentDiameter = FilamentDiameter.MM_175
    notes: str = ""


class InventoryItemCreate(InventoryItemBase):
    spools: list[SpoolCreate] = Field(default_factory=lambda: [SpoolCreate()], min_length=1)

    class Config:
        str_strip_whitespace = True


class InventoryItemFromCatalog(BaseModel):
    color_id: int
    spool_count: int = Field(1, ge=1, le=100)
    weight_grams: float | None = Field(None, gt=0)
    diameter_mm: FilamentDiameter = FilamentDiameter.MM_175
    notes: str = ""


class InventoryItemUpdate(BaseModel):
    brand: str | None = Field(None, min_length=1, max_length=100)
    material_type_name: str | None = Field(None, min_length=1, max_length=100)
    color_name: str | None = Field(None, min_length=1, max_length=200)
    color: ColorSchema | None = None
    weight_grams: float | None = Field(None, gt=0)
    diameter_mm: FilamentDiameter | None = None
    notes: str | None = None

    class Config:
        str_strip_whitespace = True


class InventoryItemResponse(BaseModel):
    id: int
    brand: str
    material_type_name: str
    color_name: str
    color: ColorSchema | None = None
    display_color: ColorSchema
    weight_grams: float
    diameter_mm: FilamentDiameter
    notes: str
    created_at: datetime
    spools: list[SpoolResponse] = []
    spool_count: int
    average_remaining_percentage: float
    remaining_spool_count: int
    full_spool_count: int
    partially_used_spool_count: int
    empty_spool_count: int
    estimated_remaining_weight: float

    class Config:
        from_attributes = True


class GroupCount(BaseModel):
    name: str
    spool_count: int


class InventoryStatistics(BaseModel):
    item_count: int
    total_spool_count: int
    remaining_spool_count: int
    full_spool_count: int
    partially_used_spool_count: int
    empty_spool_count: int
    estimated_remaining_weight: float
    by_brand: list[GroupCount]
    by_type: list[GroupCount]


class SpoolExport(BaseModel):
    remaining_percentage: float
    notes: str = ""
    created_at: datetime | None = None


class InventoryItemExport(InventoryItemBase):
    """Interchange format: one item with its spools, field names as stored."""

    created_at: datetime | None = None
    spools: list[SpoolExport] = []


class ImportResult(BaseModel):
    imported: int
