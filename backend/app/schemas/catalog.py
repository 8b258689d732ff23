from datetime import datetime

from pydantic import BaseModel, Field

from backend.app.models.filament_color import GradientKind


class ColorSchema(BaseModel):
    """RGBA channels. 0-1 floats; 0-255 values are accepted and scaled."""

    red: float = Field(..., ge=0, le=255)
    green: float = Field(..., ge=0, le=255)
    blue: float = Field(..., ge=0, le=255)
    alpha: float = Field(1.0, ge=0, le=255)

    class Config:
        from_attributes = True


class BrandCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

    class Config:
        str_strip_whitespace = True


class BrandResponse(BaseModel):
    id: int
    name: str
    created_at: datetime

    class Config:
        from_attributes = True


class MaterialTypeCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    properties: str | None = None

    class Config:
        str_strip_whitespace = True


class MaterialTypeResponse(BaseModel):
    id: int
    name: str
    properties: str | None = None
    brand_id: int | None = None
    created_at: datetime

    class Config:
        from_attributes = True


class FilamentColorCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    code: str | None = None
    color: ColorSchema
    is_transparent: bool = False
    is_metallic: bool = False
    has_spool: bool = True
    gradient_kind: GradientKind = GradientKind.NONE
    additional_colors: list[ColorSchema] = []

    class Config:
        str_strip_whitespace = True


class FilamentColorResponse(BaseModel):
    id: int
    name: str
    base_name: str
    code: str | None = None
    color_value: ColorSchema
    is_transparent: bool
    is_metallic: bool
    has_spool: bool
    gradient_kind: GradientKind
    additional_color_values: list[ColorSchema] = []
    is_gradient: bool
    material_type_id: int | None = None

    class Config:
        from_attributes = True


class FilamentColorSearchResult(FilamentColorResponse):
    material_type_name: str
    brand_name: str
