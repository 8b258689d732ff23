from datetime import datetime
from enum import StrEnum

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.app.core.catalog_defaults import NO_SPOOL_SUFFIX, SPOOL_SUFFIX
from backend.app.core.colors import NEUTRAL_GRAY, ColorValue
from backend.app.core.database import Base, utcnow

# Variant markers stripped from names to get the shared base color name
_VARIANT_SUFFIXES = (SPOOL_SUFFIX, NO_SPOOL_SUFFIX, " (with spool)", " (without spool)")


class GradientKind(StrEnum):
    NONE = "none"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"
    RADIAL = "radial"
    MULTI_COLOR = "multiColor"
    RAINBOW = "rainbow"


class FilamentColor(Base):
    """A color of a material type in the reference library."""

    __tablename__ = "filament_colors"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(200))  # "黑色 (含料盘)"
    code: Mapped[str | None] = mapped_column(String(50))  # Product code, e.g. "16100"
    color: Mapped[dict] = mapped_column(JSON)  # {"red", "green", "blue", "alpha"} in 0-1
    is_transparent: Mapped[bool] = mapped_column(Boolean, default=False)
    is_metallic: Mapped[bool] = mapped_column(Boolean, default=False)
    has_spool: Mapped[bool] = mapped_column(Boolean, default=True)  # Sold on a reel vs refill
    gradient_kind: Mapped[str] = mapped_column(String(20), default=GradientKind.NONE)
    additional_colors: Mapped[list | None] = mapped_column(JSON)  # Extra RGBA dicts for gradients
    material_type_id: Mapped[int | None] = mapped_column(
        ForeignKey("material_types.id", ondelete="CASCADE"), index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    material_type: Mapped["MaterialType | None"] = relationship(back_populates="colors")

    def __repr__(self):
        return f"<FilamentColor {self.id}: {self.name}>"

    @property
    def color_value(self) -> ColorValue:
        return ColorValue.from_dict(self.color) or NEUTRAL_GRAY

    @property
    def additional_color_values(self) -> list[ColorValue]:
        return [ColorValue.from_dict(c) for c in self.additional_colors or []]

    @property
    def base_name(self) -> str:
        """Name without the reel/refill marker, shared by both variants."""
        name = self.name
        for suffix in _VARIANT_SUFFIXES:
            name = name.replace(suffix, "")
        return name

    @property
    def is_gradient(self) -> bool:
        return self.gradient_kind != GradientKind.NONE and bool(self.additional_colors)

    # Parent names; only safe to read when material_type (and its brand) are loaded
    @property
    def material_type_name(self) -> str:
        return self.material_type.name if self.material_type else ""

    @property
    def brand_name(self) -> str:
        if self.material_type and self.material_type.brand:
            return self.material_type.brand.name
        return ""


from backend.app.models.material_type import MaterialType  # noqa: E402
