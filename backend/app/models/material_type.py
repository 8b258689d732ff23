from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.app.core.database import Base, utcnow


class MaterialType(Base):
    """Product line of a brand, e.g. "PLA Lite" or "PETG-ECO"."""

    __tablename__ = "material_types"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    properties: Mapped[str | None] = mapped_column(Text)  # Free text: print temps, notes
    brand_id: Mapped[int | None] = mapped_column(ForeignKey("brands.id", ondelete="CASCADE"), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    brand: Mapped["Brand | None"] = relationship(back_populates="material_types")
    colors: Mapped[list["FilamentColor"]] = relationship(
        back_populates="material_type",
        cascade="all, delete-orphan",
        order_by="FilamentColor.name",
    )

    def __repr__(self):
        return f"<MaterialType {self.id}: {self.name}>"


from backend.app.models.brand import Brand  # noqa: E402
from backend.app.models.filament_color import FilamentColor  # noqa: E402
