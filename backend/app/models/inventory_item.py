from datetime import datetime
from enum import Enum

from sqlalchemy import JSON, DateTime, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.app.core.colors import ColorValue, default_color_for_name
from backend.app.core.database import Base, utcnow


class FilamentDiameter(float, Enum):
    MM_175 = 1.75
    MM_285 = 2.85
    MM_300 = 3.0


class InventoryItem(Base):
    """A filament the user owns, with one or more physical spools.

    Brand, material type and color are copied by value when the item is
    created from the library, so library edits never reach existing items.
    """

    __tablename__ = "inventory_items"

    id: Mapped[int] = mapped_column(primary_key=True)
    brand: Mapped[str] = mapped_column(String(100))  # Free-form, may not match a library brand
    material_type_name: Mapped[str] = mapped_column(String(100))  # "PLA", "PETG-ECO", ...
    color_name: Mapped[str] = mapped_column(String(200))
    color: Mapped[dict | None] = mapped_column(JSON)  # RGBA dict; None -> guessed from color_name
    weight_grams: Mapped[float] = mapped_column(Float, default=1000)  # Nominal net weight per item
    diameter_mm: Mapped[float] = mapped_column(Float, default=FilamentDiameter.MM_175.value)
    notes: Mapped[str] = mapped_column(Text, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    spools: Mapped[list["Spool"]] = relationship(
        back_populates="item",
        cascade="all, delete-orphan",
        order_by="Spool.id",
        lazy="selectin",
    )

    def __repr__(self):
        return f"<InventoryItem {self.id}: {self.brand} {self.material_type_name} {self.color_name}>"

    @property
    def color_value(self) -> ColorValue | None:
        return ColorValue.from_dict(self.color)

    def resolved_color(self) -> ColorValue:
        return self.color_value or default_color_for_name(self.color_name)

    @property
    def display_color(self) -> ColorValue:
        return self.resolved_color()

    @property
    def spool_count(self) -> int:
        return len(self.spools)

    @property
    def average_remaining_percentage(self) -> float:
        if not self.spools:
            return 0.0
        return sum(s.remaining_percentage for s in self.spools) / len(self.spools)

    @property
    def remaining_spool_count(self) -> int:
        return sum(1 for s in self.spools if s.remaining_percentage > 0)

    @property
    def full_spool_count(self) -> int:
        return sum(1 for s in self.spools if s.remaining_percentage >= 100)

    @property
    def partially_used_spool_count(self) -> int:
        return self.remaining_spool_count - self.full_spool_count

    @property
    def empty_spool_count(self) -> int:
        return len(self.spools) - self.remaining_spool_count

    @property
    def estimated_remaining_weight(self) -> float:
        """Grams left, splitting weight_grams evenly across spools."""
        if not self.spools:
            return 0.0
        share = self.weight_grams / len(self.spools)
        return sum(share * (s.remaining_percentage / 100) for s in self.spools)


from backend.app.models.spool import Spool  # noqa: E402
