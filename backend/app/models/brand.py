from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.app.core.database import Base, utcnow


class Brand(Base):
    """Filament manufacturer in the reference library."""

    __tablename__ = "brands"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))  # Not unique: users may add duplicates
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    material_types: Mapped[list["MaterialType"]] = relationship(
        back_populates="brand",
        cascade="all, delete-orphan",
        order_by="MaterialType.name",
    )

    def __repr__(self):
        return f"<Brand {self.id}: {self.name}>"


from backend.app.models.material_type import MaterialType  # noqa: E402
