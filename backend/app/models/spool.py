from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.app.core.database import Base, utcnow


class Spool(Base):
    """One physical reel of an inventory item."""

    __tablename__ = "spools"

    id: Mapped[int] = mapped_column(primary_key=True)
    item_id: Mapped[int] = mapped_column(ForeignKey("inventory_items.id", ondelete="CASCADE"), index=True)
    remaining_percentage: Mapped[float] = mapped_column(Float, default=100)  # 0-100
    notes: Mapped[str] = mapped_column(String(500), default="")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    item: Mapped["InventoryItem"] = relationship(back_populates="spools")

    def __repr__(self):
        return f"<Spool {self.id}: {self.remaining_percentage}%>"


from backend.app.models.inventory_item import InventoryItem  # noqa: E402
