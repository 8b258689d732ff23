from backend.app.models.brand import Brand
from backend.app.models.material_type import MaterialType
from backend.app.models.filament_color import FilamentColor, GradientKind
from backend.app.models.inventory_item import FilamentDiameter, InventoryItem
from backend.app.models.spool import Spool
from backend.app.models.filament_type import FilamentTypeRecord

__all__ = [
    "Brand",
    "MaterialType",
    "FilamentColor",
    "GradientKind",
    "InventoryItem",
    "FilamentDiameter",
    "Spool",
    "FilamentTypeRecord",
]
