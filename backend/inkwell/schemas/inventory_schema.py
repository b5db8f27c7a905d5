# backend/inkwell/schemas/inventory_schema.py
"""
Esquemas Pydantic para el inventario del estudio.
"""

import enum
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from .base_schema import CamelModel, ResponseModel


class InventoryCategory(str, enum.Enum):
    INK = "ink"
    NEEDLES = "needles"
    SUPPLIES = "supplies"
    EQUIPMENT = "equipment"
    AFTERCARE = "aftercare"


class StockStatus(str, enum.Enum):
    """Clasificación derivada del nivel de stock."""
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"


class InventoryItemBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    brand: Optional[str] = None
    category: InventoryCategory
    current_stock: int = Field(0, ge=0)
    min_level: int = Field(0, ge=0)
    unit_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    supplier: Optional[str] = None
    description: Optional[str] = None


class InventoryItemCreate(InventoryItemBase):
    pass


class InventoryItemUpdate(InventoryItemBase):
    """Actualización parcial; todos los campos son opcionales."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[InventoryCategory] = None
    current_stock: Optional[int] = Field(None, ge=0)
    min_level: Optional[int] = Field(None, ge=0)
    unit_price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)


class InventoryItemResponse(ResponseModel):
    id: str
    name: str
    brand: Optional[str] = None
    category: InventoryCategory
    current_stock: int
    min_level: int
    unit_price: Decimal
    supplier: Optional[str] = None
    description: Optional[str] = None
    # Calculado por el servicio de stock, no se guarda
    stock_status: Optional[StockStatus] = None
    created_at: datetime
    updated_at: datetime
