# backend/inkwell/db/models/inventory_model.py
"""
Modelo de artículo de inventario (tintas, agujas, insumos...).

El estado de stock (en stock / bajo / agotado) no se guarda: se deriva de
current_stock y min_level en services/stock_service.py.
"""

import uuid

from sqlalchemy import Column, Integer, String, Text, DateTime, Numeric, Enum, CheckConstraint

from inkwell.db.database import Base
from inkwell.db.types import utcnow

INVENTORY_CATEGORIES = ("ink", "needles", "supplies", "equipment", "aftercare")


class InventoryItem(Base):
    __tablename__ = "inventory"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False, index=True)
    brand = Column(String(255))
    category = Column(Enum(*INVENTORY_CATEGORIES, name="inventory_category"), nullable=False)
    current_stock = Column(Integer, nullable=False, default=0)
    min_level = Column(Integer, nullable=False, default=0)
    unit_price = Column(Numeric(10, 2), nullable=False)
    supplier = Column(String(255))
    description = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    __table_args__ = (
        CheckConstraint("current_stock >= 0", name="ck_inventory_stock_non_negative"),
        CheckConstraint("min_level >= 0", name="ck_inventory_min_level_non_negative"),
    )

    def __repr__(self):
        return f"<InventoryItem(id={self.id}, name='{self.name}', stock={self.current_stock}/{self.min_level})>"
