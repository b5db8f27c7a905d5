# backend/inkwell/crud/inventory_crud.py
"""
Operaciones CRUD para el modelo InventoryItem.

La clasificación de stock no se guarda; la calcula services/stock_service.py.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.db.models.inventory_model import InventoryItem
from inkwell.db.types import column_values
from inkwell.schemas import inventory_schema


async def get_inventory_item(db: AsyncSession, item_id: str) -> Optional[InventoryItem]:
    result = await db.execute(select(InventoryItem).filter(InventoryItem.id == item_id))
    return result.scalars().first()


# Condiciones SQL equivalentes a stock_service.classify_stock
STOCK_STATUS_FILTERS = {
    "out_of_stock": lambda: InventoryItem.current_stock == 0,
    "low_stock": lambda: and_(InventoryItem.current_stock > 0, InventoryItem.current_stock <= InventoryItem.min_level),
    "in_stock": lambda: InventoryItem.current_stock > InventoryItem.min_level,
}


async def get_inventory(
    db: AsyncSession,
    skip: int = 0,
    limit: int = 100,
    category: Optional[str] = None,
    low_stock: bool = False,
    stock_status: Optional[str] = None,
) -> List[InventoryItem]:
    """
    Artículos ordenados por nombre.

    Todos los filtros se aplican en la consulta, antes de la paginación:
    - ``low_stock``: current_stock <= min_level (incluye agotados)
    - ``stock_status``: una clasificación concreta (in_stock, low_stock, out_of_stock)
    """
    query = select(InventoryItem)
    if category is not None:
        query = query.filter(InventoryItem.category == category)
    if low_stock:
        query = query.filter(InventoryItem.current_stock <= InventoryItem.min_level)
    if stock_status is not None:
        query = query.filter(STOCK_STATUS_FILTERS[stock_status]())
    query = query.order_by(InventoryItem.name.asc()).offset(skip).limit(limit)
    result = await db.execute(query)
    return result.scalars().all()


async def create_inventory_item(db: AsyncSession, item_in: inventory_schema.InventoryItemCreate) -> InventoryItem:
    db_item = InventoryItem(**column_values(item_in.model_dump()))
    db.add(db_item)
    await db.commit()
    await db.refresh(db_item)
    return db_item


async def update_inventory_item(db: AsyncSession, db_item: InventoryItem, update_data: Dict[str, Any]) -> InventoryItem:
    for field, value in update_data.items():
        setattr(db_item, field, value)
    await db.commit()
    await db.refresh(db_item)
    return db_item


async def delete_inventory_item(db: AsyncSession, db_item: InventoryItem) -> InventoryItem:
    await db.delete(db_item)
    await db.commit()
    return db_item
