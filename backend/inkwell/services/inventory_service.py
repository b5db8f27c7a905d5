# backend/inkwell/services/inventory_service.py
"""
Servicio de inventario.

Adjunta a cada artículo su clasificación de stock derivada y aplica los
filtros por nivel de stock.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.core.exceptions import NotFoundError
from inkwell.crud import inventory_crud
from inkwell.db.models.inventory_model import InventoryItem
from inkwell.db.types import column_values
from inkwell.schemas import inventory_schema
from inkwell.schemas.inventory_schema import InventoryItemResponse, StockStatus
from inkwell.services import stock_service
from inkwell.services.validation_service import require_fields

logger = logging.getLogger(__name__)

NON_NULLABLE_FIELDS = ("name", "category", "current_stock", "min_level", "unit_price")


def to_response(item: InventoryItem, status: Optional[StockStatus] = None) -> InventoryItemResponse:
    response = InventoryItemResponse.model_validate(item)
    response.stock_status = status or stock_service.classify_stock(item.current_stock, item.min_level)
    return response


class InventoryService:

    async def get_item(self, db: AsyncSession, item_id: str) -> InventoryItem:
        item = await inventory_crud.get_inventory_item(db, item_id)
        if not item:
            raise NotFoundError("InventoryItem", item_id)
        return item

    async def list_items(
        self,
        db: AsyncSession,
        low_stock: bool = False,
        stock_status: Optional[StockStatus] = None,
        category: Optional[inventory_schema.InventoryCategory] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[InventoryItemResponse]:
        """
        Lista de artículos con su estado de stock.

        - ``low_stock``: solo current_stock <= min_level (incluye agotados)
        - ``stock_status``: filtra por la clasificación individual
        """
        items = await inventory_crud.get_inventory(
            db,
            skip=skip,
            limit=limit,
            category=category.value if category else None,
            low_stock=low_stock,
            stock_status=stock_status.value if stock_status else None,
        )

        summary = stock_service.summarize_stock(items)
        return [to_response(item, summary.statuses[item.id]) for item in items]

    async def create_item(
        self, db: AsyncSession, item_in: inventory_schema.InventoryItemCreate
    ) -> InventoryItem:
        item = await inventory_crud.create_inventory_item(db, item_in=item_in)
        logger.info(f"Artículo de inventario creado: {item.id} ('{item.name}')")
        return item

    async def update_item(
        self, db: AsyncSession, item_id: str, item_in: inventory_schema.InventoryItemUpdate
    ) -> InventoryItem:
        db_item = await self.get_item(db, item_id)

        update_data = column_values(item_in.model_dump(exclude_unset=True))
        require_fields(update_data, NON_NULLABLE_FIELDS)

        item = await inventory_crud.update_inventory_item(db, db_item, update_data)
        if stock_service.is_low_stock(item):
            logger.warning(f"Stock bajo en '{item.name}': {item.current_stock}/{item.min_level}")
        return item

    async def delete_item(self, db: AsyncSession, item_id: str) -> None:
        db_item = await self.get_item(db, item_id)
        await inventory_crud.delete_inventory_item(db, db_item)
        logger.info(f"Artículo de inventario eliminado: {item_id}")


inventory_service = InventoryService()
