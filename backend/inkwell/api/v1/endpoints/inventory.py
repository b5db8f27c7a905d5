# backend/inkwell/api/v1/endpoints/inventory.py
"""
Endpoints REST para el inventario.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.api import deps
from inkwell.schemas import inventory_schema
from inkwell.services.inventory_service import inventory_service, to_response

router = APIRouter()


@router.get("", response_model=List[inventory_schema.InventoryItemResponse])
async def read_inventory(
    db: AsyncSession = Depends(deps.get_db),
    low_stock: bool = Query(default=False, alias="lowStock"),
    stock_status: Optional[inventory_schema.StockStatus] = Query(default=None, alias="stockStatus"),
    category: Optional[inventory_schema.InventoryCategory] = None,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=500),
) -> List[inventory_schema.InventoryItemResponse]:
    """
    Lista del inventario con el estado de stock de cada artículo.
    ``lowStock=true`` devuelve los artículos con stock <= nivel mínimo.
    """
    return await inventory_service.list_items(
        db, low_stock=low_stock, stock_status=stock_status, category=category, skip=skip, limit=limit
    )


@router.get("/{item_id}", response_model=inventory_schema.InventoryItemResponse)
async def read_inventory_item(
    item_id: str,
    db: AsyncSession = Depends(deps.get_db),
) -> inventory_schema.InventoryItemResponse:
    return to_response(await inventory_service.get_item(db, item_id))


@router.post("", response_model=inventory_schema.InventoryItemResponse, status_code=status.HTTP_201_CREATED)
async def create_inventory_item(
    *,
    db: AsyncSession = Depends(deps.get_db),
    item_in: inventory_schema.InventoryItemCreate,
) -> inventory_schema.InventoryItemResponse:
    return to_response(await inventory_service.create_item(db, item_in))


@router.patch("/{item_id}", response_model=inventory_schema.InventoryItemResponse)
async def update_inventory_item(
    *,
    db: AsyncSession = Depends(deps.get_db),
    item_id: str,
    item_in: inventory_schema.InventoryItemUpdate,
) -> inventory_schema.InventoryItemResponse:
    return to_response(await inventory_service.update_item(db, item_id, item_in))


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_inventory_item(
    *,
    db: AsyncSession = Depends(deps.get_db),
    item_id: str,
) -> Response:
    await inventory_service.delete_item(db, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
