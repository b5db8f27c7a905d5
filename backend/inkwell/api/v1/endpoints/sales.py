# backend/inkwell/api/v1/endpoints/sales.py
"""
Endpoints REST para las ventas.

remainingBalance y paymentStatus los calcula siempre el servidor; si llegan
en el cuerpo se ignoran.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.api import deps
from inkwell.schemas import sale_schema
from inkwell.services.sale_service import sale_service

router = APIRouter()


@router.get("", response_model=List[sale_schema.SaleWithRelations])
async def read_sales(
    db: AsyncSession = Depends(deps.get_db),
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=500),
) -> List[sale_schema.SaleWithRelations]:
    """Lista de ventas; con ``startDate`` y ``endDate`` filtra por días (ambos incluidos; deben llegar juntas)."""
    return await sale_service.list_sales(db, start_date=start_date, end_date=end_date, skip=skip, limit=limit)


@router.get("/{sale_id}", response_model=sale_schema.SaleWithRelations)
async def read_sale(
    sale_id: str,
    db: AsyncSession = Depends(deps.get_db),
) -> sale_schema.SaleWithRelations:
    return await sale_service.get_sale(db, sale_id)


@router.post("", response_model=sale_schema.SaleResponse, status_code=status.HTTP_201_CREATED)
async def create_sale(
    *,
    db: AsyncSession = Depends(deps.get_db),
    sale_in: sale_schema.SaleCreate,
) -> sale_schema.SaleResponse:
    return await sale_service.create_sale(db, sale_in)


@router.patch("/{sale_id}", response_model=sale_schema.SaleResponse)
async def update_sale(
    *,
    db: AsyncSession = Depends(deps.get_db),
    sale_id: str,
    sale_in: sale_schema.SaleUpdate,
) -> sale_schema.SaleResponse:
    return await sale_service.update_sale(db, sale_id, sale_in)


@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sale(
    *,
    db: AsyncSession = Depends(deps.get_db),
    sale_id: str,
) -> Response:
    await sale_service.delete_sale(db, sale_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
