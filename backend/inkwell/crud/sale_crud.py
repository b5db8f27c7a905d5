# backend/inkwell/crud/sale_crud.py
"""
Operaciones CRUD para el modelo Sale.

Estas funciones no calculan saldo ni estado de cobro: reciben los valores
ya derivados por services/finance_service.py. El commit de las
modificaciones se hace en la misma transacción en la que se bloqueó la
fila (ver get_sale_for_update).
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.db.models.sale_model import Sale


async def get_sale(db: AsyncSession, sale_id: str) -> Optional[Sale]:
    result = await db.execute(select(Sale).filter(Sale.id == sale_id))
    return result.scalars().first()


async def get_sale_for_update(db: AsyncSession, sale_id: str) -> Optional[Sale]:
    """
    Obtiene la venta bloqueando la fila hasta el commit, para que el cálculo
    del saldo y su escritura no se pisen con otra petición concurrente.
    """
    result = await db.execute(select(Sale).filter(Sale.id == sale_id).with_for_update())
    return result.scalars().first()


async def get_sales(db: AsyncSession, skip: int = 0, limit: int = 100) -> List[Sale]:
    """Ventas de la más reciente a la más antigua."""
    query = select(Sale).order_by(Sale.sale_date.desc()).offset(skip).limit(limit)
    result = await db.execute(query)
    return result.scalars().all()


async def get_sales_between(
    db: AsyncSession, start: datetime, end: datetime, skip: int = 0, limit: int = 100
) -> List[Sale]:
    """Ventas con sale_date en [start, end), de la más reciente a la más antigua."""
    query = (
        select(Sale)
        .filter(Sale.sale_date >= start, Sale.sale_date < end)
        .order_by(Sale.sale_date.desc())
        .offset(skip)
        .limit(limit)
    )
    result = await db.execute(query)
    return result.scalars().all()


async def create_sale(db: AsyncSession, sale_data: Dict[str, Any]) -> Sale:
    db_sale = Sale(**sale_data)
    db.add(db_sale)
    await db.commit()
    await db.refresh(db_sale)
    return db_sale


async def update_sale(db: AsyncSession, db_sale: Sale, update_data: Dict[str, Any]) -> Sale:
    for field, value in update_data.items():
        setattr(db_sale, field, value)
    await db.commit()
    await db.refresh(db_sale)
    return db_sale


async def delete_sale(db: AsyncSession, db_sale: Sale) -> Sale:
    await db.delete(db_sale)
    await db.commit()
    return db_sale
