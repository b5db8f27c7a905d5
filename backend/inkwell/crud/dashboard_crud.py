# backend/inkwell/crud/dashboard_crud.py
"""
Consultas agregadas del panel principal.

Cada función es una única sentencia; los límites de fecha llegan ya
convertidos a UTC y el intervalo es semiabierto [start, end).
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.db.models.appointment_model import Appointment
from inkwell.db.models.artist_model import Artist
from inkwell.db.models.inventory_model import InventoryItem
from inkwell.db.models.sale_model import Sale


async def count_appointments_between(db: AsyncSession, start: datetime, end: datetime) -> int:
    query = select(func.count()).select_from(Appointment).filter(
        Appointment.scheduled_date >= start,
        Appointment.scheduled_date < end,
    )
    return await db.scalar(query) or 0


async def sum_sales_between(db: AsyncSession, start: datetime, end: datetime) -> Decimal:
    query = select(func.coalesce(func.sum(Sale.total_amount), 0)).filter(
        Sale.sale_date >= start,
        Sale.sale_date < end,
    )
    total = await db.scalar(query)
    return Decimal(str(total or 0))


async def count_active_artists(db: AsyncSession) -> int:
    query = select(func.count()).select_from(Artist).filter(Artist.is_active == True)  # noqa: E712
    return await db.scalar(query) or 0


async def count_low_stock_items(db: AsyncSession) -> int:
    query = select(func.count()).select_from(InventoryItem).filter(
        InventoryItem.current_stock <= InventoryItem.min_level
    )
    return await db.scalar(query) or 0
