# backend/inkwell/crud/appointment_crud.py
"""
Este archivo contiene las operaciones CRUD para el modelo Appointment.

Las consultas devuelven filas planas; el enriquecimiento con cliente y
artista lo hace services/relationship_service.py.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.db.models.appointment_model import Appointment
from inkwell.db.models.sale_model import Sale


async def get_appointment(db: AsyncSession, appointment_id: str) -> Optional[Appointment]:
    result = await db.execute(select(Appointment).filter(Appointment.id == appointment_id))
    return result.scalars().first()


async def get_appointments(
    db: AsyncSession,
    skip: int = 0,
    limit: int = 100,
    artist_id: Optional[str] = None,
) -> List[Appointment]:
    """Citas de la más reciente a la más antigua, opcionalmente de un artista."""
    query = select(Appointment)
    if artist_id is not None:
        query = query.filter(Appointment.artist_id == artist_id)
    query = query.order_by(Appointment.scheduled_date.desc()).offset(skip).limit(limit)
    result = await db.execute(query)
    return result.scalars().all()


async def get_appointments_between(
    db: AsyncSession, start: datetime, end: datetime, skip: int = 0, limit: int = 100
) -> List[Appointment]:
    """Citas con scheduled_date en [start, end), en orden cronológico."""
    query = (
        select(Appointment)
        .filter(Appointment.scheduled_date >= start, Appointment.scheduled_date < end)
        .order_by(Appointment.scheduled_date.asc())
        .offset(skip)
        .limit(limit)
    )
    result = await db.execute(query)
    return result.scalars().all()


async def get_appointments_by_ids(db: AsyncSession, appointment_ids: Iterable[str]) -> Dict[str, Appointment]:
    ids = set(appointment_ids)
    if not ids:
        return {}
    result = await db.execute(select(Appointment).filter(Appointment.id.in_(ids)))
    return {appointment.id: appointment for appointment in result.scalars().all()}


async def count_appointment_dependents(db: AsyncSession, appointment_id: str) -> Dict[str, int]:
    sales = await db.scalar(
        select(func.count()).select_from(Sale).filter(Sale.appointment_id == appointment_id)
    )
    return {"sales": sales or 0}


async def create_appointment(db: AsyncSession, appointment_data: Dict[str, Any]) -> Appointment:
    db_appointment = Appointment(**appointment_data)
    db.add(db_appointment)
    await db.commit()
    await db.refresh(db_appointment)
    return db_appointment


async def update_appointment(db: AsyncSession, db_appointment: Appointment, update_data: Dict[str, Any]) -> Appointment:
    for field, value in update_data.items():
        setattr(db_appointment, field, value)
    await db.commit()
    await db.refresh(db_appointment)
    return db_appointment


async def delete_appointment(db: AsyncSession, db_appointment: Appointment) -> Appointment:
    await db.delete(db_appointment)
    await db.commit()
    return db_appointment
