# backend/inkwell/crud/artist_crud.py
"""
Operaciones CRUD para el modelo Artist.
"""

from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.db.models.appointment_model import Appointment
from inkwell.db.models.artist_model import Artist
from inkwell.db.models.sale_model import Sale
from inkwell.db.types import column_values
from inkwell.schemas import artist_schema


async def get_artist(db: AsyncSession, artist_id: str) -> Optional[Artist]:
    result = await db.execute(select(Artist).filter(Artist.id == artist_id))
    return result.scalars().first()


async def get_artist_by_email(db: AsyncSession, email: str) -> Optional[Artist]:
    result = await db.execute(select(Artist).filter(func.lower(Artist.email) == email.lower()))
    return result.scalars().first()


async def get_artists(
    db: AsyncSession,
    skip: int = 0,
    limit: int = 100,
    is_active: Optional[bool] = None,
) -> List[Artist]:
    """Lista de artistas ordenada por nombre, con filtro opcional de activos."""
    query = select(Artist)
    if is_active is not None:
        query = query.filter(Artist.is_active == is_active)
    query = query.order_by(Artist.name.asc()).offset(skip).limit(limit)
    result = await db.execute(query)
    return result.scalars().all()


async def get_artists_by_ids(db: AsyncSession, artist_ids: Iterable[str]) -> Dict[str, Artist]:
    ids = set(artist_ids)
    if not ids:
        return {}
    result = await db.execute(select(Artist).filter(Artist.id.in_(ids)))
    return {artist.id: artist for artist in result.scalars().all()}


async def count_artist_dependents(db: AsyncSession, artist_id: str) -> Dict[str, int]:
    """Cuenta las citas y ventas que referencian al artista."""
    appointments = await db.scalar(
        select(func.count()).select_from(Appointment).filter(Appointment.artist_id == artist_id)
    )
    sales = await db.scalar(select(func.count()).select_from(Sale).filter(Sale.artist_id == artist_id))
    return {"appointments": appointments or 0, "sales": sales or 0}


async def create_artist(db: AsyncSession, artist_in: artist_schema.ArtistCreate) -> Artist:
    db_artist = Artist(**column_values(artist_in.model_dump()))
    db.add(db_artist)
    await db.commit()
    await db.refresh(db_artist)
    return db_artist


async def update_artist(db: AsyncSession, db_artist: Artist, update_data: Dict[str, Any]) -> Artist:
    for field, value in update_data.items():
        setattr(db_artist, field, value)
    await db.commit()
    await db.refresh(db_artist)
    return db_artist


async def delete_artist(db: AsyncSession, db_artist: Artist) -> Artist:
    await db.delete(db_artist)
    await db.commit()
    return db_artist
