# backend/inkwell/services/artist_service.py
"""
Servicio de negocio para artistas.

Misma política que los clientes: email único y borrado rechazado mientras
existan citas o ventas del artista. Para retirar a un artista con historial
se marca is_active = false.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.core.exceptions import ConflictError, NotFoundError, ReferentialIntegrityError
from inkwell.crud import artist_crud
from inkwell.db.models.artist_model import Artist
from inkwell.schemas import artist_schema
from inkwell.services.validation_service import require_fields

logger = logging.getLogger(__name__)

NON_NULLABLE_FIELDS = ("name", "specialties", "is_active")


class ArtistService:

    async def get_artist(self, db: AsyncSession, artist_id: str) -> Artist:
        artist = await artist_crud.get_artist(db, artist_id=artist_id)
        if not artist:
            raise NotFoundError("Artist", artist_id)
        return artist

    async def list_artists(
        self,
        db: AsyncSession,
        is_active: Optional[bool] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Artist]:
        return await artist_crud.get_artists(db, skip=skip, limit=limit, is_active=is_active)

    async def create_artist(self, db: AsyncSession, artist_in: artist_schema.ArtistCreate) -> Artist:
        if artist_in.email:
            await self._ensure_email_available(db, artist_in.email)

        artist = await artist_crud.create_artist(db, artist_in=artist_in)
        logger.info(f"Artista creado: {artist.id} ('{artist.name}')")
        return artist

    async def update_artist(
        self,
        db: AsyncSession,
        artist_id: str,
        artist_in: artist_schema.ArtistUpdate,
    ) -> Artist:
        db_artist = await self.get_artist(db, artist_id)

        update_data = artist_in.model_dump(exclude_unset=True)
        require_fields(update_data, NON_NULLABLE_FIELDS)

        if update_data.get("email"):
            await self._ensure_email_available(db, update_data["email"], exclude_id=artist_id)

        artist = await artist_crud.update_artist(db, db_artist, update_data)
        logger.info(f"Artista actualizado: {artist_id}")
        return artist

    async def delete_artist(self, db: AsyncSession, artist_id: str) -> None:
        db_artist = await self.get_artist(db, artist_id)

        dependents = await artist_crud.count_artist_dependents(db, artist_id)
        if any(dependents.values()):
            logger.warning(f"Borrado rechazado del artista {artist_id}: {dependents}")
            raise ReferentialIntegrityError("Artist", artist_id, dependents)

        await artist_crud.delete_artist(db, db_artist)
        logger.info(f"Artista eliminado: {artist_id}")

    async def _ensure_email_available(self, db: AsyncSession, email: str, exclude_id: Optional[str] = None) -> None:
        existing = await artist_crud.get_artist_by_email(db, email)
        if existing and existing.id != exclude_id:
            raise ConflictError(f"An artist with email {email} already exists.")


artist_service = ArtistService()
