# backend/inkwell/api/v1/endpoints/artists.py
"""
Endpoints REST para operaciones CRUD de artistas.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.api import deps
from inkwell.schemas import artist_schema
from inkwell.services.artist_service import artist_service

router = APIRouter()


@router.get("", response_model=List[artist_schema.ArtistResponse])
async def read_artists(
    db: AsyncSession = Depends(deps.get_db),
    active: Optional[bool] = None,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=500),
) -> List[artist_schema.ArtistResponse]:
    """Lista de artistas ordenada por nombre."""
    return await artist_service.list_artists(db, is_active=active, skip=skip, limit=limit)


@router.get("/{artist_id}", response_model=artist_schema.ArtistResponse)
async def read_artist(
    artist_id: str,
    db: AsyncSession = Depends(deps.get_db),
) -> artist_schema.ArtistResponse:
    return await artist_service.get_artist(db, artist_id)


@router.post("", response_model=artist_schema.ArtistResponse, status_code=status.HTTP_201_CREATED)
async def create_artist(
    *,
    db: AsyncSession = Depends(deps.get_db),
    artist_in: artist_schema.ArtistCreate,
) -> artist_schema.ArtistResponse:
    return await artist_service.create_artist(db, artist_in)


@router.patch("/{artist_id}", response_model=artist_schema.ArtistResponse)
async def update_artist(
    *,
    db: AsyncSession = Depends(deps.get_db),
    artist_id: str,
    artist_in: artist_schema.ArtistUpdate,
) -> artist_schema.ArtistResponse:
    return await artist_service.update_artist(db, artist_id, artist_in)


@router.delete("/{artist_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_artist(
    *,
    db: AsyncSession = Depends(deps.get_db),
    artist_id: str,
) -> Response:
    """Elimina un artista sin citas ni ventas (409 en caso contrario)."""
    await artist_service.delete_artist(db, artist_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
