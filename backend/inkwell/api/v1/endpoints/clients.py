# backend/inkwell/api/v1/endpoints/clients.py
"""
Endpoints REST para operaciones CRUD de clientes.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.api import deps
from inkwell.schemas import client_schema
from inkwell.services.client_service import client_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[client_schema.ClientResponse])
async def read_clients(
    db: AsyncSession = Depends(deps.get_db),
    search: Optional[str] = None,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=500),
) -> List[client_schema.ClientResponse]:
    """Lista de clientes; ``search`` filtra por nombre, apellido o email."""
    return await client_service.list_clients(db, search=search, skip=skip, limit=limit)


@router.get("/{client_id}", response_model=client_schema.ClientResponse)
async def read_client(
    client_id: str,
    db: AsyncSession = Depends(deps.get_db),
) -> client_schema.ClientResponse:
    """Obtiene un cliente por su ID."""
    return await client_service.get_client(db, client_id)


@router.post("", response_model=client_schema.ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    *,
    db: AsyncSession = Depends(deps.get_db),
    client_in: client_schema.ClientCreate,
) -> client_schema.ClientResponse:
    """Registra un nuevo cliente."""
    return await client_service.create_client(db, client_in)


@router.patch("/{client_id}", response_model=client_schema.ClientResponse)
async def update_client(
    *,
    db: AsyncSession = Depends(deps.get_db),
    client_id: str,
    client_in: client_schema.ClientUpdate,
) -> client_schema.ClientResponse:
    """Actualiza parcialmente un cliente."""
    return await client_service.update_client(db, client_id, client_in)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    *,
    db: AsyncSession = Depends(deps.get_db),
    client_id: str,
) -> Response:
    """Elimina un cliente sin citas ni ventas (409 en caso contrario)."""
    await client_service.delete_client(db, client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
