# backend/inkwell/services/client_service.py
"""
Servicio para operaciones de negocio relacionadas con clientes.

Orquesta la capa CRUD aplicando las reglas del dominio:
- Email único (sin distinguir mayúsculas)
- Campos obligatorios que no pueden anularse en una actualización parcial
- Política de borrado: se rechaza si el cliente tiene citas o ventas
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.core.exceptions import ConflictError, NotFoundError, ReferentialIntegrityError
from inkwell.crud import client_crud
from inkwell.db.models.client_model import Client
from inkwell.schemas import client_schema
from inkwell.services.validation_service import require_fields

logger = logging.getLogger(__name__)

NON_NULLABLE_FIELDS = ("first_name", "last_name")


class ClientService:
    """
    Servicio para operaciones de negocio relacionadas con clientes.
    """

    # ========================================
    # OPERACIONES DE CONSULTA
    # ========================================

    async def get_client(self, db: AsyncSession, client_id: str) -> Client:
        client = await client_crud.get_client(db, client_id=client_id)
        if not client:
            raise NotFoundError("Client", client_id)
        return client

    async def list_clients(
        self,
        db: AsyncSession,
        search: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Client]:
        """Lista de clientes; con ``search`` filtra por nombre, apellido o email."""
        if search and search.strip():
            return await client_crud.search_clients(db, search.strip(), skip=skip, limit=limit)
        return await client_crud.get_clients(db, skip=skip, limit=limit)

    # ========================================
    # OPERACIONES DE ESCRITURA CON LÓGICA DE NEGOCIO
    # ========================================

    async def create_client(self, db: AsyncSession, client_in: client_schema.ClientCreate) -> Client:
        if client_in.email:
            await self._ensure_email_available(db, client_in.email)

        client = await client_crud.create_client(db, client_in=client_in)
        logger.info(f"Cliente creado: {client.id}")
        return client

    async def update_client(
        self,
        db: AsyncSession,
        client_id: str,
        client_in: client_schema.ClientUpdate,
    ) -> Client:
        db_client = await self.get_client(db, client_id)

        update_data = client_in.model_dump(exclude_unset=True)
        require_fields(update_data, NON_NULLABLE_FIELDS)

        if update_data.get("email"):
            await self._ensure_email_available(db, update_data["email"], exclude_id=client_id)

        client = await client_crud.update_client(db, db_client, update_data)
        logger.info(f"Cliente actualizado: {client_id} ({', '.join(update_data) or 'sin cambios'})")
        return client

    async def delete_client(self, db: AsyncSession, client_id: str) -> None:
        """
        Elimina un cliente sin referencias.

        Raises:
            ReferentialIntegrityError: si alguna cita o venta lo referencia.
        """
        db_client = await self.get_client(db, client_id)

        dependents = await client_crud.count_client_dependents(db, client_id)
        if any(dependents.values()):
            logger.warning(f"Borrado rechazado del cliente {client_id}: {dependents}")
            raise ReferentialIntegrityError("Client", client_id, dependents)

        await client_crud.delete_client(db, db_client)
        logger.info(f"Cliente eliminado: {client_id}")

    async def _ensure_email_available(self, db: AsyncSession, email: str, exclude_id: Optional[str] = None) -> None:
        existing = await client_crud.get_client_by_email(db, email)
        if existing and existing.id != exclude_id:
            raise ConflictError(f"A client with email {email} already exists.")

# ========================================
# INSTANCIA SINGLETON DEL SERVICIO
# ========================================

client_service = ClientService()
