# backend/inkwell/crud/client_crud.py
"""
Este archivo contiene las operaciones CRUD para el modelo Client.

Incluye la búsqueda por subcadena (sin distinguir mayúsculas) sobre nombre,
apellido y email, y el conteo de dependientes usado por la política de
borrado.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.db.models.appointment_model import Appointment
from inkwell.db.models.client_model import Client
from inkwell.db.types import column_values
from inkwell.db.models.sale_model import Sale
from inkwell.schemas import client_schema

logger = logging.getLogger(__name__)

# ========================================
# OPERACIONES DE LECTURA (READ)
# ========================================

async def get_client(db: AsyncSession, client_id: str) -> Optional[Client]:
    """Obtiene un cliente por su ID."""
    result = await db.execute(select(Client).filter(Client.id == client_id))
    return result.scalars().first()


async def get_client_by_email(db: AsyncSession, email: str) -> Optional[Client]:
    """
    Busca un cliente por su dirección de correo electrónico de forma asíncrona.
    """
    result = await db.execute(select(Client).filter(func.lower(Client.email) == email.lower()))
    return result.scalars().first()


async def get_clients(db: AsyncSession, skip: int = 0, limit: int = 100) -> List[Client]:
    """Lista de clientes ordenada por apellido y nombre."""
    query = (
        select(Client)
        .order_by(Client.last_name.asc(), Client.first_name.asc())
        .offset(skip)
        .limit(limit)
    )
    result = await db.execute(query)
    return result.scalars().all()


async def search_clients(db: AsyncSession, search_term: str, skip: int = 0, limit: int = 100) -> List[Client]:
    """
    Busca clientes cuyo nombre, apellido o email contengan ``search_term``,
    sin distinguir mayúsculas.
    """
    query = (
        select(Client)
        .filter(
            or_(
                Client.first_name.icontains(search_term, autoescape=True),
                Client.last_name.icontains(search_term, autoescape=True),
                Client.email.icontains(search_term, autoescape=True),
            )
        )
        .order_by(Client.last_name.asc(), Client.first_name.asc())
        .offset(skip)
        .limit(limit)
    )
    result = await db.execute(query)
    clients = result.scalars().all()
    logger.debug(f"Búsqueda de clientes '{search_term}' encontró {len(clients)} resultados.")
    return clients


async def get_clients_by_ids(db: AsyncSession, client_ids: Iterable[str]) -> Dict[str, Client]:
    """Carga en una sola consulta los clientes indicados, indexados por ID."""
    ids = set(client_ids)
    if not ids:
        return {}
    result = await db.execute(select(Client).filter(Client.id.in_(ids)))
    return {client.id: client for client in result.scalars().all()}


async def count_client_dependents(db: AsyncSession, client_id: str) -> Dict[str, int]:
    """Cuenta las citas y ventas que referencian al cliente."""
    appointments = await db.scalar(
        select(func.count()).select_from(Appointment).filter(Appointment.client_id == client_id)
    )
    sales = await db.scalar(select(func.count()).select_from(Sale).filter(Sale.client_id == client_id))
    return {"appointments": appointments or 0, "sales": sales or 0}

# ========================================
# OPERACIONES DE ESCRITURA (CREATE, UPDATE, DELETE)
# ========================================

async def create_client(db: AsyncSession, client_in: client_schema.ClientCreate) -> Client:
    """Crea un nuevo cliente; el ID lo genera el servidor."""
    db_client = Client(**column_values(client_in.model_dump()))
    db.add(db_client)
    await db.commit()
    await db.refresh(db_client)
    return db_client


async def update_client(db: AsyncSession, db_client: Client, update_data: Dict[str, Any]) -> Client:
    """Aplica una actualización parcial ya validada."""
    for field, value in update_data.items():
        setattr(db_client, field, value)
    await db.commit()
    await db.refresh(db_client)
    return db_client


async def delete_client(db: AsyncSession, db_client: Client) -> Client:
    await db.delete(db_client)
    await db.commit()
    return db_client
