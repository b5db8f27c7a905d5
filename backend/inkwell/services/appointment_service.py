# backend/inkwell/services/appointment_service.py
"""
Capa de servicios para las citas.

Responsabilidades principales:
- Verificar que el cliente y el artista existen antes de cualquier escritura
  (ninguna fila se crea si una referencia falla)
- Normalizar scheduled_date a UTC (una fecha sin zona se interpreta en la
  zona horaria del estudio)
- Enriquecer las lecturas con cliente y artista completos mediante el
  resolvedor de relaciones
- Rechazar el borrado de citas que tengan ventas asociadas
"""

import logging
from datetime import date
from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.core.exceptions import NotFoundError, ReferentialIntegrityError
from inkwell.core.time_utils import local_date_bounds, studio_tz, to_utc
from inkwell.crud import appointment_crud, artist_crud, client_crud
from inkwell.db.models.appointment_model import Appointment
from inkwell.db.types import column_values
from inkwell.schemas import appointment_schema
from inkwell.services import relationship_service
from inkwell.services.validation_service import require_fields

logger = logging.getLogger(__name__)

NON_NULLABLE_FIELDS = (
    "client_id", "artist_id", "scheduled_date", "duration", "body_part", "reference_images", "status",
)


class AppointmentService:
    """
    Servicio para operaciones de negocio relacionadas con citas.
    """

    # ========================================
    # OPERACIONES DE CONSULTA
    # ========================================

    async def get_appointment(
        self, db: AsyncSession, appointment_id: str
    ) -> appointment_schema.AppointmentWithRelations:
        appointment = await self._get_row(db, appointment_id)
        enriched = await self.enrich(db, [appointment])
        return enriched[0]

    async def list_appointments(
        self,
        db: AsyncSession,
        on_date: Optional[date] = None,
        artist_id: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[appointment_schema.AppointmentWithRelations]:
        """
        Lista de citas enriquecidas.

        - ``on_date``: solo las del día natural indicado (zona del estudio),
          en orden cronológico
        - ``artist_id``: solo las del artista, de la más reciente a la más antigua
        """
        if on_date is not None:
            start, end = local_date_bounds(on_date, studio_tz())
            appointments = await appointment_crud.get_appointments_between(db, start, end, skip=skip, limit=limit)
        else:
            appointments = await appointment_crud.get_appointments(
                db, skip=skip, limit=limit, artist_id=artist_id
            )
        return await self.enrich(db, appointments)

    async def enrich(
        self, db: AsyncSession, appointments: Sequence[Appointment]
    ) -> List[appointment_schema.AppointmentWithRelations]:
        """Carga clientes y artistas en bloque y resuelve cada cita."""
        clients = await client_crud.get_clients_by_ids(db, {a.client_id for a in appointments})
        artists = await artist_crud.get_artists_by_ids(db, {a.artist_id for a in appointments})
        return relationship_service.resolve_appointments(appointments, clients, artists)

    # ========================================
    # OPERACIONES DE ESCRITURA
    # ========================================

    async def create_appointment(
        self, db: AsyncSession, appointment_in: appointment_schema.AppointmentCreate
    ) -> Appointment:
        await self.ensure_references(db, client_id=appointment_in.client_id, artist_id=appointment_in.artist_id)

        data = column_values(appointment_in.model_dump())
        data["scheduled_date"] = to_utc(data["scheduled_date"])

        appointment = await appointment_crud.create_appointment(db, data)
        logger.info(
            f"Cita creada: {appointment.id} (cliente {appointment.client_id}, artista {appointment.artist_id})"
        )
        return appointment

    async def update_appointment(
        self,
        db: AsyncSession,
        appointment_id: str,
        appointment_in: appointment_schema.AppointmentUpdate,
    ) -> Appointment:
        db_appointment = await self._get_row(db, appointment_id)

        update_data = column_values(appointment_in.model_dump(exclude_unset=True))
        require_fields(update_data, NON_NULLABLE_FIELDS)

        await self.ensure_references(
            db, client_id=update_data.get("client_id"), artist_id=update_data.get("artist_id")
        )
        if "scheduled_date" in update_data:
            update_data["scheduled_date"] = to_utc(update_data["scheduled_date"])

        appointment = await appointment_crud.update_appointment(db, db_appointment, update_data)
        logger.info(f"Cita actualizada: {appointment_id}")
        return appointment

    async def delete_appointment(self, db: AsyncSession, appointment_id: str) -> None:
        db_appointment = await self._get_row(db, appointment_id)

        dependents = await appointment_crud.count_appointment_dependents(db, appointment_id)
        if any(dependents.values()):
            logger.warning(f"Borrado rechazado de la cita {appointment_id}: {dependents}")
            raise ReferentialIntegrityError("Appointment", appointment_id, dependents)

        await appointment_crud.delete_appointment(db, db_appointment)
        logger.info(f"Cita eliminada: {appointment_id}")

    # ========================================
    # VALIDACIÓN DE REFERENCIAS
    # ========================================

    async def ensure_references(
        self,
        db: AsyncSession,
        client_id: Optional[str] = None,
        artist_id: Optional[str] = None,
    ) -> None:
        """
        Comprueba que las referencias indicadas existen.

        Raises:
            NotFoundError: con la entidad que falta.
        """
        if client_id is not None and not await client_crud.get_client(db, client_id):
            logger.info(f"Referencia inválida a cliente {client_id}")
            raise NotFoundError("Client", client_id)
        if artist_id is not None and not await artist_crud.get_artist(db, artist_id):
            logger.info(f"Referencia inválida a artista {artist_id}")
            raise NotFoundError("Artist", artist_id)

    async def _get_row(self, db: AsyncSession, appointment_id: str) -> Appointment:
        appointment = await appointment_crud.get_appointment(db, appointment_id)
        if not appointment:
            raise NotFoundError("Appointment", appointment_id)
        return appointment


appointment_service = AppointmentService()
