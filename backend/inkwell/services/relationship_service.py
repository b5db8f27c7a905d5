# backend/inkwell/services/relationship_service.py
"""
Resolución de relaciones de citas y ventas.

Convierte filas de Appointment / Sale en registros enriquecidos que llevan
el cliente y el artista completos (y, en las ventas, la cita opcional).
Trabaja sobre tablas ya cargadas (mappings id -> fila), de modo que no
depende del motor de almacenamiento.

Una referencia que no resuelve indica una inconsistencia interna: la
validación de referencias al crear o modificar debería haberlo impedido.
Se lanza NotFoundError(internal=True) y se registra como error.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional

from inkwell.core.exceptions import NotFoundError
from inkwell.schemas.appointment_schema import AppointmentResponse, AppointmentWithRelations
from inkwell.schemas.artist_schema import ArtistResponse
from inkwell.schemas.client_schema import ClientResponse
from inkwell.schemas.sale_schema import SaleResponse, SaleWithRelations

logger = logging.getLogger(__name__)


def _lookup(table: Mapping[str, Any], entity: str, entity_id: Optional[str], owner: str) -> Any:
    row = table.get(entity_id) if entity_id is not None else None
    if row is None:
        logger.error(f"Referencia rota: {owner} apunta a {entity} '{entity_id}' inexistente")
        raise NotFoundError(entity, entity_id, internal=True)
    return row


def resolve_appointment(
    appointment: Any,
    clients: Mapping[str, Any],
    artists: Mapping[str, Any],
) -> AppointmentWithRelations:
    """Enriquece una cita con su cliente y su artista."""
    owner = f"Appointment {appointment.id}"
    client = _lookup(clients, "Client", appointment.client_id, owner)
    artist = _lookup(artists, "Artist", appointment.artist_id, owner)

    base = AppointmentResponse.model_validate(appointment)
    return AppointmentWithRelations(
        **base.model_dump(),
        client=ClientResponse.model_validate(client),
        artist=ArtistResponse.model_validate(artist),
    )


def resolve_sale(
    sale: Any,
    clients: Mapping[str, Any],
    artists: Mapping[str, Any],
    appointments: Mapping[str, Any],
) -> SaleWithRelations:
    """
    Enriquece una venta. La ausencia de appointment_id es un estado válido;
    un appointment_id que no resuelve es una inconsistencia.
    """
    owner = f"Sale {sale.id}"
    client = _lookup(clients, "Client", sale.client_id, owner)
    artist = _lookup(artists, "Artist", sale.artist_id, owner)

    appointment = None
    if sale.appointment_id is not None:
        appointment = AppointmentResponse.model_validate(
            _lookup(appointments, "Appointment", sale.appointment_id, owner)
        )

    base = SaleResponse.model_validate(sale)
    return SaleWithRelations(
        **base.model_dump(),
        client=ClientResponse.model_validate(client),
        artist=ArtistResponse.model_validate(artist),
        appointment=appointment,
    )


def resolve_appointments(
    appointments: Iterable[Any],
    clients: Mapping[str, Any],
    artists: Mapping[str, Any],
) -> List[AppointmentWithRelations]:
    return [resolve_appointment(appointment, clients, artists) for appointment in appointments]


def resolve_sales(
    sales: Iterable[Any],
    clients: Mapping[str, Any],
    artists: Mapping[str, Any],
    appointments: Mapping[str, Any],
) -> List[SaleWithRelations]:
    return [resolve_sale(sale, clients, artists, appointments) for sale in sales]
