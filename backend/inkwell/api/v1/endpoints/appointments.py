# backend/inkwell/api/v1/endpoints/appointments.py
"""
Endpoints REST para las citas.

Las lecturas devuelven la cita enriquecida con cliente y artista; las
escrituras devuelven la fila de la cita.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.api import deps
from inkwell.schemas import appointment_schema
from inkwell.services.appointment_service import appointment_service

router = APIRouter()


@router.get("", response_model=List[appointment_schema.AppointmentWithRelations])
async def read_appointments(
    db: AsyncSession = Depends(deps.get_db),
    on_date: Optional[date] = Query(default=None, alias="date"),
    artist_id: Optional[str] = Query(default=None, alias="artistId"),
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=500),
) -> List[appointment_schema.AppointmentWithRelations]:
    """
    Lista de citas. ``date`` devuelve las de ese día (zona del estudio);
    ``artistId`` las de un artista.
    """
    return await appointment_service.list_appointments(
        db, on_date=on_date, artist_id=artist_id, skip=skip, limit=limit
    )


@router.get("/{appointment_id}", response_model=appointment_schema.AppointmentWithRelations)
async def read_appointment(
    appointment_id: str,
    db: AsyncSession = Depends(deps.get_db),
) -> appointment_schema.AppointmentWithRelations:
    return await appointment_service.get_appointment(db, appointment_id)


@router.post("", response_model=appointment_schema.AppointmentResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    *,
    db: AsyncSession = Depends(deps.get_db),
    appointment_in: appointment_schema.AppointmentCreate,
) -> appointment_schema.AppointmentResponse:
    """Crea una cita; 404 si el cliente o el artista no existen."""
    return await appointment_service.create_appointment(db, appointment_in)


@router.patch("/{appointment_id}", response_model=appointment_schema.AppointmentResponse)
async def update_appointment(
    *,
    db: AsyncSession = Depends(deps.get_db),
    appointment_id: str,
    appointment_in: appointment_schema.AppointmentUpdate,
) -> appointment_schema.AppointmentResponse:
    return await appointment_service.update_appointment(db, appointment_id, appointment_in)


@router.delete("/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_appointment(
    *,
    db: AsyncSession = Depends(deps.get_db),
    appointment_id: str,
) -> Response:
    await appointment_service.delete_appointment(db, appointment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
