# backend/inkwell/schemas/appointment_schema.py
"""
Se encarga de definir los esquemas Pydantic para el modelo Appointment.
"""

import enum
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field, field_validator

from .base_schema import CamelModel, ResponseModel, blank_to_none
from .artist_schema import ArtistResponse
from .client_schema import ClientResponse


class AppointmentStatus(str, enum.Enum):
    """Define los posibles estados de una cita."""
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"


class AppointmentBase(CamelModel):
    """Propiedades base de una cita."""
    client_id: str = Field(..., min_length=1, description="ID del cliente")
    artist_id: str = Field(..., min_length=1, description="ID del artista")
    scheduled_date: datetime = Field(..., description="Fecha y hora de la cita")
    duration: int = Field(..., gt=0, description="Duración en minutos")
    body_part: str = Field(..., min_length=1, max_length=50, description="Zona del cuerpo")
    description: Optional[str] = None
    reference_images: List[str] = Field(default_factory=list, description="URLs de imágenes de referencia")
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    estimated_price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    notes: Optional[str] = None

    @field_validator("estimated_price", mode="before")
    @classmethod
    def empty_as_null(cls, value):
        return blank_to_none(value)


class AppointmentCreate(AppointmentBase):
    """Esquema para crear una cita."""
    pass


class AppointmentUpdate(AppointmentBase):
    """Esquema para actualizaciones parciales de una cita."""
    client_id: Optional[str] = Field(None, min_length=1)
    artist_id: Optional[str] = Field(None, min_length=1)
    scheduled_date: Optional[datetime] = None
    duration: Optional[int] = Field(None, gt=0)
    body_part: Optional[str] = Field(None, min_length=1, max_length=50)
    reference_images: Optional[List[str]] = None
    status: Optional[AppointmentStatus] = None


class AppointmentResponse(ResponseModel):
    """Esquema de respuesta de una cita sin relaciones."""
    id: str
    client_id: str
    artist_id: str
    scheduled_date: datetime
    duration: int
    body_part: str
    description: Optional[str] = None
    reference_images: List[str] = Field(default_factory=list)
    status: AppointmentStatus
    estimated_price: Optional[Decimal] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class AppointmentWithRelations(AppointmentResponse):
    """Cita enriquecida con los registros completos de cliente y artista."""
    client: ClientResponse
    artist: ArtistResponse
