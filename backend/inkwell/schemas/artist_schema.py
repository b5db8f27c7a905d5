# backend/inkwell/schemas/artist_schema.py
"""
Esquemas Pydantic para el modelo Artist.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import EmailStr, Field, field_validator

from .base_schema import CamelModel, ResponseModel, blank_to_none


class ArtistBase(CamelModel):
    """Propiedades comunes compartidas entre esquemas de artista."""
    name: str = Field(..., min_length=1, max_length=255)
    user_id: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    # Lista ordenada; no se deduplica al guardar
    specialties: List[str] = Field(default_factory=list)
    schedule: Optional[str] = None
    hourly_rate: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    is_active: bool = True

    @field_validator("user_id", "email", "phone", "hourly_rate", mode="before")
    @classmethod
    def empty_as_null(cls, value):
        return blank_to_none(value)


class ArtistCreate(ArtistBase):
    """Esquema para crear un nuevo artista."""
    pass


class ArtistUpdate(ArtistBase):
    """Esquema para actualizar un artista. Todos los campos son opcionales."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    specialties: Optional[List[str]] = None
    is_active: Optional[bool] = None


class ArtistResponse(ResponseModel):
    """Esquema para las respuestas de la API al leer artistas."""
    id: str
    name: str
    user_id: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    specialties: List[str] = Field(default_factory=list)
    schedule: Optional[str] = None
    hourly_rate: Optional[Decimal] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
