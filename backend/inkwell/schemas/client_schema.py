# backend/inkwell/schemas/client_schema.py

"""
Esquemas Pydantic para el modelo Client.

Patrón de esquemas utilizado:
- ClientBase: Propiedades comunes compartidas
- ClientCreate: Para crear nuevos clientes (POST)
- ClientUpdate: Para actualizaciones parciales (PATCH)
- ClientResponse: Para respuestas de la API (GET)
"""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from .base_schema import CamelModel, ResponseModel, blank_to_none

# ========================================
# ESQUEMA BASE
# ========================================

class ClientBase(CamelModel):
    """Propiedades comunes compartidas entre esquemas de cliente."""
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    address: Optional[str] = None
    emergency_contact: Optional[str] = None
    medical_notes: Optional[str] = None

    @field_validator("email", "phone", "date_of_birth", mode="before")
    @classmethod
    def empty_as_null(cls, value):
        return blank_to_none(value)


# ========================================
# ESQUEMAS PARA OPERACIONES
# ========================================

class ClientCreate(ClientBase):
    """Esquema para crear un nuevo cliente. El ID lo genera el servidor."""
    pass


class ClientUpdate(ClientBase):
    """Esquema para actualizar un cliente. Todos los campos son opcionales."""
    first_name: Optional[str] = Field(None, min_length=1, max_length=255)
    last_name: Optional[str] = Field(None, min_length=1, max_length=255)


# ========================================
# ESQUEMA DE RESPUESTA
# ========================================

class ClientResponse(ResponseModel):
    """Esquema para las respuestas de la API al leer clientes."""
    id: str
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    address: Optional[str] = None
    emergency_contact: Optional[str] = None
    medical_notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
