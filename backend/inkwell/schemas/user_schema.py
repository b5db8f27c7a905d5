# backend/inkwell/schemas/user_schema.py
"""
Esquemas Pydantic para el modelo User y la identidad autenticada.
"""

import enum
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr

from .base_schema import CamelModel, ResponseModel


class UserRole(str, enum.Enum):
    """Roles del personal del estudio."""
    ADMIN = "admin"
    ARTIST = "artist"
    RECEPTIONIST = "receptionist"


class Identity(BaseModel):
    """
    Identidad ya verificada por el colaborador de autenticación.

    Se pasa explícitamente a las operaciones que la necesitan; nunca se
    guarda en estado global.
    """
    user_id: str
    role: UserRole = UserRole.RECEPTIONIST

    model_config = ConfigDict(frozen=True)


class UserUpsert(CamelModel):
    """Datos para crear o actualizar un usuario por su ID."""
    id: str
    email: Optional[EmailStr] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: UserRole = UserRole.RECEPTIONIST


class UserResponse(ResponseModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: UserRole
    created_at: datetime
    updated_at: datetime
