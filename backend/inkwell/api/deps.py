# backend/inkwell/api/deps.py
"""
Módulo de dependencias para FastAPI.

Este archivo centraliza todas las dependencias que pueden ser inyectadas
en los endpoints de la API: sesión de base de datos, fábrica de sesiones,
configuración, identidad autenticada y servicios con configuración.

La identidad se resuelve por petición y se pasa explícitamente a quien la
necesite; no existe estado de sesión global.
"""

import hmac
import logging
from typing import AsyncGenerator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from inkwell.core.config import Settings, settings
from inkwell.core.exceptions import UnauthorizedError
from inkwell.db.database import AsyncSessionLocal
from inkwell.schemas.user_schema import Identity, UserRole
from inkwell.services.upload_service import UploadService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependencia de FastAPI para obtener una sesión de base de datos asíncrona.
    Se asegura de que la sesión se cierre siempre después de la petición.
    """
    async with AsyncSessionLocal() as session:
        yield session


def get_session_factory() -> async_sessionmaker:
    """
    Fábrica de sesiones para operaciones que abren varias sesiones en
    paralelo (panel principal).
    """
    return AsyncSessionLocal


def get_settings() -> Settings:
    """
    Dependencia de FastAPI para obtener el objeto de configuración.
    """
    return settings


def identity_for_token(token: str, config: Settings) -> Optional[Identity]:
    """Busca la identidad asociada a un token; comparación en tiempo constante."""
    if config.ADMIN_TOKEN and hmac.compare_digest(token, config.ADMIN_TOKEN):
        return Identity(user_id="admin", role=UserRole.ADMIN)

    for known_token, principal in config.API_TOKENS.items():
        if hmac.compare_digest(token, known_token):
            user_id, _, role = principal.partition(":")
            return Identity(user_id=user_id, role=UserRole(role or UserRole.RECEPTIONIST.value))
    return None


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    config: Settings = Depends(get_settings),
) -> Identity:
    """
    Verifica el token Bearer de la petición.

    Raises:
        UnauthorizedError: si falta el token o no es válido.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Not authenticated")

    identity = identity_for_token(credentials.credentials, config)
    if identity is None:
        logger.warning("Token de acceso inválido")
        raise UnauthorizedError("Invalid token")
    return identity


def get_upload_service(config: Settings = Depends(get_settings)) -> UploadService:
    """
    Dependencia para obtener el servicio de subida de archivos.
    """
    return UploadService(config)
