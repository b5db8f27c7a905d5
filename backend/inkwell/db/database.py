# backend/inkwell/db/database.py

"""
Configuración principal de la base de datos para la aplicación.

Este módulo establece la conexión con PostgreSQL usando SQLAlchemy y define
los componentes básicos que serán utilizados por toda la aplicación:
- Motor de base de datos (engine)
- Fábrica de sesiones (AsyncSessionLocal)
- Clase base para modelos (Base)

La dependencia get_db() vive en inkwell/api/deps.py para mantener las
dependencias de FastAPI separadas de la configuración.
"""

from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base
from inkwell.core.config import settings # Importamos nuestra configuración


def build_engine(database_url: str) -> AsyncEngine:
    """
    Crea el motor asíncrono aplicando los límites de espera configurados.

    El timeout de sentencia solo existe en asyncpg; el de checkout del pool
    aplica a cualquier backend con pool de conexiones.
    """
    engine_kwargs: Dict[str, Any] = {"pool_pre_ping": True}
    if database_url.startswith("postgresql+asyncpg"):
        engine_kwargs["pool_timeout"] = settings.DB_POOL_TIMEOUT
        engine_kwargs["connect_args"] = {"command_timeout": settings.DB_COMMAND_TIMEOUT}
    return create_async_engine(database_url, **engine_kwargs)


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker:
    # expire_on_commit=False es importante para que los objetos sigan siendo
    # utilizables después de que la transacción se haya confirmado.
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# Motor y fábrica de sesiones de la aplicación
engine = build_engine(settings.DATABASE_URL)
AsyncSessionLocal = build_sessionmaker(engine)

# Clase base declarativa para todos los modelos ORM
# Todos los modelos en db/models/ heredan de esta clase
Base = declarative_base()
