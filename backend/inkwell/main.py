# backend/inkwell/main.py
"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura y inicializa la aplicación completa:
- Configuración del logging
- Registro de routers de la API con prefijos
- Traducción de excepciones de dominio a respuestas JSON
- Servicio estático de las imágenes subidas
- Eventos del ciclo de vida (creación de tablas al arrancar)

Formato de los errores:
    {"detail": "<mensaje>", "errors": {"<campo>": "<mensaje>"} | null}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from inkwell.api.v1.api_router import api_router_v1
from inkwell.core.config import settings
from inkwell.core.exceptions import StudioError, UnauthorizedError
from inkwell.core.logging_config import configure_logging
from inkwell.db import models  # noqa: F401 - registra los modelos en Base.metadata
from inkwell.db.database import Base, engine
from inkwell.services.validation_service import errors_to_field_map

configure_logging()
logger = logging.getLogger(__name__)

# ========================================
# CONFIGURACIÓN DE LA APLICACIÓN FASTAPI
# ========================================

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    version=settings.PROJECT_VERSION,
    description="API de gestión para estudios de tatuaje: clientes, artistas, citas, inventario y ventas",
)

# ========================================
# REGISTRO DE ROUTERS Y ARCHIVOS ESTÁTICOS
# ========================================

app.include_router(api_router_v1, prefix=settings.API_V1_STR)

# StaticFiles exige que el directorio exista al montarlo
settings.UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
app.mount(settings.UPLOAD_URL_PREFIX, StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")


# ========================================
# MANEJADORES DE EXCEPCIONES
# ========================================

def error_response(status_code: int, detail: str, errors=None, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail, "errors": errors}, headers=headers)


@app.exception_handler(StudioError)
async def studio_error_handler(request: Request, exc: StudioError):
    """Traduce las excepciones de dominio a su código HTTP."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return error_response(exc.status_code, exc.message, getattr(exc, "errors", None), headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Los errores de validación de FastAPI también se devuelven por campo, con 400."""
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", errors_to_field_map(exc.errors()))


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Violación de integridad en {request.method} {request.url.path}: {exc.orig}")
    return error_response(status.HTTP_409_CONFLICT, "Integrity constraint violated")


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Error de base de datos en {request.method} {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error")


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Error inesperado en {request.method} {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# ========================================
# ENDPOINTS RAÍZ Y VERIFICACIÓN DE ESTADO
# ========================================

@app.get("/", tags=["Root"])
async def read_root():
    """
    Endpoint raíz para verificación básica del estado de la API.

    Example:
        GET /
        Response: {"message": "Bienvenido a Inkwell Studio API v0.1.0"}
    """
    return {"message": f"Bienvenido a {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}"}


# ========================================
# EVENTOS DEL CICLO DE VIDA DE LA APLICACIÓN
# ========================================

@app.on_event("startup")
async def startup_event():
    """
    Crea las tablas que falten. No modifica tablas existentes.
    """
    if not settings.DB_CREATE_TABLES:
        logger.info("DB_CREATE_TABLES desactivado; no se crean tablas")
        return
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Esquema verificado en {settings.APP_ENVIRONMENT}")


@app.on_event("shutdown")
async def shutdown_event():
    await engine.dispose()
    logger.info("Conexiones de base de datos cerradas")
