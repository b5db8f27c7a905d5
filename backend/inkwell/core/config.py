# backend/inkwell/core/config.py
"""
Este archivo contiene la configuración de la aplicación.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import Dict, Optional
from pathlib import Path
import os

from inkwell.schemas.user_schema import UserRole

# Apunta al directorio 'backend/'
BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    """
    Configuración de la aplicación usando Pydantic BaseSettings.
    Variables sensibles desde .env, defaults seguros para el resto.
    """
    # Configuración general del proyecto
    BASE_DIR: Path = BASE_DIR
    API_V1_STR: str = "/api"
    PROJECT_NAME: str = "Inkwell Studio API"
    PROJECT_VERSION: str = "0.1.0"

    # Configuración de la base de datos
    POSTGRES_SERVER: str = os.getenv("POSTGRES_SERVER", "postgres")
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "user")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "password")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "inkwell_db")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")

    # URL completa opcional (p. ej. SQLite en tests); tiene prioridad sobre POSTGRES_*
    SQLALCHEMY_DATABASE_URI: Optional[str] = None

    # Límites de espera hacia la base de datos (segundos)
    DB_POOL_TIMEOUT: float = 10.0
    DB_COMMAND_TIMEOUT: float = 15.0
    DASHBOARD_TIMEOUT: float = 20.0

    # Crear tablas al arrancar (create_all; no migra tablas existentes)
    DB_CREATE_TABLES: bool = True

    @property
    def DATABASE_URL(self) -> str:
        """URL de conexión a la base de datos asíncrona."""
        if self.SQLALCHEMY_DATABASE_URI:
            return self.SQLALCHEMY_DATABASE_URI
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # Zona horaria del estudio: define los límites de "hoy" y "este mes"
    TIMEZONE: str = "Europe/Madrid"

    # Admin Token - REQUERIDO del .env (sensible)
    ADMIN_TOKEN: str

    # Tokens adicionales: {"<token>": "<user_id>:<role>"}
    API_TOKENS: Dict[str, str] = {}

    @field_validator("API_TOKENS")
    @classmethod
    def check_token_principals(cls, tokens: Dict[str, str]) -> Dict[str, str]:
        """Cada valor es "<user_id>:<role>"; el rol es opcional (receptionist)."""
        valid_roles = {role.value for role in UserRole}
        for principal in tokens.values():
            user_id, _, role = principal.partition(":")
            if not user_id:
                raise ValueError(f"API_TOKENS entry '{principal}' has no user id")
            if role and role not in valid_roles:
                raise ValueError(f"API_TOKENS entry '{principal}' has unknown role '{role}'")
        return tokens

    # Subida de imágenes de referencia
    UPLOAD_DIR: Path = BASE_DIR / "uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    UPLOAD_MAX_FILES: int = 5
    UPLOAD_MAX_BYTES: int = 10 * 1024 * 1024

    # Logging - Defaults seguros
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # App Info - Del .env con defaults
    APP_ENVIRONMENT: str = "development"

    class Config:
        env_file = ".env"
        case_sensitive = False

# Instancia global de la configuración
settings = Settings()
