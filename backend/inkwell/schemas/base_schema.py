# backend/inkwell/schemas/base_schema.py
"""
Esquemas base compartidos.

La API expone los campos en camelCase (contrato del frontend) mientras el
código Python trabaja en snake_case. Los esquemas de entrada aceptan ambos
formatos; los de respuesta serializan en camelCase.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base de todos los esquemas de la API."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResponseModel(CamelModel):
    """Base de las respuestas construidas desde modelos ORM."""
    model_config = ConfigDict(from_attributes=True)

    @field_validator("*", mode="after")
    @classmethod
    def _stored_datetimes_are_utc(cls, value: Any) -> Any:
        # SQLite devuelve las fechas UTC sin tzinfo
        if isinstance(value, datetime) and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


def blank_to_none(value: Any) -> Any:
    """Los formularios envían "" para campos opcionales vacíos."""
    if isinstance(value, str) and not value.strip():
        return None
    return value
