# backend/inkwell/db/types.py
"""
Tipos de columna compartidos por los modelos.

En PostgreSQL las listas se guardan como ``text[]``; en otros motores
(SQLite en los tests) como JSON. En ambos casos se conserva el orden de
inserción y no se eliminan duplicados.
"""

import enum
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import JSON, Text
from sqlalchemy.dialects.postgresql import ARRAY

StringList = JSON().with_variant(ARRAY(Text), "postgresql")


def utcnow() -> datetime:
    """Marca temporal actual con zona UTC, usada como default de columnas."""
    return datetime.now(timezone.utc)


def column_values(data: Dict[str, Any]) -> Dict[str, Any]:
    """Sustituye los Enum de los esquemas por su valor para persistirlos."""
    return {key: value.value if isinstance(value, enum.Enum) else value for key, value in data.items()}
