# backend/inkwell/services/validation_service.py
"""
Validador de entidades.

Comprueba un payload crudo (dict) contra el esquema de creación o
actualización de una entidad y, si algo falla, lanza ValidationError con
un mapa {campo: mensaje} para que el cliente pueda mostrar cada error junto
a su input. No tiene efectos secundarios.

Los esquemas Pydantic ya declaran las reglas (obligatorios, rangos y
conjuntos cerrados); aquí solo se traducen sus errores al formato por campo.
"""

from typing import Any, Dict, Iterable, Mapping, Sequence, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from inkwell.core.exceptions import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Prefijos de ubicación que añade FastAPI y que no forman parte del campo
_LOCATION_PREFIXES = {"body", "query", "path", "header", "form", "file"}


def field_key(loc: Sequence[Union[str, int]]) -> str:
    """
    Convierte la ubicación de un error en la clave del campo.

    ("body", "deposit") -> "deposit"; ("referenceImages", 2) -> "referenceImages.2"
    """
    parts = [str(part) for part in loc]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) if parts else "__root__"


def errors_to_field_map(errors: Iterable[Mapping[str, Any]]) -> Dict[str, str]:
    """Agrupa errores estilo Pydantic por campo, conservando el primero."""
    field_errors: Dict[str, str] = {}
    for error in errors:
        key = field_key(error.get("loc", ()))
        field_errors.setdefault(key, error.get("msg", "Invalid value"))
    return field_errors


def validate_payload(schema: Type[SchemaT], payload: Mapping[str, Any]) -> SchemaT:
    """
    Valida ``payload`` contra ``schema``.

    Punto de entrada para validar fuera de HTTP (scripts, importaciones,
    pruebas). En la API, FastAPI valida el cuerpo con el mismo esquema y
    main.py traduce sus errores con errors_to_field_map, de modo que ambos
    caminos producen el mismo mapa por campo.

    Raises:
        ValidationError: con el mapa de errores por campo.
    """
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(errors_to_field_map(exc.errors())) from exc


def require_fields(data: Mapping[str, Any], fields: Iterable[str]) -> None:
    """
    Verifica que los campos no anulables no lleguen como null en una
    actualización parcial. Las claves del error van en camelCase, como en la API.
    """
    missing = {to_camel(name): "Field cannot be null" for name in fields if name in data and data[name] is None}
    if missing:
        raise ValidationError(missing)
