# backend/inkwell/core/exceptions.py
"""
Excepciones de dominio del estudio.

Los servicios lanzan estas excepciones en lugar de HTTPException para que la
lógica de negocio no dependa de la capa HTTP. ``main.py`` registra los
manejadores que las traducen a respuestas JSON con el código adecuado.
"""

from typing import Dict, Optional


class StudioError(Exception):
    """Excepción base de la aplicación."""
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StudioError):
    """Datos de entrada inválidos; ``errors`` va indexado por campo."""
    status_code = 400

    def __init__(self, errors: Dict[str, str], message: str = "Validation failed"):
        super().__init__(message)
        self.errors = errors


class NotFoundError(StudioError):
    """
    Entidad no encontrada.

    Con ``internal=True`` indica una referencia rota entre filas ya
    persistidas (inconsistencia interna), que se expone como 500.
    """
    status_code = 404

    def __init__(self, entity: str, entity_id: Optional[str], internal: bool = False):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id
        self.internal = internal
        if internal:
            self.status_code = 500


class ReferentialIntegrityError(StudioError):
    """Intento de borrar una entidad que otras filas siguen referenciando."""
    status_code = 409

    def __init__(self, entity: str, entity_id: str, dependents: Dict[str, int]):
        detail = ", ".join(f"{count} {name}" for name, count in dependents.items() if count)
        super().__init__(f"Cannot delete {entity} {entity_id}: still referenced by {detail}")
        self.entity = entity
        self.entity_id = entity_id
        self.dependents = dependents


class ConflictError(StudioError):
    """Violación de unicidad (p. ej. email duplicado)."""
    status_code = 409


class UnauthorizedError(StudioError):
    """Identidad ausente o no verificada."""
    status_code = 401


class UnexpectedError(StudioError):
    """Fallo del almacén de datos u otro error no recuperable."""
    status_code = 500
