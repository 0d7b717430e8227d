"""
Errores de negocio del catálogo.

Las búsquedas que no encuentran nada devuelven None; solo se lanzan excepciones
cuando una regla de negocio falla o cuando el padre de una relación no existe.
"""

from typing import Optional


class BookstoreError(Exception):
    """Base de todas las excepciones propias del servicio."""

    code = "BOOKSTORE_ERROR"
    http_status = 500

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_response(self) -> dict:
        return {"error": {"code": self.code, "message": self.message}}


class ValidationError(BookstoreError):
    """Un campo obligatorio no cumple su invariante (por ejemplo un ISBN vacío)."""

    code = "VALIDATION_ERROR"
    http_status = 400


class NotFoundError(BookstoreError):
    """El recurso pedido no existe."""

    code = "NOT_FOUND"
    http_status = 404


class EntityNotFoundError(NotFoundError):
    """El padre de una operación de relación no existe."""

    def __init__(self, entity: str, entity_id):
        super().__init__(f"El recurso {entity} con id {entity_id} no existe.")
        self.entity = entity
        self.entity_id = entity_id
