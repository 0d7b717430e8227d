"""
Esquemas Pydantic para la entidad Review.
Define los modelos de entrada y salida para validación y serialización de reseñas.
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional

class ReviewBase(BaseModel):
    """
    Esquema base para una reseña, usado como base para creación y visualización.

    Atributos:
        name (Optional[str]): Título de la reseña.
        source (Optional[str]): Medio o fuente que publica la reseña.
        description (Optional[str]): Texto de la reseña.
    """
    name: Optional[str] = None
    source: Optional[str] = None
    description: Optional[str] = None

class ReviewCreate(ReviewBase):
    """
    Esquema para la creación de una reseña.
    El libro se toma de la ruta, no del cuerpo.
    """
    pass

class ReviewUpdate(ReviewBase):
    """
    Esquema para actualizar una reseña. Solo reemplaza los campos escalares.
    """
    pass

class ReviewSchema(ReviewBase):
    """
    Esquema de salida para una reseña.

    Atributos:
        id (int): ID de la reseña.
        book_id (int): ID del libro reseñado.
    """
    id: int
    book_id: int

    model_config = ConfigDict(from_attributes=True)
