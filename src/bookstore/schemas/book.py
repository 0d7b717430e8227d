"""
Esquemas Pydantic para la entidad Book.
Define los modelos de entrada y salida para validación y serialización de libros.
La vista detallada, con editorial, autores y reseñas, está en `book_detail`.
"""

import datetime
from pydantic import BaseModel, ConfigDict
from typing import Optional

from .reference import EntityRef

class BookBase(BaseModel):
    """
    Esquema base para un libro.

    Atributos:
        name (Optional[str]): Título del libro.
        isbn (Optional[str]): ISBN. Puede llegar vacío; la capa de lógica lo valida.
        image (Optional[str]): URL de la portada.
        description (Optional[str]): Sinopsis.
        publish_date (Optional[datetime.date]): Fecha de publicación.
    """
    name: Optional[str] = None
    isbn: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    publish_date: Optional[datetime.date] = None

class BookCreate(BookBase):
    """
    Esquema para crear un libro.

    Atributos:
        editorial (Optional[EntityRef]): Editorial existente a la que pertenece.
    """
    editorial: Optional[EntityRef] = None

class BookUpdate(BookCreate):
    """
    Esquema para reemplazar un libro (PUT). Los campos omitidos quedan a None,
    incluida la editorial.
    """
    pass

class BookSchema(BookBase):
    """
    Esquema de salida resumido de un libro.

    Atributos:
        id (int): ID del libro.
    """
    id: int

    model_config = ConfigDict(from_attributes=True)
