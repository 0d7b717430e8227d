"""
Esquemas Pydantic para la entidad Author.
"""

import datetime
from pydantic import BaseModel, ConfigDict
from typing import List, Optional

from .book import BookSchema

class AuthorBase(BaseModel):
    """
    Esquema base para un autor.

    Atributos:
        name (Optional[str]): Nombre del autor.
        birth_date (Optional[datetime.date]): Fecha de nacimiento.
        image (Optional[str]): URL de la imagen.
    """
    name: Optional[str] = None
    birth_date: Optional[datetime.date] = None
    image: Optional[str] = None

class AuthorCreate(AuthorBase):
    pass

class AuthorUpdate(AuthorBase):
    """Reemplaza los campos escalares; los libros del autor se conservan."""
    pass

class AuthorSchema(AuthorBase):
    id: int

    model_config = ConfigDict(from_attributes=True)

class AuthorDetail(AuthorSchema):
    """
    Autor con el resumen de sus libros.

    Atributos:
        books (List[BookSchema]): Libros asociados al autor.
    """
    books: List[BookSchema] = []
