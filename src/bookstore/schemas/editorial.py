"""
Esquemas Pydantic para la entidad Editorial.
"""

from pydantic import BaseModel, ConfigDict
from typing import List, Optional

from .book import BookSchema

class EditorialBase(BaseModel):
    name: Optional[str] = None

class EditorialCreate(EditorialBase):
    pass

class EditorialUpdate(EditorialBase):
    pass

class EditorialSchema(EditorialBase):
    id: int

    model_config = ConfigDict(from_attributes=True)

class EditorialDetail(EditorialSchema):
    """
    Editorial con el resumen de sus libros.

    Atributos:
        books (List[BookSchema]): Libros publicados por la editorial.
    """
    books: List[BookSchema] = []
