"""
Vista detallada de un libro: datos propios más los resúmenes de su editorial,
sus autores y sus reseñas.
"""

from typing import List, Optional

from .author import AuthorSchema
from .book import BookSchema
from .editorial import EditorialSchema
from .review import ReviewSchema

class BookDetail(BookSchema):
    """
    Esquema de salida completo de un libro.

    Atributos:
        editorial (Optional[EditorialSchema]): Editorial del libro, si tiene.
        authors (List[AuthorSchema]): Autores asociados.
        reviews (List[ReviewSchema]): Reseñas del libro.
    """
    editorial: Optional[EditorialSchema] = None
    authors: List[AuthorSchema] = []
    reviews: List[ReviewSchema] = []
