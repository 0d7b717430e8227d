"""
Modelo ORM para la entidad Editorial.
La editorial es el lado "uno" de la relación con Book: la clave foránea vive en
`books.editorial_id`. Borrar una editorial desasocia sus libros, no los borra.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from bookstore.db.session import Base

class Editorial(Base):
    """
    Representa una editorial.

    Atributos:
        id (int): Identificador primario de la editorial.
        name (str): Nombre de la editorial.
        books (List[Book]): Libros publicados por la editorial.
    """
    __tablename__ = "editorials"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), index=True, nullable=True)

    books = relationship("Book", back_populates="editorial", order_by="Book.id")

    def __repr__(self) -> str:
        return f"<Editorial(id={self.id}, name='{self.name}')>"
