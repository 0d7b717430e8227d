"""
Modelo ORM para la entidad Author.
La colección `books` es el lado inverso de `Book.authors`; la tabla de asociación
la mantiene el ORM.
"""

from sqlalchemy import Column, Integer, String, Date
from sqlalchemy.orm import relationship
from bookstore.db.session import Base
from bookstore.models.book import book_author

class Author(Base):
    """
    Representa un autor del catálogo.

    Atributos:
        id (int): Identificador primario del autor.
        name (str): Nombre del autor.
        birth_date (date): Fecha de nacimiento.
        image (str): URL de la imagen del autor.
        books (List[Book]): Libros escritos por el autor.
    """
    __tablename__ = "authors"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), index=True, nullable=True)
    birth_date = Column(Date, nullable=True)
    image = Column(String(512), nullable=True)

    books = relationship(
        "Book",
        secondary=book_author,
        back_populates="authors",
        order_by="Book.id"
    )

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, name='{self.name}')>"
