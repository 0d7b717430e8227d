"""
Modelo ORM para la entidad Book en la base de datos del catálogo.
Define los campos principales de un libro y sus relaciones con la editorial,
las reseñas y los autores.
"""

from sqlalchemy import Column, Integer, String, Text, Date, ForeignKey, Table
from sqlalchemy.orm import relationship
from bookstore.db.session import Base

# Tabla de asociación Book <-> Author. La clave primaria compuesta impide
# membresías duplicadas.
book_author = Table(
    "book_author",
    Base.metadata,
    Column("book_id", Integer, ForeignKey("books.id"), primary_key=True),
    Column("author_id", Integer, ForeignKey("authors.id"), primary_key=True),
)

class Book(Base):
    """
    Representa un libro en la base de datos.

    Atributos:
        id (int): Identificador primario del libro.
        name (str): Título del libro.
        isbn (str): ISBN del libro; obligatorio y no vacío.
        image (str): URL de la imagen de portada.
        description (str): Descripción o sinopsis del libro.
        publish_date (date): Fecha de publicación.
        editorial_id (int): Editorial propietaria de la referencia (opcional).
        editorial (Editorial): Editorial del libro.
        reviews (List[Review]): Reseñas del libro; se borran con él.
        authors (List[Author]): Autores del libro (relación compartida).
    """
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), index=True, nullable=True)
    isbn = Column(String(20), index=True, nullable=False)
    image = Column(String(512), nullable=True)
    description = Column(Text, nullable=True)
    publish_date = Column(Date, nullable=True)
    editorial_id = Column(Integer, ForeignKey("editorials.id"), nullable=True, index=True)

    editorial = relationship("Editorial", back_populates="books")
    reviews = relationship(
        "Review",
        back_populates="book",
        cascade="all, delete-orphan"
    )
    authors = relationship(
        "Author",
        secondary=book_author,
        back_populates="books",
        order_by="Author.id"
    )

    def __repr__(self) -> str:
        """
        Representación legible del objeto Book para depuración.

        Returns:
            str: Cadena representando el libro.
        """
        return f"<Book(id={self.id}, name='{(self.name or '')[:30]}...', isbn='{self.isbn}')>"
