"""
Lógica de negocio de Book.

Valida la entrada, delega la persistencia en `crud_book` y las operaciones sobre
los autores del libro en la relación muchos a muchos Book <-> Author.
Las consultas devuelven None cuando el libro no existe; es la capa HTTP la que
traduce ese None a un 404.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.errors import ValidationError
from ..crud import crud_author, crud_book
from ..models.author import Author
from ..models.book import Book, book_author
from ..schemas.book import BookCreate, BookUpdate
from .relationships import ManyToManyRelation

logger = logging.getLogger(__name__)

book_authors = ManyToManyRelation(
    parent_model=Book,
    child_model=Author,
    collection="authors",
    inverse="books",
    table=book_author,
    parent_key="book_id",
    child_key="author_id",
    load_children=crud_author.get_authors_by_ids,
)


def validate_isbn(isbn: Optional[str]) -> None:
    """
    Comprueba que el ISBN no sea None ni una cadena vacía.

    Raises:
        ValidationError: Si el ISBN es inválido.
    """
    if isbn is None or isbn == "":
        raise ValidationError("El ISBN es inválido")


def _to_entity(data: BookCreate, book_id: Optional[int] = None) -> Book:
    return Book(
        id=book_id,
        name=data.name,
        isbn=data.isbn,
        image=data.image,
        description=data.description,
        publish_date=data.publish_date,
        editorial_id=data.editorial.id if data.editorial else None,
    )


def get_books(db: Session) -> List[Book]:
    logger.info("Inicia proceso de consultar todos los libros")
    books = crud_book.get_books(db)
    logger.info("Termina proceso de consultar todos los libros")
    return books


def get_book(db: Session, book_id: int) -> Optional[Book]:
    """
    Busca un libro por ID.

    Args:
        db (Session): Unidad de trabajo de la petición.
        book_id (int): ID del libro.

    Returns:
        Optional[Book]: El libro, o None si no existe.
    """
    logger.info(f"Inicia proceso de consultar libro con id={book_id}")
    book = crud_book.get_book_by_id(db, book_id)
    if book is None:
        logger.warning(f"El libro con el id {book_id} no existe")
    logger.info(f"Termina proceso de consultar libro con id={book_id}")
    return book


def create_book(db: Session, data: BookCreate) -> Book:
    """
    Crea un libro nuevo.

    Args:
        db (Session): Unidad de trabajo de la petición.
        data (BookCreate): Datos del libro.

    Returns:
        Book: El libro persistido, con el ID generado.

    Raises:
        ValidationError: Si el ISBN es None o vacío. No se persiste nada.
    """
    logger.info("Inicia proceso de creación de libro")
    validate_isbn(data.isbn)
    book = crud_book.create_book(db, _to_entity(data))
    logger.info("Termina proceso de creación de libro")
    return book


def update_book(db: Session, book_id: int, data: BookUpdate) -> Book:
    """
    Reemplaza todos los campos escalares del libro y su editorial.
    Los autores y las reseñas no se tocan.

    Raises:
        ValidationError: Si el ISBN es None o vacío.
    """
    logger.info(f"Inicia proceso de actualizar libro con id={book_id}")
    validate_isbn(data.isbn)
    book = crud_book.update_book(db, _to_entity(data, book_id=book_id))
    logger.info(f"Termina proceso de actualizar libro con id={book.id}")
    return book


def delete_book(db: Session, book_id: int) -> None:
    """Borra el libro y sus reseñas. No comprueba antes que exista."""
    logger.info(f"Inicia proceso de borrar libro con id={book_id}")
    crud_book.delete_book(db, book_id)
    logger.info(f"Termina proceso de borrar libro con id={book_id}")


def list_authors(db: Session, book_id: int) -> List[Author]:
    logger.info(f"Inicia proceso de consultar todos los autores del libro con id = {book_id}")
    return book_authors.list_children(db, book_id)


def get_author(db: Session, book_id: int, author_id: int) -> Optional[Author]:
    logger.info(f"Inicia proceso de consultar un autor del libro con id = {book_id}")
    return book_authors.get_child(db, book_id, author_id)


def add_author(db: Session, book_id: int, author_id: int) -> Optional[Author]:
    """
    Asocia un autor al libro por su ID y devuelve el autor asociado.
    El autor no se valida antes de asociarlo; si no existe, el resultado es None.
    """
    logger.info(f"Inicia proceso de asociar un autor al libro con id = {book_id}")
    return book_authors.add_child(db, book_id, author_id)


def replace_authors(db: Session, book_id: int, author_ids: List[int]) -> List[Author]:
    logger.info(f"Inicia proceso de reemplazar los autores del libro con id = {book_id}")
    return book_authors.replace_children(db, book_id, author_ids)


def remove_author(db: Session, book_id: int, author_id: int) -> None:
    logger.info(f"Inicia proceso de borrar un autor del libro con id = {book_id}")
    book_authors.remove_child(db, book_id, author_id)
