"""
Operaciones CRUD para el modelo Book en la base de datos.
Incluye funciones para obtener libros por ID o ISBN, listarlos, crearlos,
actualizarlos y borrarlos. Ninguna función confirma la transacción: eso lo hace
la unidad de trabajo de quien llama.
"""

import logging
from sqlalchemy.orm import Session
from sqlalchemy import select
from typing import List, Optional

from ..models.book import Book

logger = logging.getLogger(__name__)

def get_books(db: Session) -> List[Book]:
    """
    Devuelve todos los libros de la base de datos ordenados por ID.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.

    Returns:
        List[Book]: Lista con todos los libros.
    """
    logger.info("Consultando todos los libros")
    stmt = select(Book).order_by(Book.id)
    return list(db.execute(stmt).scalars().all())

def get_book_by_id(db: Session, book_id: int) -> Optional[Book]:
    """
    Recupera un libro por su ID primario.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        book_id (int): ID del libro a recuperar.

    Returns:
        Optional[Book]: El objeto Book si se encuentra, None si no existe.
    """
    logger.info(f"Consultando libro con id={book_id}")
    return db.get(Book, book_id)

def create_book(db: Session, book: Book) -> Book:
    """
    Persiste un libro nuevo. La base de datos asigna el ID.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        book (Book): Libro a crear.

    Returns:
        Book: El libro persistido, con su ID.
    """
    logger.info("Creando un libro nuevo")
    db.add(book)
    db.flush()
    db.refresh(book)
    logger.info(f"Libro creado con id={book.id}")
    return book

def update_book(db: Session, book: Book) -> Book:
    """
    Actualiza un libro con semántica de merge: los atributos presentes en `book`
    sobrescriben los almacenados.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        book (Book): Libro con el ID a actualizar y los nuevos valores.

    Returns:
        Book: La instancia persistente tras aplicar los cambios.
    """
    logger.info(f"Actualizando libro con id={book.id}")
    merged = db.merge(book)
    db.flush()
    db.refresh(merged)
    return merged

def delete_book(db: Session, book_id: int) -> bool:
    """
    Borra un libro y, en cascada, sus reseñas.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        book_id (int): ID del libro a borrar.

    Returns:
        bool: True si se borró, False si no existía.
    """
    logger.info(f"Borrando libro con id={book_id}")
    book = db.get(Book, book_id)
    if book is None:
        logger.warning(f"Se intentó borrar el libro inexistente con id={book_id}")
        return False
    db.delete(book)
    db.flush()
    return True

def get_books_by_ids(db: Session, book_ids: List[int]) -> List[Book]:
    """Recupera los libros cuyos IDs están en `book_ids`, ordenados por ID."""
    if not book_ids:
        return []
    stmt = select(Book).where(Book.id.in_(book_ids)).order_by(Book.id)
    return list(db.execute(stmt).scalars().all())
