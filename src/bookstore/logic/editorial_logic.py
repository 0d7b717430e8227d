"""
Lógica de negocio de Editorial y de su relación uno a muchos con Book.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..crud import crud_book, crud_editorial
from ..models.book import Book
from ..models.editorial import Editorial
from ..schemas.editorial import EditorialCreate, EditorialUpdate
from .relationships import OneToManyRelation

logger = logging.getLogger(__name__)

editorial_books = OneToManyRelation(
    parent_model=Editorial,
    child_model=Book,
    collection="books",
    reference="editorial",
    load_children=crud_book.get_books_by_ids,
)


def get_editorials(db: Session) -> List[Editorial]:
    logger.info("Inicia proceso de consultar todas las editoriales")
    editorials = crud_editorial.get_editorials(db)
    logger.info("Termina proceso de consultar todas las editoriales")
    return editorials


def get_editorial(db: Session, editorial_id: int) -> Optional[Editorial]:
    logger.info(f"Inicia proceso de consultar editorial con id={editorial_id}")
    editorial = crud_editorial.get_editorial_by_id(db, editorial_id)
    if editorial is None:
        logger.warning(f"La editorial con el id {editorial_id} no existe")
    return editorial


def create_editorial(db: Session, data: EditorialCreate) -> Editorial:
    logger.info("Inicia proceso de creación de editorial")
    editorial = crud_editorial.create_editorial(db, Editorial(**data.model_dump()))
    logger.info(f"Termina proceso de creación de editorial con id={editorial.id}")
    return editorial


def update_editorial(db: Session, editorial_id: int, data: EditorialUpdate) -> Editorial:
    """Reemplaza el nombre de la editorial; sus libros no cambian."""
    logger.info(f"Inicia proceso de actualizar editorial con id={editorial_id}")
    editorial = crud_editorial.update_editorial(db, Editorial(id=editorial_id, **data.model_dump()))
    logger.info(f"Termina proceso de actualizar editorial con id={editorial_id}")
    return editorial


def delete_editorial(db: Session, editorial_id: int) -> None:
    logger.info(f"Inicia proceso de borrar editorial con id={editorial_id}")
    crud_editorial.delete_editorial(db, editorial_id)
    logger.info(f"Termina proceso de borrar editorial con id={editorial_id}")


def list_books(db: Session, editorial_id: int) -> List[Book]:
    """
    Libros publicados por la editorial.

    Raises:
        EntityNotFoundError: Si la editorial no existe.
    """
    logger.info(f"Inicia proceso de consultar los libros de la editorial con id = {editorial_id}")
    return editorial_books.list_children(db, editorial_id)


def get_book(db: Session, editorial_id: int, book_id: int) -> Optional[Book]:
    logger.info(f"Inicia proceso de consultar el libro {book_id} de la editorial con id = {editorial_id}")
    return editorial_books.get_child(db, editorial_id, book_id)


def add_book(db: Session, editorial_id: int, book_id: int) -> Book:
    """
    Asigna la editorial a un libro existente y devuelve el libro.

    Raises:
        EntityNotFoundError: Si la editorial o el libro no existen.
    """
    logger.info(f"Inicia proceso de asociar el libro {book_id} a la editorial con id = {editorial_id}")
    return editorial_books.add_child(db, editorial_id, book_id)


def replace_books(db: Session, editorial_id: int, book_ids: List[int]) -> List[Book]:
    logger.info(f"Inicia proceso de reemplazar los libros de la editorial con id = {editorial_id}")
    return editorial_books.replace_children(db, editorial_id, book_ids)


def remove_book(db: Session, editorial_id: int, book_id: int) -> None:
    logger.info(f"Inicia proceso de desasociar el libro {book_id} de la editorial con id = {editorial_id}")
    editorial_books.remove_child(db, editorial_id, book_id)
