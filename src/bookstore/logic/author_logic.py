"""
Lógica de negocio de Author y del lado Author -> Book de la relación muchos a muchos.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..crud import crud_author, crud_book
from ..models.author import Author
from ..models.book import Book, book_author
from ..schemas.author import AuthorCreate, AuthorUpdate
from .relationships import ManyToManyRelation

logger = logging.getLogger(__name__)

author_books = ManyToManyRelation(
    parent_model=Author,
    child_model=Book,
    collection="books",
    inverse="authors",
    table=book_author,
    parent_key="author_id",
    child_key="book_id",
    load_children=crud_book.get_books_by_ids,
)


def get_authors(db: Session) -> List[Author]:
    logger.info("Inicia proceso de consultar todos los autores")
    return crud_author.get_authors(db)


def get_author(db: Session, author_id: int) -> Optional[Author]:
    logger.info(f"Inicia proceso de consultar autor con id={author_id}")
    author = crud_author.get_author_by_id(db, author_id)
    if author is None:
        logger.warning(f"El autor con el id {author_id} no existe")
    return author


def create_author(db: Session, data: AuthorCreate) -> Author:
    logger.info("Inicia proceso de creación de autor")
    author = crud_author.create_author(db, Author(**data.model_dump()))
    logger.info(f"Termina proceso de creación de autor con id={author.id}")
    return author


def update_author(db: Session, author_id: int, data: AuthorUpdate) -> Author:
    """
    Reemplaza los campos escalares del autor conservando sus libros.

    Args:
        db (Session): Unidad de trabajo de la petición.
        author_id (int): ID del autor.
        data (AuthorUpdate): Nuevos valores.

    Returns:
        Author: El autor actualizado.
    """
    logger.info(f"Inicia proceso de actualizar autor con id={author_id}")
    author = crud_author.update_author(db, Author(id=author_id, **data.model_dump()))
    logger.info(f"Termina proceso de actualizar autor con id={author_id}")
    return author


def delete_author(db: Session, author_id: int) -> None:
    logger.info(f"Inicia proceso de borrar autor con id={author_id}")
    crud_author.delete_author(db, author_id)
    logger.info(f"Termina proceso de borrar autor con id={author_id}")


def list_books(db: Session, author_id: int) -> List[Book]:
    logger.info(f"Inicia proceso de consultar todos los libros del autor con id = {author_id}")
    return author_books.list_children(db, author_id)


def get_book(db: Session, author_id: int, book_id: int) -> Optional[Book]:
    logger.info(f"Inicia proceso de consultar un libro del autor con id = {author_id}")
    return author_books.get_child(db, author_id, book_id)


def add_book(db: Session, author_id: int, book_id: int) -> Optional[Book]:
    logger.info(f"Inicia proceso de asociar un libro al autor con id = {author_id}")
    return author_books.add_child(db, author_id, book_id)


def replace_books(db: Session, author_id: int, book_ids: List[int]) -> List[Book]:
    logger.info(f"Inicia proceso de reemplazar los libros del autor con id = {author_id}")
    return author_books.replace_children(db, author_id, book_ids)


def remove_book(db: Session, author_id: int, book_id: int) -> None:
    logger.info(f"Inicia proceso de borrar un libro del autor con id = {author_id}")
    author_books.remove_child(db, author_id, book_id)
