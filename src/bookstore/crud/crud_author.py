"""
Operaciones CRUD para el modelo Author en la base de datos.
"""

import logging
from sqlalchemy.orm import Session
from sqlalchemy import select
from typing import List, Optional

from ..models.author import Author

logger = logging.getLogger(__name__)

def get_authors(db: Session) -> List[Author]:
    """
    Devuelve todos los autores ordenados por ID.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.

    Returns:
        List[Author]: Lista de autores.
    """
    logger.info("Consultando todos los autores")
    return list(db.execute(select(Author).order_by(Author.id)).scalars().all())

def get_author_by_id(db: Session, author_id: int) -> Optional[Author]:
    """
    Recupera un autor por su ID.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        author_id (int): ID del autor.

    Returns:
        Optional[Author]: El autor si existe, None si no.
    """
    logger.info(f"Consultando autor con id={author_id}")
    return db.get(Author, author_id)

def get_authors_by_ids(db: Session, author_ids: List[int]) -> List[Author]:
    """Recupera los autores cuyos IDs están en `author_ids`, ordenados por ID."""
    if not author_ids:
        return []
    stmt = select(Author).where(Author.id.in_(author_ids)).order_by(Author.id)
    return list(db.execute(stmt).scalars().all())

def create_author(db: Session, author: Author) -> Author:
    logger.info("Creando un autor nuevo")
    db.add(author)
    db.flush()
    db.refresh(author)
    logger.info(f"Autor creado con id={author.id}")
    return author

def update_author(db: Session, author: Author) -> Author:
    """
    Actualiza un autor con semántica de merge.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        author (Author): Autor con el ID a actualizar y los nuevos valores.

    Returns:
        Author: La instancia persistente actualizada.
    """
    logger.info(f"Actualizando autor con id={author.id}")
    merged = db.merge(author)
    db.flush()
    db.refresh(merged)
    return merged

def delete_author(db: Session, author_id: int) -> bool:
    """
    Borra un autor. Sus asociaciones con libros desaparecen; los libros no.

    Returns:
        bool: True si se borró, False si no existía.
    """
    logger.info(f"Borrando autor con id={author_id}")
    author = db.get(Author, author_id)
    if author is None:
        logger.warning(f"Se intentó borrar el autor inexistente con id={author_id}")
        return False
    db.delete(author)
    db.flush()
    return True
