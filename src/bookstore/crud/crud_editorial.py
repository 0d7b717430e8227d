"""
Operaciones CRUD para el modelo Editorial en la base de datos.
"""

import logging
from sqlalchemy.orm import Session
from sqlalchemy import select
from typing import List, Optional

from ..models.editorial import Editorial

logger = logging.getLogger(__name__)

def get_editorials(db: Session) -> List[Editorial]:
    logger.info("Consultando todas las editoriales")
    return list(db.execute(select(Editorial).order_by(Editorial.id)).scalars().all())

def get_editorial_by_id(db: Session, editorial_id: int) -> Optional[Editorial]:
    logger.info(f"Consultando editorial con id={editorial_id}")
    return db.get(Editorial, editorial_id)

def create_editorial(db: Session, editorial: Editorial) -> Editorial:
    logger.info("Creando una editorial nueva")
    db.add(editorial)
    db.flush()
    db.refresh(editorial)
    logger.info(f"Editorial creada con id={editorial.id}")
    return editorial

def update_editorial(db: Session, editorial: Editorial) -> Editorial:
    logger.info(f"Actualizando editorial con id={editorial.id}")
    merged = db.merge(editorial)
    db.flush()
    db.refresh(merged)
    return merged

def delete_editorial(db: Session, editorial_id: int) -> bool:
    """
    Borra una editorial. Los libros que publicó quedan sin editorial.

    Returns:
        bool: True si se borró, False si no existía.
    """
    logger.info(f"Borrando editorial con id={editorial_id}")
    editorial = db.get(Editorial, editorial_id)
    if editorial is None:
        logger.warning(f"Se intentó borrar la editorial inexistente con id={editorial_id}")
        return False
    db.delete(editorial)
    db.flush()
    return True
