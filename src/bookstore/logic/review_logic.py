import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.errors import EntityNotFoundError
from ..crud import crud_book, crud_review
from ..models.review import Review
from ..schemas.review import ReviewCreate, ReviewUpdate

logger = logging.getLogger(__name__)


def _require_book(db: Session, book_id: int) -> None:
    if crud_book.get_book_by_id(db, book_id) is None:
        logger.warning(f"El libro con el id {book_id} no existe")
        raise EntityNotFoundError("Book", book_id)


def get_reviews(db: Session, book_id: int) -> List[Review]:
    """Reseñas de un libro. Lanza EntityNotFoundError si el libro no existe."""
    logger.info(f"Inicia proceso de consultar las reseñas del libro con id = {book_id}")
    _require_book(db, book_id)
    return crud_review.get_reviews_for_book(db, book_id)


def get_review(db: Session, book_id: int, review_id: int) -> Optional[Review]:
    """
    Busca la reseña dentro del libro indicado.
    Devuelve None si no existe o si pertenece a otro libro.
    """
    logger.info(f"Inicia proceso de consultar la reseña {review_id} del libro con id = {book_id}")
    review = crud_review.get_review_for_book(db, book_id, review_id)
    if review is None:
        logger.warning(f"La reseña {review_id} no existe en el libro {book_id}")
    return review


def create_review(db: Session, book_id: int, data: ReviewCreate) -> Review:
    """
    Crea una reseña asociada al libro `book_id`.

    Raises:
        EntityNotFoundError: Si el libro no existe.
    """
    logger.info(f"Inicia proceso de crear una reseña para el libro con id = {book_id}")
    _require_book(db, book_id)
    review = crud_review.create_review(db, Review(**data.model_dump(), book_id=book_id))
    logger.info(f"Termina proceso de crear la reseña {review.id} del libro con id = {book_id}")
    return review


def update_review(db: Session, book_id: int, review_id: int, data: ReviewUpdate) -> Optional[Review]:
    """
    Reemplaza nombre, fuente y descripción de la reseña.
    El libro de la reseña se fija al crearla y no cambia aquí. Devuelve None, sin
    tocar nada, si la reseña no pertenece a `book_id`.
    """
    logger.info(f"Inicia proceso de actualizar la reseña {review_id} del libro con id = {book_id}")
    if get_review(db, book_id, review_id) is None:
        return None
    review = crud_review.update_review(db, Review(id=review_id, **data.model_dump()))
    logger.info(f"Termina proceso de actualizar la reseña {review_id}")
    return review


def delete_review(db: Session, book_id: int, review_id: int) -> None:
    """Borra la reseña solo si pertenece a `book_id`; si no, no hace nada."""
    logger.info(f"Inicia proceso de borrar la reseña {review_id} del libro con id = {book_id}")
    if get_review(db, book_id, review_id) is None:
        return
    crud_review.delete_review(db, review_id)
    logger.info(f"Termina proceso de borrar la reseña {review_id}")
