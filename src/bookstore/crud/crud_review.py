from sqlalchemy.orm import Session
from sqlalchemy import select
import logging

from ..models.review import Review

logger = logging.getLogger(__name__)


def create_review(db: Session, review: Review) -> Review:
    """Persiste una reseña nueva. `review.book_id` debe venir ya fijado."""
    logger.info(f"Creando una reseña nueva para el libro {review.book_id}")
    db.add(review)
    db.flush()
    db.refresh(review)
    logger.info(f"Reseña {review.id} creada para el libro {review.book_id}.")
    return review


def get_review_by_id(db: Session, review_id: int) -> Review | None:
    """Obtiene una reseña por su ID, sin tener en cuenta el libro."""
    return db.get(Review, review_id)


def get_reviews_for_book(db: Session, book_id: int) -> list[Review]:
    """Obtiene todas las reseñas de un libro, ordenadas por ID."""
    return list(
        db.execute(
            select(Review).where(Review.book_id == book_id).order_by(Review.id)
        ).scalars().all()
    )


def get_review_for_book(db: Session, book_id: int, review_id: int) -> Review | None:
    """
    Busca una reseña por libro e ID a la vez.
    Devuelve la primera coincidencia o None si la reseña no pertenece a ese libro.
    """
    stmt = select(Review).where(Review.book_id == book_id, Review.id == review_id)
    return db.execute(stmt).scalars().first()


def update_review(db: Session, review: Review) -> Review:
    logger.info(f"Actualizando reseña con id={review.id}")
    merged = db.merge(review)
    db.flush()
    db.refresh(merged)
    return merged


def delete_review(db: Session, review_id: int) -> bool:
    """
    Borra una reseña por su ID.
    Returns True if deleted, False if not found.
    """
    db_review = get_review_by_id(db, review_id)

    if not db_review:
        logger.warning(f"Attempted to delete non-existent review ID: {review_id}")
        return False

    db.delete(db_review)
    db.flush()
    logger.info(f"Reseña {review_id} borrada del libro {db_review.book_id}.")
    return True
