"""
Recurso /books/{book_id}/reviews. Las reseñas siempre se resuelven dentro de su libro.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ...core.errors import NotFoundError
from ...db.session import get_db
from ...logic import review_logic
from ...schemas.review import ReviewCreate, ReviewSchema, ReviewUpdate

router = APIRouter(prefix="/books/{book_id}/reviews", tags=["reviews"])


def _not_found(book_id: int, review_id: int) -> NotFoundError:
    return NotFoundError(f"El recurso /books/{book_id}/reviews/{review_id} no existe.")


@router.get("", response_model=List[ReviewSchema])
def get_reviews(book_id: int, db: Session = Depends(get_db)) -> List[ReviewSchema]:
    return [ReviewSchema.model_validate(r) for r in review_logic.get_reviews(db, book_id)]


@router.post("", response_model=ReviewSchema, status_code=status.HTTP_201_CREATED)
def create_review(book_id: int, review: ReviewCreate, db: Session = Depends(get_db)) -> ReviewSchema:
    return ReviewSchema.model_validate(review_logic.create_review(db, book_id, review))


@router.get("/{review_id}", response_model=ReviewSchema)
def get_review(book_id: int, review_id: int, db: Session = Depends(get_db)) -> ReviewSchema:
    entity = review_logic.get_review(db, book_id, review_id)
    if entity is None:
        raise _not_found(book_id, review_id)
    return ReviewSchema.model_validate(entity)


@router.put("/{review_id}", response_model=ReviewSchema)
def update_review(
    book_id: int, review_id: int, review: ReviewUpdate, db: Session = Depends(get_db)
) -> ReviewSchema:
    if review_logic.get_review(db, book_id, review_id) is None:
        raise _not_found(book_id, review_id)
    return ReviewSchema.model_validate(review_logic.update_review(db, book_id, review_id, review))


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_review(book_id: int, review_id: int, db: Session = Depends(get_db)) -> Response:
    if review_logic.get_review(db, book_id, review_id) is None:
        raise _not_found(book_id, review_id)
    review_logic.delete_review(db, book_id, review_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
