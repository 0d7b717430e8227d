"""
Recursos /editorials y /editorials/{editorial_id}/books.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ...core.errors import NotFoundError
from ...db.session import get_db
from ...logic import editorial_logic
from ...schemas.book_detail import BookDetail
from ...schemas.editorial import EditorialCreate, EditorialDetail, EditorialUpdate
from ...schemas.reference import EntityRef

router = APIRouter(prefix="/editorials", tags=["editorials"])


def _not_found(editorial_id: int) -> NotFoundError:
    return NotFoundError(f"El recurso /editorials/{editorial_id} no existe.")


@router.get("", response_model=List[EditorialDetail])
def get_editorials(db: Session = Depends(get_db)) -> List[EditorialDetail]:
    return [EditorialDetail.model_validate(e) for e in editorial_logic.get_editorials(db)]


@router.post("", response_model=EditorialDetail, status_code=status.HTTP_201_CREATED)
def create_editorial(editorial: EditorialCreate, db: Session = Depends(get_db)) -> EditorialDetail:
    return EditorialDetail.model_validate(editorial_logic.create_editorial(db, editorial))


@router.get("/{editorial_id}", response_model=EditorialDetail)
def get_editorial(editorial_id: int, db: Session = Depends(get_db)) -> EditorialDetail:
    entity = editorial_logic.get_editorial(db, editorial_id)
    if entity is None:
        raise _not_found(editorial_id)
    return EditorialDetail.model_validate(entity)


@router.put("/{editorial_id}", response_model=EditorialDetail)
def update_editorial(
    editorial_id: int, editorial: EditorialUpdate, db: Session = Depends(get_db)
) -> EditorialDetail:
    if editorial_logic.get_editorial(db, editorial_id) is None:
        raise _not_found(editorial_id)
    return EditorialDetail.model_validate(editorial_logic.update_editorial(db, editorial_id, editorial))


@router.delete("/{editorial_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_editorial(editorial_id: int, db: Session = Depends(get_db)) -> Response:
    if editorial_logic.get_editorial(db, editorial_id) is None:
        raise _not_found(editorial_id)
    editorial_logic.delete_editorial(db, editorial_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{editorial_id}/books", response_model=List[BookDetail])
def list_books(editorial_id: int, db: Session = Depends(get_db)) -> List[BookDetail]:
    return [BookDetail.model_validate(b) for b in editorial_logic.list_books(db, editorial_id)]


@router.put("/{editorial_id}/books", response_model=List[BookDetail])
def replace_books(
    editorial_id: int, books: List[EntityRef], db: Session = Depends(get_db)
) -> List[BookDetail]:
    replaced = editorial_logic.replace_books(db, editorial_id, [b.id for b in books])
    return [BookDetail.model_validate(b) for b in replaced]


@router.get("/{editorial_id}/books/{book_id}", response_model=BookDetail)
def get_book(editorial_id: int, book_id: int, db: Session = Depends(get_db)) -> BookDetail:
    book = editorial_logic.get_book(db, editorial_id, book_id)
    if book is None:
        raise NotFoundError(f"El recurso /editorials/{editorial_id}/books/{book_id} no existe.")
    return BookDetail.model_validate(book)


@router.post("/{editorial_id}/books/{book_id}", response_model=BookDetail)
def add_book(editorial_id: int, book_id: int, db: Session = Depends(get_db)) -> BookDetail:
    return BookDetail.model_validate(editorial_logic.add_book(db, editorial_id, book_id))


@router.delete("/{editorial_id}/books/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_book(editorial_id: int, book_id: int, db: Session = Depends(get_db)) -> Response:
    editorial_logic.remove_book(db, editorial_id, book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
