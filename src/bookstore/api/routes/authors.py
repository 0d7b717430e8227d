"""
Recursos /authors y /authors/{author_id}/books.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ...core.errors import NotFoundError
from ...db.session import get_db
from ...logic import author_logic
from ...schemas.author import AuthorCreate, AuthorDetail, AuthorUpdate
from ...schemas.book_detail import BookDetail
from ...schemas.reference import EntityRef

router = APIRouter(prefix="/authors", tags=["authors"])

AUTHOR_NOT_FOUND = "El author no existe"


@router.get("", response_model=List[AuthorDetail])
def get_authors(db: Session = Depends(get_db)) -> List[AuthorDetail]:
    return [AuthorDetail.model_validate(a) for a in author_logic.get_authors(db)]


@router.post("", response_model=AuthorDetail, status_code=status.HTTP_201_CREATED)
def create_author(author: AuthorCreate, db: Session = Depends(get_db)) -> AuthorDetail:
    return AuthorDetail.model_validate(author_logic.create_author(db, author))


@router.get("/{author_id}", response_model=AuthorDetail)
def get_author(author_id: int, db: Session = Depends(get_db)) -> AuthorDetail:
    entity = author_logic.get_author(db, author_id)
    if entity is None:
        raise NotFoundError(AUTHOR_NOT_FOUND)
    return AuthorDetail.model_validate(entity)


@router.put("/{author_id}", response_model=AuthorDetail)
def update_author(author_id: int, author: AuthorUpdate, db: Session = Depends(get_db)) -> AuthorDetail:
    if author_logic.get_author(db, author_id) is None:
        raise NotFoundError(AUTHOR_NOT_FOUND)
    return AuthorDetail.model_validate(author_logic.update_author(db, author_id, author))


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_author(author_id: int, db: Session = Depends(get_db)) -> Response:
    if author_logic.get_author(db, author_id) is None:
        raise NotFoundError(AUTHOR_NOT_FOUND)
    author_logic.delete_author(db, author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{author_id}/books", response_model=List[BookDetail])
def list_books(author_id: int, db: Session = Depends(get_db)) -> List[BookDetail]:
    return [BookDetail.model_validate(b) for b in author_logic.list_books(db, author_id)]


@router.put("/{author_id}/books", response_model=List[BookDetail])
def replace_books(
    author_id: int, books: List[EntityRef], db: Session = Depends(get_db)
) -> List[BookDetail]:
    replaced = author_logic.replace_books(db, author_id, [b.id for b in books])
    return [BookDetail.model_validate(b) for b in replaced]


@router.get("/{author_id}/books/{book_id}", response_model=BookDetail)
def get_book(author_id: int, book_id: int, db: Session = Depends(get_db)) -> BookDetail:
    book = author_logic.get_book(db, author_id, book_id)
    if book is None:
        raise NotFoundError(f"El recurso /authors/{author_id}/books/{book_id} no existe.")
    return BookDetail.model_validate(book)


@router.post("/{author_id}/books/{book_id}", response_model=BookDetail)
def add_book(author_id: int, book_id: int, db: Session = Depends(get_db)) -> BookDetail:
    book = author_logic.add_book(db, author_id, book_id)
    if book is None:
        raise NotFoundError(f"El recurso /books/{book_id} no existe.")
    return BookDetail.model_validate(book)


@router.delete("/{author_id}/books/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_book(author_id: int, book_id: int, db: Session = Depends(get_db)) -> Response:
    author_logic.remove_book(db, author_id, book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
