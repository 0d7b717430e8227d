"""
Recursos /books y /books/{book_id}/authors.

Endpoints:
- GET    /books                              : lista todos los libros
- POST   /books                              : crea un libro
- GET    /books/{book_id}                    : consulta un libro
- PUT    /books/{book_id}                    : reemplaza un libro
- DELETE /books/{book_id}                    : borra un libro y sus reseñas
- GET    /books/{book_id}/authors            : autores del libro
- PUT    /books/{book_id}/authors            : reemplaza los autores del libro
- GET    /books/{book_id}/authors/{author_id}: un autor del libro
- POST   /books/{book_id}/authors/{author_id}: asocia un autor
- DELETE /books/{book_id}/authors/{author_id}: desasocia un autor
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ...core.errors import NotFoundError
from ...db.session import get_db
from ...logic import book_logic
from ...schemas.author import AuthorDetail
from ...schemas.book import BookCreate, BookUpdate
from ...schemas.book_detail import BookDetail
from ...schemas.reference import EntityRef

router = APIRouter(prefix="/books", tags=["books"])


def _not_found(path: str) -> NotFoundError:
    return NotFoundError(f"El recurso {path} no existe.")


@router.get("", response_model=List[BookDetail])
def get_books(db: Session = Depends(get_db)) -> List[BookDetail]:
    return [BookDetail.model_validate(book) for book in book_logic.get_books(db)]


@router.post("", response_model=BookDetail, status_code=status.HTTP_201_CREATED)
def create_book(book: BookCreate, db: Session = Depends(get_db)) -> BookDetail:
    return BookDetail.model_validate(book_logic.create_book(db, book))


@router.get("/{book_id}", response_model=BookDetail)
def get_book(book_id: int, db: Session = Depends(get_db)) -> BookDetail:
    entity = book_logic.get_book(db, book_id)
    if entity is None:
        raise _not_found(f"/books/{book_id}")
    return BookDetail.model_validate(entity)


@router.put("/{book_id}", response_model=BookDetail)
def update_book(book_id: int, book: BookUpdate, db: Session = Depends(get_db)) -> BookDetail:
    if book_logic.get_book(db, book_id) is None:
        raise _not_found(f"/books/{book_id}")
    return BookDetail.model_validate(book_logic.update_book(db, book_id, book))


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, db: Session = Depends(get_db)) -> Response:
    if book_logic.get_book(db, book_id) is None:
        raise _not_found(f"/books/{book_id}")
    book_logic.delete_book(db, book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{book_id}/authors", response_model=List[AuthorDetail])
def list_authors(book_id: int, db: Session = Depends(get_db)) -> List[AuthorDetail]:
    return [AuthorDetail.model_validate(a) for a in book_logic.list_authors(db, book_id)]


@router.put("/{book_id}/authors", response_model=List[AuthorDetail])
def replace_authors(
    book_id: int, authors: List[EntityRef], db: Session = Depends(get_db)
) -> List[AuthorDetail]:
    replaced = book_logic.replace_authors(db, book_id, [a.id for a in authors])
    return [AuthorDetail.model_validate(a) for a in replaced]


@router.get("/{book_id}/authors/{author_id}", response_model=AuthorDetail)
def get_author(book_id: int, author_id: int, db: Session = Depends(get_db)) -> AuthorDetail:
    author = book_logic.get_author(db, book_id, author_id)
    if author is None:
        raise _not_found(f"/books/{book_id}/authors/{author_id}")
    return AuthorDetail.model_validate(author)


@router.post("/{book_id}/authors/{author_id}", response_model=AuthorDetail)
def add_author(book_id: int, author_id: int, db: Session = Depends(get_db)) -> AuthorDetail:
    author = book_logic.add_author(db, book_id, author_id)
    if author is None:
        # La asociación apunta a un autor inexistente; la transacción se revierte.
        raise _not_found(f"/authors/{author_id}")
    return AuthorDetail.model_validate(author)


@router.delete("/{book_id}/authors/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_author(book_id: int, author_id: int, db: Session = Depends(get_db)) -> Response:
    book_logic.remove_author(db, book_id, author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
