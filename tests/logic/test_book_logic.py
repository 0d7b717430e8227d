# tests/logic/test_book_logic.py
import datetime

import pytest

from bookstore.core.errors import ValidationError
from bookstore.logic import book_logic, editorial_logic
from bookstore.models.book import Book
from bookstore.schemas.book import BookCreate, BookUpdate
from bookstore.schemas.editorial import EditorialCreate
from bookstore.schemas.reference import EntityRef

def test_create_book_preserves_fields(db_session):
    data = BookCreate(
        name="Cien años de soledad",
        isbn="0307474720",
        image="http://img/cien.jpg",
        description="Macondo",
        publish_date=datetime.date(1967, 5, 30),
    )

    book = book_logic.create_book(db_session, data)

    assert book.id is not None
    assert book.name == data.name
    assert book.isbn == data.isbn
    assert book.image == data.image
    assert book.description == data.description
    assert book.publish_date == data.publish_date

@pytest.mark.parametrize("isbn", [None, ""])
def test_create_book_invalid_isbn(db_session, isbn):
    with pytest.raises(ValidationError):
        book_logic.create_book(db_session, BookCreate(name="Sin ISBN", isbn=isbn))

    assert db_session.query(Book).count() == 0

def test_create_book_with_editorial_reference(db_session):
    editorial = editorial_logic.create_editorial(db_session, EditorialCreate(name="Plaza y Janés"))

    book = book_logic.create_book(
        db_session, BookCreate(name="Cien años", isbn="0307474720", editorial=EntityRef(id=editorial.id))
    )

    assert book.editorial_id == editorial.id
    assert book.editorial.name == "Plaza y Janés"

def test_get_book_returns_none_when_missing(db_session):
    assert book_logic.get_book(db_session, 1) is None

def test_get_books(db_session):
    book_logic.create_book(db_session, BookCreate(name="A", isbn="1"))
    book_logic.create_book(db_session, BookCreate(name="B", isbn="2"))

    assert [b.name for b in book_logic.get_books(db_session)] == ["A", "B"]

def test_update_book_replaces_all_scalar_fields(db_session):
    book = book_logic.create_book(
        db_session, BookCreate(name="Original", isbn="111", description="desc", image="img")
    )

    updated = book_logic.update_book(db_session, book.id, BookUpdate(name="Nuevo", isbn="222"))

    assert updated.id == book.id
    assert updated.name == "Nuevo"
    assert updated.isbn == "222"
    # Full replace: omitted fields are cleared.
    assert updated.description is None
    assert updated.image is None

@pytest.mark.parametrize("isbn", [None, ""])
def test_update_book_invalid_isbn(db_session, isbn):
    book = book_logic.create_book(db_session, BookCreate(name="Original", isbn="111"))

    with pytest.raises(ValidationError):
        book_logic.update_book(db_session, book.id, BookUpdate(name="Nuevo", isbn=isbn))

    assert book_logic.get_book(db_session, book.id).isbn == "111"

def test_update_book_keeps_authors_and_reviews(db_session):
    from bookstore.logic import author_logic, review_logic
    from bookstore.schemas.author import AuthorCreate
    from bookstore.schemas.review import ReviewCreate

    book = book_logic.create_book(db_session, BookCreate(name="Original", isbn="111"))
    author = author_logic.create_author(db_session, AuthorCreate(name="GGM"))
    book_logic.add_author(db_session, book.id, author.id)
    review_logic.create_review(db_session, book.id, ReviewCreate(name="R1"))

    updated = book_logic.update_book(db_session, book.id, BookUpdate(name="Nuevo", isbn="222"))

    assert [a.id for a in updated.authors] == [author.id]
    assert len(updated.reviews) == 1

def test_delete_book(db_session):
    book = book_logic.create_book(db_session, BookCreate(name="Borrar", isbn="111"))

    book_logic.delete_book(db_session, book.id)

    assert book_logic.get_book(db_session, book.id) is None

def test_delete_missing_book_is_silent(db_session):
    book_logic.delete_book(db_session, 999)
