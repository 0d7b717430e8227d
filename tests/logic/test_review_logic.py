# tests/logic/test_review_logic.py
import pytest

from bookstore.core.errors import EntityNotFoundError
from bookstore.logic import book_logic, review_logic
from bookstore.schemas.book import BookCreate
from bookstore.schemas.review import ReviewCreate, ReviewUpdate

@pytest.fixture
def book(db_session):
    return book_logic.create_book(db_session, BookCreate(name="Cien años de soledad", isbn="0307474720"))

@pytest.fixture
def other_book(db_session):
    return book_logic.create_book(db_session, BookCreate(name="Rayuela", isbn="9788437604572"))

def test_create_review_belongs_to_book(db_session, book):
    review = review_logic.create_review(db_session, book.id, ReviewCreate(name="R1", source="NYT"))

    assert review.id is not None
    assert review.book.id == book.id
    assert review.name == "R1"
    assert review.source == "NYT"

def test_create_review_for_missing_book(db_session):
    with pytest.raises(EntityNotFoundError) as exc_info:
        review_logic.create_review(db_session, 99, ReviewCreate(name="R1"))

    assert exc_info.value.http_status == 404

def test_get_review_is_scoped_to_book(db_session, book, other_book):
    review = review_logic.create_review(db_session, book.id, ReviewCreate(name="R1", source="NYT"))

    assert review_logic.get_review(db_session, book.id, review.id).id == review.id
    assert review_logic.get_review(db_session, other_book.id, review.id) is None
    assert review_logic.get_review(db_session, 99, review.id) is None

def test_get_reviews(db_session, book, other_book):
    first = review_logic.create_review(db_session, book.id, ReviewCreate(name="R1"))
    second = review_logic.create_review(db_session, book.id, ReviewCreate(name="R2"))
    review_logic.create_review(db_session, other_book.id, ReviewCreate(name="R3"))

    assert [r.id for r in review_logic.get_reviews(db_session, book.id)] == [first.id, second.id]

def test_get_reviews_for_missing_book(db_session):
    with pytest.raises(EntityNotFoundError):
        review_logic.get_reviews(db_session, 99)

def test_update_review_keeps_book(db_session, book):
    review = review_logic.create_review(db_session, book.id, ReviewCreate(name="R1", source="NYT"))

    updated = review_logic.update_review(
        db_session, book.id, review.id, ReviewUpdate(name="R1 bis", source="WSJ", description="Otra opinión")
    )

    assert updated.id == review.id
    assert updated.name == "R1 bis"
    assert updated.source == "WSJ"
    assert updated.description == "Otra opinión"
    assert updated.book_id == book.id

def test_delete_review(db_session, book):
    review = review_logic.create_review(db_session, book.id, ReviewCreate(name="R1"))

    review_logic.delete_review(db_session, book.id, review.id)

    assert review_logic.get_review(db_session, book.id, review.id) is None
    assert review_logic.get_reviews(db_session, book.id) == []

def test_deleting_book_deletes_its_reviews(db_session, book):
    review = review_logic.create_review(db_session, book.id, ReviewCreate(name="R1"))

    book_logic.delete_book(db_session, book.id)

    assert review_logic.get_review(db_session, book.id, review.id) is None

def test_update_review_through_other_book_changes_nothing(db_session, book, other_book):
    review = review_logic.create_review(db_session, other_book.id, ReviewCreate(name="R", source="NYT"))

    result = review_logic.update_review(db_session, book.id, review.id, ReviewUpdate(name="Cambiada"))

    assert result is None
    stored = review_logic.get_review(db_session, other_book.id, review.id)
    assert stored.name == "R"
    assert stored.source == "NYT"

def test_delete_review_through_other_book_is_noop(db_session, book, other_book):
    review = review_logic.create_review(db_session, other_book.id, ReviewCreate(name="R"))

    review_logic.delete_review(db_session, book.id, review.id)

    assert review_logic.get_review(db_session, other_book.id, review.id) is not None
