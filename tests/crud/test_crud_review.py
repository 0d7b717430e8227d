# tests/crud/test_crud_review.py
import pytest
from sqlalchemy.exc import IntegrityError

from bookstore.crud import (
    create_review,
    get_review_by_id,
    get_reviews_for_book,
    get_review_for_book,
    update_review,
    delete_review,
)
from bookstore.models.book import Book
from bookstore.models.review import Review

# --- Helper Fixtures ---
@pytest.fixture
def crud_test_book(db_session):
    book = Book(name="CRUD Review Test Book", isbn="5556667778889")
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book

@pytest.fixture
def crud_test_book_2(db_session):
    book = Book(name="Another Book", isbn="9998887776665")
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book
# --------------------------------------------------------------------------------

def test_create_review_crud(db_session, crud_test_book):
    created_review = create_review(
        db=db_session,
        review=Review(name="R1", source="NYT", description="Excellent book!", book_id=crud_test_book.id),
    )

    assert created_review.id is not None
    assert created_review.book_id == crud_test_book.id
    assert created_review.book.id == crud_test_book.id

    db_review = db_session.get(Review, created_review.id)
    assert db_review is not None
    assert db_review.description == "Excellent book!"

def test_create_review_without_book_fails(db_session):
    with pytest.raises(IntegrityError):
        try:
            create_review(db=db_session, review=Review(name="Huérfana"))
        finally:
            db_session.rollback()

def test_get_reviews_for_book(db_session, crud_test_book, crud_test_book_2):
    review1 = create_review(db_session, Review(name="R1", book_id=crud_test_book.id))
    review2 = create_review(db_session, Review(name="R2", book_id=crud_test_book.id))
    review3 = create_review(db_session, Review(name="R3", book_id=crud_test_book_2.id))

    reviews = get_reviews_for_book(db=db_session, book_id=crud_test_book.id)

    assert [r.id for r in reviews] == [review1.id, review2.id]
    assert review3.id not in {r.id for r in reviews}

def test_get_review_for_book_is_scoped_to_parent(db_session, crud_test_book, crud_test_book_2):
    review = create_review(db_session, Review(name="R1", source="NYT", book_id=crud_test_book.id))

    found = get_review_for_book(db_session, book_id=crud_test_book.id, review_id=review.id)
    assert found is not None
    assert found.id == review.id

    # Same review id, wrong parent.
    assert get_review_for_book(db_session, book_id=crud_test_book_2.id, review_id=review.id) is None
    assert get_review_for_book(db_session, book_id=99, review_id=review.id) is None
    # The unscoped lookup still finds it.
    assert get_review_by_id(db_session, review.id) is not None

def test_get_review_by_id_not_found(db_session):
    assert get_review_by_id(db_session, review_id=99999) is None

def test_update_review_keeps_book(db_session, crud_test_book):
    review = create_review(db_session, Review(name="R1", source="NYT", book_id=crud_test_book.id))

    updated = update_review(db_session, Review(id=review.id, name="R1 bis", source="WSJ", description=None))

    assert updated.id == review.id
    assert updated.name == "R1 bis"
    assert updated.source == "WSJ"
    assert updated.book_id == crud_test_book.id

def test_delete_review(db_session, crud_test_book):
    review = create_review(db_session, Review(name="R1", book_id=crud_test_book.id))

    assert delete_review(db_session, review.id) is True
    assert get_review_by_id(db_session, review.id) is None

def test_delete_review_not_found(db_session):
    assert delete_review(db_session, 12345) is False
