# tests/models/test_author_model.py
import pytest
from sqlalchemy.exc import IntegrityError

from bookstore.models.author import Author
from bookstore.models.book import Book, book_author

def test_author_books_relationship(db_session):
    author = Author(name="Jorge Luis Borges")
    book = Book(name="Ficciones", isbn="9788420633121", authors=[author])
    db_session.add(book)
    db_session.commit()

    assert author.books == [book]
    assert repr(author) == f"<Author(id={author.id}, name='Jorge Luis Borges')>"

def test_association_rejects_duplicate_membership(db_session):
    author = Author(name="Borges")
    book = Book(name="El Aleph", isbn="9788420633138", authors=[author])
    db_session.add(book)
    db_session.commit()

    with pytest.raises(IntegrityError):
        db_session.execute(book_author.insert().values(book_id=book.id, author_id=author.id))
    db_session.rollback()
