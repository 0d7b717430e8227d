# tests/crud/test_crud_author.py
import datetime

from bookstore.crud import (
    create_author,
    delete_author,
    get_author_by_id,
    get_authors,
    get_authors_by_ids,
    update_author,
)
from bookstore.models.author import Author
from bookstore.models.book import Book

def test_create_and_get_author(db_session):
    author = create_author(db_session, Author(name="Julio Cortázar", birth_date=datetime.date(1914, 8, 26)))

    assert author.id is not None
    assert get_author_by_id(db_session, author.id).name == "Julio Cortázar"
    assert [a.id for a in get_authors(db_session)] == [author.id]

def test_get_authors_by_ids(db_session):
    first = create_author(db_session, Author(name="A"))
    second = create_author(db_session, Author(name="B"))

    assert {a.id for a in get_authors_by_ids(db_session, [second.id, first.id, 999])} == {first.id, second.id}
    assert get_authors_by_ids(db_session, []) == []

def test_update_author_keeps_books(db_session):
    book = Book(name="Rayuela", isbn="9788437604572")
    author = create_author(db_session, Author(name="Cortázar", image="img", books=[book]))

    updated = update_author(db_session, Author(id=author.id, name="Julio Cortázar", birth_date=None, image=None))

    assert updated.name == "Julio Cortázar"
    assert updated.image is None
    assert [b.id for b in updated.books] == [book.id]

def test_delete_author(db_session):
    author = create_author(db_session, Author(name="Borrar"))

    assert delete_author(db_session, author.id) is True
    assert get_author_by_id(db_session, author.id) is None
    assert delete_author(db_session, author.id) is False
