# tests/crud/test_crud_editorial.py
from bookstore.crud import (
    create_editorial,
    delete_editorial,
    get_editorial_by_id,
    get_editorials,
    update_editorial,
)
from bookstore.models.editorial import Editorial

def test_create_update_delete_editorial(db_session):
    editorial = create_editorial(db_session, Editorial(name="Alfaguara"))
    assert [e.id for e in get_editorials(db_session)] == [editorial.id]

    updated = update_editorial(db_session, Editorial(id=editorial.id, name="Alfaguara Ediciones"))
    assert updated.name == "Alfaguara Ediciones"

    assert delete_editorial(db_session, editorial.id) is True
    assert get_editorial_by_id(db_session, editorial.id) is None

def test_delete_missing_editorial(db_session):
    assert delete_editorial(db_session, 321) is False
