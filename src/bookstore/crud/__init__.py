from .crud_book import (
    get_books,
    get_book_by_id,
    get_books_by_ids,
    create_book,
    update_book,
    delete_book,
)
from .crud_author import (
    get_authors,
    get_author_by_id,
    get_authors_by_ids,
    create_author,
    update_author,
    delete_author,
)
from .crud_editorial import (
    get_editorials,
    get_editorial_by_id,
    create_editorial,
    update_editorial,
    delete_editorial,
)
from .crud_review import (
    create_review,
    get_review_by_id,
    get_reviews_for_book,
    get_review_for_book,
    update_review,
    delete_review,
)

__all__ = [
    "get_books",
    "get_book_by_id",
    "get_books_by_ids",
    "create_book",
    "update_book",
    "delete_book",
    "get_authors",
    "get_author_by_id",
    "get_authors_by_ids",
    "create_author",
    "update_author",
    "delete_author",
    "get_editorials",
    "get_editorial_by_id",
    "create_editorial",
    "update_editorial",
    "delete_editorial",
    "create_review",
    "get_review_by_id",
    "get_reviews_for_book",
    "get_review_for_book",
    "update_review",
    "delete_review",
]
