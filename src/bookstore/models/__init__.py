from .book import Book, book_author
from .author import Author
from .editorial import Editorial
from .review import Review

__all__ = [
    "Book",
    "book_author",
    "Author",
    "Editorial",
    "Review",
]
