from . import author_logic, book_logic, editorial_logic, review_logic

__all__ = [
    "author_logic",
    "book_logic",
    "editorial_logic",
    "review_logic",
]
