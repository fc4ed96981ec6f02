import logging
from typing import List, Optional

from catalog.book import Book
from catalog.store import BookStore
from utils.validators import BookValidator

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when book data is rejected before reaching the store."""


class CatalogService:
    """Validates requests and forwards them to a :class:`BookStore`.

    The service keeps no state besides the store it was given.
    """

    def __init__(self, store: BookStore) -> None:
        self.store = store

    def list_books(self) -> List[Book]:
        books = self.store.list_all()
        if not books:
            logger.info("No books found.")
        return books

    def get_book(self, book_id: int) -> Optional[Book]:
        return self.store.get_by_id(book_id)

    def add_book(self, title: str, author: str, genre: str, year: int) -> Book:
        """Validate and add a new book, returning it with its assigned id."""
        self._validate(title, author, year, action="add")
        book = Book(title=title, author=author, genre=genre, year=year)
        return self.store.add(book)

    def update_book(self, book_id: int, title: str, author: str, genre: str, year: int) -> Optional[Book]:
        """Validate and update the book with ``book_id``.

        Returns the updated book, or None when the id is unknown.
        """
        self._validate(title, author, year, action="update")
        book = Book(id=book_id, title=title, author=author, genre=genre, year=year)
        return self.store.update(book)

    def delete_book(self, book_id: int) -> bool:
        return self.store.delete(book_id)

    def search_by_author(self, author: str) -> List[Book]:
        return self.store.search_by_author(author)

    def search_by_genre(self, genre: str) -> List[Book]:
        return self.store.search_by_genre(genre)

    @staticmethod
    def _validate(title: str, author: str, year: int, action: str) -> None:
        problems = BookValidator.errors(title, author, year)
        if problems:
            logger.warning(f"Attempt to {action} a book with invalid data: {'; '.join(problems)}")
            raise ValidationError("; ".join(problems))
