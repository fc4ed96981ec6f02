import logging
from typing import Iterable, List, Optional

from catalog.book import Book

logger = logging.getLogger(__name__)

SEED_BOOKS = (
    Book(id=1, title="1984", author="George Orwell", genre="Distopia", year=1949),
    Book(id=2, title="O Hobbit", author="J.R.R. Tolkien", genre="Fantasia", year=1937),
    Book(id=3, title="Dom Quixote", author="Miguel de Cervantes", genre="Clássico", year=1605),
)


class BookStore:
    """Owns the in-memory book collection and assigns record ids.

    Every read returns copies, so the records held here can only be
    changed through ``add``, ``update`` and ``delete``.
    """

    def __init__(self, books: Optional[Iterable[Book]] = None) -> None:
        source = SEED_BOOKS if books is None else books
        self._books: List[Book] = [book.copy() for book in source]

    def __len__(self) -> int:
        return len(self._books)

    # ------------------------- Reads ------------------------- #
    def list_all(self) -> List[Book]:
        return [book.copy() for book in self._books]

    def get_by_id(self, book_id: int) -> Optional[Book]:
        book = self._find(book_id)
        return book.copy() if book else None

    def search_by_author(self, text: str) -> List[Book]:
        """Books whose author contains ``text``, ignoring case."""
        needle = (text or "").casefold()
        return [book.copy() for book in self._books if needle in book.author.casefold()]

    def search_by_genre(self, text: str) -> List[Book]:
        """Books whose genre contains ``text``, ignoring case."""
        needle = (text or "").casefold()
        return [book.copy() for book in self._books if needle in book.genre.casefold()]

    # ------------------------- Mutations ------------------------- #
    def add(self, book: Book) -> Book:
        """Store a copy of ``book`` under a fresh id and return it.

        Any id already set on ``book`` is ignored. The new id is one past the
        highest id currently held, or 1 when the store is empty.
        """
        stored = book.copy()
        stored.id = self._next_id()
        self._books.append(stored)
        logger.info(f"Book '{stored.title}' added with ID {stored.id}.")
        return stored.copy()

    def update(self, book: Book) -> Optional[Book]:
        """Overwrite the fields of the record with ``book.id``.

        Returns the updated record, or None when no record has that id.
        """
        existing = self._find(book.id)
        if existing is None:
            logger.warning(f"Book with ID {book.id} not found.")
            return None

        existing.title = book.title
        existing.author = book.author
        existing.genre = book.genre
        existing.year = book.year
        logger.info(f"Book '{existing.title}' (ID {existing.id}) updated.")
        return existing.copy()

    def delete(self, book_id: int) -> bool:
        book = self._find(book_id)
        if book is None:
            return False

        self._books.remove(book)
        logger.info(f"Book '{book.title}' (ID {book.id}) deleted.")
        return True

    # ------------------------- Utilities ------------------------- #
    def _find(self, book_id: int) -> Optional[Book]:
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def _next_id(self) -> int:
        if not self._books:
            return 1
        return max(book.id for book in self._books) + 1
