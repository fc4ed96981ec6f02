"""Library Catalog - Core Package

This package contains the core catalog modules:
- Book record model (book.py)
- In-memory record store (store.py)
- Validation and orchestration layer (service.py)
"""

from catalog.book import Book
from catalog.service import CatalogService, ValidationError
from catalog.store import BookStore

__all__ = ["Book", "BookStore", "CatalogService", "ValidationError"]
