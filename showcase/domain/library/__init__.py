"""Library bounded context - books and single-pass traversal over them."""

from .book import Book
from .collection import DEFAULT_TITLES, BookCollection, BookIterator, Library

__all__ = ["Book", "BookCollection", "BookIterator", "Library", "DEFAULT_TITLES"]
