"""Fixed-capacity book collection and its traversal handle."""
from abc import ABC, abstractmethod
from typing import Iterator, Optional, Sequence, Tuple

from showcase.domain.core.exceptions import (
    CapacityExceededError,
    IteratorExhaustedError,
    UnsupportedOperationError,
)

from .book import Book

DEFAULT_TITLES = ("Book1", "Book2", "Book3")


class BookIterator(ABC):
    """Single-use cursor over an ordered sequence of books."""

    @abstractmethod
    def has_next(self) -> bool:
        """True while another book can be returned."""

    @abstractmethod
    def next(self) -> Book:
        """Return the current book and advance."""

    def remove(self) -> None:
        raise UnsupportedOperationError("remove", "Remove not supported")

    def __iter__(self) -> "BookIterator":
        return self

    def __next__(self) -> Book:
        if not self.has_next():
            raise StopIteration
        return self.next()


class BookCollection(ABC):
    """Anything that can hand out a traversal over its books."""

    @abstractmethod
    def create_iterator(self) -> BookIterator:
        """Return a new, independent traversal handle."""

    def __iter__(self) -> Iterator[Book]:
        return self.create_iterator()


class Library(BookCollection):
    """Ordered, read-only collection of book slots.

    A slot is either a book or ``None``. The library always has
    ``CAPACITY`` slots; shorter inputs are padded with empty slots.
    Traversal covers the occupied prefix only: it stops at the first empty
    slot even when later slots hold books.

    Args:
        slots: Explicit slot contents. Defaults to three books titled
            ``Book1``, ``Book2`` and ``Book3``.

    Raises:
        CapacityExceededError: If more than ``CAPACITY`` slots are given.
    """

    CAPACITY = 3

    def __init__(self, slots: Optional[Sequence[Optional[Book]]] = None):
        if slots is None:
            slots = [Book(title) for title in DEFAULT_TITLES]
        slots = tuple(slots)
        if len(slots) > self.CAPACITY:
            raise CapacityExceededError("Library", len(slots), self.CAPACITY)
        self._slots: Tuple[Optional[Book], ...] = slots + (None,) * (self.CAPACITY - len(slots))

    @property
    def capacity(self) -> int:
        return self.CAPACITY

    @property
    def slots(self) -> Tuple[Optional[Book], ...]:
        return self._slots

    def create_iterator(self) -> BookIterator:
        return LibraryIterator(self._slots)


class LibraryIterator(BookIterator):
    """Cursor over a library's slots; each instance keeps its own index."""

    def __init__(self, slots: Tuple[Optional[Book], ...]):
        self._slots = slots
        self._current_index = 0

    def has_next(self) -> bool:
        return self._current_index < len(self._slots) and self._slots[self._current_index] is not None

    def next(self) -> Book:
        if not self.has_next():
            raise IteratorExhaustedError(self._current_index)
        book = self._slots[self._current_index]
        self._current_index += 1
        return book
