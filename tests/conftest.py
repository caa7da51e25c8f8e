"""Shared test fixtures."""

import logging

import pytest

from showcase.domain.library import Book, Library
from showcase.domain.prototype import Car


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def toyota():
    """The car used by the prototype vignette."""
    return Car(model="Toyota", price=30000.0)


@pytest.fixture
def library():
    """Default three-book library."""
    return Library()


@pytest.fixture
def gapped_library():
    """Library whose second slot is empty."""
    return Library([Book("Book1"), None, Book("Book3")])


@pytest.fixture
def expected_output():
    """Canonical output of a full showcase run."""
    return (
        "--- Prototype ---\n"
        "Original: Car{model='Toyota', price=30000.0}\n"
        "Cloned: Car{model='Toyota', price=28000.0}\n"
        "\n"
        "--- Decorator ---\n"
        "Cost: $5.0, Description: Basic Coffee\n"
        "Cost: $7.0, Description: Basic Coffee, Milk, Sugar\n"
        "\n"
        "--- Iterator ---\n"
        "Books in library:\n"
        "Book{title='Book1'}\n"
        "Book{title='Book2'}\n"
        "Book{title='Book3'}\n"
    )
