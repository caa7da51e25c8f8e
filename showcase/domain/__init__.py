"""
Domain Layer - one bounded context per pattern

- core/: Shared exceptions
- prototype/: Cloneable product (Prototype pattern)
- beverage/: Base beverage and modifiers (Decorator pattern)
- library/: Book collection and traversal handle (Iterator pattern)
"""

from .beverage import Beverage, BasicCoffee, MilkDecorator, SugarDecorator
from .core import DomainException, IteratorExhaustedError, UnsupportedOperationError
from .library import Book, BookCollection, Library
from .prototype import Car, Prototype

__all__ = [
    # Core
    "DomainException",
    "UnsupportedOperationError",
    "IteratorExhaustedError",
    # Prototype context
    "Prototype",
    "Car",
    # Beverage context
    "Beverage",
    "BasicCoffee",
    "MilkDecorator",
    "SugarDecorator",
    # Library context
    "Book",
    "BookCollection",
    "Library",
]
