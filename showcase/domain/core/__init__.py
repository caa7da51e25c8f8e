"""Core domain primitives shared by all pattern vignettes."""

from .exceptions import (
    CapacityExceededError,
    ConfigurationError,
    DomainException,
    IteratorExhaustedError,
    UnsupportedOperationError,
)
from .formatting import format_real

__all__ = [
    "DomainException",
    "UnsupportedOperationError",
    "IteratorExhaustedError",
    "CapacityExceededError",
    "ConfigurationError",
    "format_real",
]
