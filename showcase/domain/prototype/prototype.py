"""Prototype port."""
from abc import ABC, abstractmethod


class Prototype(ABC):
    """Interface for objects that can produce an independent copy of themselves."""

    @abstractmethod
    def clone(self) -> "Prototype":
        """Return a structurally independent copy with the same field values."""
