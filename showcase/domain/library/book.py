"""Book value object."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Book:
    title: str

    def __str__(self) -> str:
        return f"Book{{title='{self.title}'}}"
