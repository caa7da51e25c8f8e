"""Beverage port and the base drink."""
from abc import ABC, abstractmethod
from dataclasses import dataclass

from showcase.domain.core.formatting import format_real

BASIC_COFFEE_DESCRIPTION = "Basic Coffee"
BASIC_COFFEE_COST = 5.0


class Beverage(ABC):
    """Anything with a textual description and a real-valued cost."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human readable description."""

    @property
    @abstractmethod
    def cost(self) -> float:
        """Price of the beverage."""

    def __str__(self) -> str:
        return f"Cost: ${format_real(self.cost)}, Description: {self.description}"


@dataclass(frozen=True)
class BasicCoffee(Beverage):
    """Plain coffee every composition starts from."""

    @property
    def description(self) -> str:
        return BASIC_COFFEE_DESCRIPTION

    @property
    def cost(self) -> float:
        return BASIC_COFFEE_COST
