"""Beverage modifiers.

Each modifier wraps exactly one inner beverage. Its description is the inner
description followed by the modifier suffix, and its cost is the inner cost
plus the modifier delta, so a chain accumulates left to right in the order
the modifiers were applied::

    >>> str(with_sugar(with_milk(basic())))
    'Cost: $7.0, Description: Basic Coffee, Milk, Sugar'
"""
from dataclasses import dataclass
from typing import ClassVar, Type

from .beverage import Beverage, BasicCoffee


@dataclass(frozen=True)
class BeverageDecorator(Beverage):
    """Base modifier that delegates to the wrapped beverage.

    Subclasses only declare their contribution through ``suffix`` and
    ``cost_delta``; the base contributes nothing.
    """

    beverage: Beverage

    suffix: ClassVar[str] = ""
    cost_delta: ClassVar[float] = 0.0

    @property
    def description(self) -> str:
        return self.beverage.description + self.suffix

    @property
    def cost(self) -> float:
        return self.beverage.cost + self.cost_delta


@dataclass(frozen=True)
class MilkDecorator(BeverageDecorator):
    """Adds milk."""

    suffix: ClassVar[str] = ", Milk"
    cost_delta: ClassVar[float] = 1.5


@dataclass(frozen=True)
class SugarDecorator(BeverageDecorator):
    """Adds sugar."""

    suffix: ClassVar[str] = ", Sugar"
    cost_delta: ClassVar[float] = 0.5


def basic() -> Beverage:
    return BasicCoffee()


def with_milk(inner: Beverage) -> Beverage:
    return MilkDecorator(inner)


def with_sugar(inner: Beverage) -> Beverage:
    return SugarDecorator(inner)


def decorate(beverage: Beverage, *modifiers: Type[BeverageDecorator]) -> Beverage:
    """Apply modifiers over a beverage, first modifier innermost."""
    for modifier in modifiers:
        beverage = modifier(beverage)
    return beverage
