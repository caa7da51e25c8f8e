"""Beverage bounded context - a base drink and chainable modifiers."""

from .beverage import BASIC_COFFEE_COST, BASIC_COFFEE_DESCRIPTION, Beverage, BasicCoffee
from .decorators import (
    BeverageDecorator,
    MilkDecorator,
    SugarDecorator,
    basic,
    decorate,
    with_milk,
    with_sugar,
)

__all__ = [
    "Beverage",
    "BasicCoffee",
    "BASIC_COFFEE_DESCRIPTION",
    "BASIC_COFFEE_COST",
    "BeverageDecorator",
    "MilkDecorator",
    "SugarDecorator",
    "basic",
    "with_milk",
    "with_sugar",
    "decorate",
]
