"""Prototype bounded context - objects that copy themselves."""

from .car import Car
from .prototype import Prototype

__all__ = ["Prototype", "Car"]
