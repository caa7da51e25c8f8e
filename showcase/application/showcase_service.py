"""Showcase service - exercises each pattern and collects what it prints."""
from typing import Callable, Dict, Iterable, List, Optional

from showcase.domain.beverage import MilkDecorator, SugarDecorator, basic, decorate
from showcase.domain.library import Library
from showcase.domain.prototype import Car
from showcase.helpers.logger import get_logger

from .dto import PatternName, VignetteResult

logger = get_logger(__name__)


def run_prototype() -> List[str]:
    """Clone a car, reprice the clone and show that the original is untouched."""
    original_car = Car(model="Toyota", price=30000.0)
    cloned_car = original_car.clone()
    cloned_car.set_price(28000.0)
    return [f"Original: {original_car}", f"Cloned: {cloned_car}"]


def run_decorator() -> List[str]:
    """Show a basic coffee, then the same coffee with milk and sugar."""
    coffee = basic()
    lines = [str(coffee)]
    coffee = decorate(coffee, MilkDecorator, SugarDecorator)
    lines.append(str(coffee))
    return lines


def run_iterator() -> List[str]:
    """Walk the default library with an explicit traversal handle."""
    library = Library()
    iterator = library.create_iterator()
    lines = ["Books in library:"]
    while iterator.has_next():
        lines.append(str(iterator.next()))
    return lines


class ShowcaseService:
    """Runs pattern vignettes in their fixed order."""

    DEFAULT_VIGNETTES: Dict[PatternName, Callable[[], List[str]]] = {
        PatternName.PROTOTYPE: run_prototype,
        PatternName.DECORATOR: run_decorator,
        PatternName.ITERATOR: run_iterator,
    }

    def __init__(self, vignettes: Optional[Dict[PatternName, Callable[[], List[str]]]] = None):
        # Supplied vignettes override the defaults per pattern
        self._vignettes = {**self.DEFAULT_VIGNETTES, **(vignettes or {})}

    def run(self, patterns: Optional[Iterable[PatternName]] = None) -> List[VignetteResult]:
        """
        Run the requested vignettes.

        Args:
            patterns: Subset of patterns to run. All patterns run when omitted.
                Duplicates are ignored and the fixed order is always kept.

        Returns:
            One result per vignette that ran.
        """
        selected = set(PatternName) if patterns is None else {PatternName(p) for p in patterns}

        results = []
        for pattern in PatternName:
            if pattern not in selected:
                continue
            vignette = self._vignettes[pattern]
            logger.debug("Running vignette", pattern=pattern.value)
            lines = vignette()
            logger.debug("Vignette finished", pattern=pattern.value, line_count=len(lines))
            results.append(VignetteResult(pattern=pattern, lines=lines))
        return results
