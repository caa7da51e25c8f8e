"""Rendering helpers shared by the domain value objects."""
import math
from decimal import Decimal


def format_real(value: float) -> str:
    """Render a float in positional notation with at least one fractional digit.

    Uses the shortest digits that round-trip (as ``repr`` does) but never
    switches to exponent form::

        >>> format_real(28000.0), format_real(1e16), format_real(5e-05)
        ('28000.0', '10000000000000000.0', '0.00005')
    """
    if not math.isfinite(value):
        return repr(value)
    text = format(Decimal(repr(value)), "f")
    if "." not in text:
        text += ".0"
    return text
