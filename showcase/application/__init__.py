"""Application layer - runs the pattern vignettes."""

from .dto import PatternName, VignetteResult
from .showcase_service import ShowcaseService

__all__ = ["PatternName", "VignetteResult", "ShowcaseService"]
