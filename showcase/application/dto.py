"""Data transfer objects for showcase results."""
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class PatternName(str, Enum):
    """Pattern vignettes, declared in the order they run."""
    PROTOTYPE = "prototype"
    DECORATOR = "decorator"
    ITERATOR = "iterator"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class VignetteResult(BaseModel):
    """Rendered outcome of a single vignette."""
    model_config = ConfigDict(frozen=True)

    pattern: PatternName
    lines: List[str] = Field(default_factory=list)

    @property
    def header(self) -> str:
        return f"--- {self.pattern.display_name} ---"

    def to_dict(self) -> Dict[str, Any]:
        return {"pattern": self.pattern.value, "title": self.pattern.display_name, "lines": list(self.lines)}
