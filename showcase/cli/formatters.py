"""
CLI formatting functions for showcase results.

- text: the canonical layout, one header per vignette with a blank line
  between sections
- json / yaml: structured dumps of the same results
"""

import json
from typing import Any, Dict, List, Sequence

import yaml

from showcase.application.dto import VignetteResult
from showcase.config.defaults import OutputFormat


def format_output(results: Sequence[VignetteResult], format_type: str) -> str:
    """Format showcase results according to the specified format type."""
    format_type = OutputFormat(format_type)
    if format_type == OutputFormat.JSON:
        return json.dumps(_to_data(results), indent=2)
    elif format_type == OutputFormat.YAML:
        return yaml.dump(_to_data(results), default_flow_style=False, sort_keys=False)
    else:
        return format_text_output(results)


def format_text_output(results: Sequence[VignetteResult]) -> str:
    """Format results as plain text sections."""
    sections = []
    for result in results:
        sections.append("\n".join([result.header, *result.lines]))
    return "\n\n".join(sections)


def _to_data(results: Sequence[VignetteResult]) -> Dict[str, List[Dict[str, Any]]]:
    return {"vignettes": [result.to_dict() for result in results]}
