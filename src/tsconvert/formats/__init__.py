"""Registry of supported date and time formats."""

from ._registry import (
    SUPPORTED_FAMILIES,
    FormatName,
    auto_detect_order,
    parse_templates,
    render_template,
    renders_local,
)
from ._template import Template

__all__ = [
    "SUPPORTED_FAMILIES",
    "FormatName",
    "Template",
    "auto_detect_order",
    "parse_templates",
    "render_template",
    "renders_local",
]
