"""Template-related use cases."""

from .get_template import get_template
from .list_templates import list_templates

__all__ = [
    "get_template",
    "list_templates",
]
