"""Pydantic schemas for validated input and serializable output."""

from .website import (
    TemplateRead,
    WebsiteCreate,
    WebsiteRead,
    WebsiteStatsRead,
    WebsiteUpdate,
)

__all__ = [
    "TemplateRead",
    "WebsiteCreate",
    "WebsiteRead",
    "WebsiteStatsRead",
    "WebsiteUpdate",
]
