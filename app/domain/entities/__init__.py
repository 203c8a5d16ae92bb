"""Domain entities exposed by the application."""

from .template import Template
from .website import Website, WebsiteStatus
from .website_stats import WebsiteStats

__all__ = [
    "Template",
    "Website",
    "WebsiteStats",
    "WebsiteStatus",
]
