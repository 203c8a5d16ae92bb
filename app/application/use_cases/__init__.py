"""Aggregate application use cases."""

from .templates import get_template, list_templates
from .websites import (
    create_website,
    delete_website,
    get_website,
    get_website_stats,
    list_websites,
    record_visits,
    search_websites,
    toggle_website_status,
    update_website,
)

__all__ = [
    "create_website",
    "delete_website",
    "get_template",
    "get_website",
    "get_website_stats",
    "list_templates",
    "list_websites",
    "record_visits",
    "search_websites",
    "toggle_website_status",
    "update_website",
]
