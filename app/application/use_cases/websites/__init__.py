"""Website lifecycle use cases."""

from .create_website import create_website
from .delete_website import delete_website
from .get_website import get_website
from .get_website_stats import compute_website_stats, get_website_stats
from .record_visits import record_visits
from .search_websites import list_websites, search_websites
from .toggle_website_status import toggle_website_status
from .update_website import update_website

__all__ = [
    "compute_website_stats",
    "create_website",
    "delete_website",
    "get_website",
    "get_website_stats",
    "list_websites",
    "record_visits",
    "search_websites",
    "toggle_website_status",
    "update_website",
]
