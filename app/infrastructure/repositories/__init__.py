"""Repository implementations for infrastructure layer."""

from .in_memory_website_repository import InMemoryWebsiteRepository
from .website_repository import SqlWebsiteRepository

__all__ = [
    "InMemoryWebsiteRepository",
    "SqlWebsiteRepository",
]
