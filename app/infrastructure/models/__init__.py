"""ORM models used by the application infrastructure."""

from .website import WebsiteModel

__all__ = ["WebsiteModel"]
