"""Domain entity representing a managed website."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class WebsiteStatus(str, Enum):
    """Lifecycle states a website can be in."""

    BUILDING = "BUILDING"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"


@dataclass
class Website:
    """Core attributes describing a hosted website."""

    id: int | None
    name: str
    subdomain: str
    template_id: str
    status: WebsiteStatus
    owner: str
    created_at: datetime
    updated_at: datetime
    visitor_count: int = 0
    domain: str | None = None
    description: str | None = None

    def host_name(self, platform_domain: str) -> str:
        """Return the platform host name, e.g. ``myblog.cms.com``."""

        return f"{self.subdomain}.{platform_domain}"

    def matches(self, term: str) -> bool:
        """Return ``True`` when ``term`` occurs in the name or subdomain."""

        needle = term.casefold()
        return needle in self.name.casefold() or needle in self.subdomain.casefold()


__all__ = ["Website", "WebsiteStatus"]
