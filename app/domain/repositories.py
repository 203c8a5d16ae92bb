"""Persistence contract for websites.

Implementations live in ``app.infrastructure.repositories``. The website
store serializes calls, so implementations only need to keep the primary
records and the subdomain index consistent within a single call and make
``commit``/``rollback`` bracket a unit of work.
"""

from collections.abc import Sequence
from typing import Protocol

from app.domain.entities import Website


class WebsiteRepository(Protocol):
    """Structural contract implemented by every website backend."""

    def list(self) -> Sequence[Website]:
        """Return all websites ordered by ascending id."""
        ...

    def get(self, website_id: int) -> Website | None: ...

    def get_by_subdomain(self, subdomain: str) -> Website | None: ...

    def list_subdomains(self) -> set[str]: ...

    def create(self, website: Website) -> Website:
        """Persist ``website`` and return it with a freshly assigned id."""
        ...

    def update(self, website: Website) -> Website: ...

    def delete(self, website_id: int) -> bool:
        """Remove the website; ``False`` when it did not exist."""
        ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


__all__ = ["WebsiteRepository"]
