"""Use case for accumulating visitor counts."""

from dataclasses import replace

from app.domain.entities import Website
from app.domain.errors import InvalidVisitCountError, WebsiteNotFoundError
from app.infrastructure.website_store import WebsiteStore


def record_visits(store: WebsiteStore, website_id: int, visits: int) -> Website:
    """Add ``visits`` to the website's visitor count.

    The count only grows; a negative ``visits`` is rejected.
    """

    if visits < 0:
        raise InvalidVisitCountError(visits)

    with store.transaction() as repository:
        current = repository.get(website_id)
        if current is None:
            raise WebsiteNotFoundError(website_id)
        counted = replace(current, visitor_count=current.visitor_count + visits)
        return repository.update(store.touch(counted))


__all__ = ["record_visits"]
