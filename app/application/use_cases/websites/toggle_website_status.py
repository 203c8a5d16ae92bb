"""Use case for the operator's pause/resume action."""

import logging
from dataclasses import replace

from app.domain.entities import Website
from app.domain.errors import WebsiteNotFoundError
from app.domain.lifecycle import next_status
from app.infrastructure.website_store import WebsiteStore

logger = logging.getLogger(__name__)


def toggle_website_status(store: WebsiteStore, website_id: int) -> Website:
    """Move the website to its next status and return the updated entity.

    ``BUILDING`` becomes ``ACTIVE``; afterwards the status alternates between
    ``ACTIVE`` and ``SUSPENDED``.
    """

    with store.transaction() as repository:
        current = repository.get(website_id)
        if current is None:
            raise WebsiteNotFoundError(website_id)

        toggled = replace(current, status=next_status(current.status))
        saved_website = repository.update(store.touch(toggled))

    logger.info(
        "Website %s status changed from %s to %s",
        website_id,
        current.status.value,
        saved_website.status.value,
    )
    return saved_website


__all__ = ["toggle_website_status"]
