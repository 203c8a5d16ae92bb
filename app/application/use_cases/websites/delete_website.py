"""Use case for deleting websites."""

import logging

from app.domain.errors import WebsiteNotFoundError
from app.infrastructure.website_store import WebsiteStore

logger = logging.getLogger(__name__)


def delete_website(store: WebsiteStore, website_id: int) -> None:
    """Remove the website and release its subdomain."""

    with store.transaction() as repository:
        if not repository.delete(website_id):
            raise WebsiteNotFoundError(website_id)

    logger.info("Deleted website %s", website_id)
