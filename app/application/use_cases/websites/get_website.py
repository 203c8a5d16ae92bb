"""Use case for retrieving a website."""

from app.domain.entities import Website
from app.domain.errors import WebsiteNotFoundError
from app.infrastructure.website_store import WebsiteStore


def get_website(store: WebsiteStore, website_id: int) -> Website:
    """Return the website identified by ``website_id`` or raise an error."""

    with store.read() as repository:
        website = repository.get(website_id)
    if website is None:
        raise WebsiteNotFoundError(website_id)
    return website
