"""Use cases for finding websites in the store."""

from collections.abc import Sequence

from app.domain.entities import Website, WebsiteStatus
from app.infrastructure.website_store import WebsiteStore


def search_websites(store: WebsiteStore, term: str = "") -> Sequence[Website]:
    """Return websites whose name or subdomain contains ``term``.

    Matching ignores case but not whitespace, so ``" "`` matches only names
    containing a space. An empty term returns every website. Results are
    ordered by id.
    """

    needle = term or ""
    with store.read() as repository:
        websites = repository.list()
    if needle == "":
        return list(websites)
    return [website for website in websites if website.matches(needle)]


def list_websites(
    store: WebsiteStore,
    *,
    status: WebsiteStatus | str | None = None,
    owner: str | None = None,
) -> Sequence[Website]:
    """Return websites filtered by status and/or owner, ordered by id."""

    wanted_status = WebsiteStatus(status) if status is not None else None
    with store.read() as repository:
        websites = repository.list()
    return [
        website
        for website in websites
        if (wanted_status is None or website.status == wanted_status)
        and (owner is None or website.owner == owner)
    ]


__all__ = ["list_websites", "search_websites"]
