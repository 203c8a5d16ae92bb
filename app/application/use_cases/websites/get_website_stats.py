"""Use case for computing dashboard figures over the managed websites."""

from collections.abc import Iterable

from app.domain.entities import Website, WebsiteStats, WebsiteStatus
from app.infrastructure.website_store import WebsiteStore


def compute_website_stats(websites: Iterable[Website]) -> WebsiteStats:
    """Aggregate status counts and visitors. Pure, no IO."""

    counts = {status: 0 for status in WebsiteStatus}
    total_visitors = 0
    for website in websites:
        counts[WebsiteStatus(website.status)] += 1
        total_visitors += website.visitor_count

    return WebsiteStats(
        total=sum(counts.values()),
        active_count=counts[WebsiteStatus.ACTIVE],
        building_count=counts[WebsiteStatus.BUILDING],
        suspended_count=counts[WebsiteStatus.SUSPENDED],
        total_visitors=total_visitors,
    )


def get_website_stats(store: WebsiteStore) -> WebsiteStats:
    """Return statistics for a consistent snapshot of the store."""

    with store.read() as repository:
        websites = repository.list()
    return compute_website_stats(websites)


__all__ = ["compute_website_stats", "get_website_stats"]
