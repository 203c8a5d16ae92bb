"""Status transitions applied when an operator toggles a website.

``BUILDING`` is only ever produced by provisioning. Toggling a building
site activates it; afterwards the toggle flips between ``ACTIVE`` and
``SUSPENDED``.
"""

from app.domain.entities import WebsiteStatus

_TOGGLE_TRANSITIONS: dict[WebsiteStatus, WebsiteStatus] = {
    WebsiteStatus.BUILDING: WebsiteStatus.ACTIVE,
    WebsiteStatus.ACTIVE: WebsiteStatus.SUSPENDED,
    WebsiteStatus.SUSPENDED: WebsiteStatus.ACTIVE,
}

INITIAL_STATUS = WebsiteStatus.BUILDING


def next_status(current: WebsiteStatus | str) -> WebsiteStatus:
    """Return the status a toggle moves ``current`` to."""

    return _TOGGLE_TRANSITIONS[WebsiteStatus(current)]


__all__ = ["INITIAL_STATUS", "next_status"]
