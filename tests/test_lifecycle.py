import pytest

from app.domain.entities import WebsiteStatus
from app.domain.lifecycle import INITIAL_STATUS, next_status


@pytest.mark.parametrize(
    ("current", "expected"),
    [
        (WebsiteStatus.ACTIVE, WebsiteStatus.SUSPENDED),
        (WebsiteStatus.SUSPENDED, WebsiteStatus.ACTIVE),
        (WebsiteStatus.BUILDING, WebsiteStatus.ACTIVE),
    ],
)
def test_next_status_transition_table(current, expected):
    assert next_status(current) is expected


def test_next_status_accepts_raw_values():
    assert next_status("ACTIVE") is WebsiteStatus.SUSPENDED


def test_toggle_never_returns_to_building():
    status = INITIAL_STATUS
    seen = []
    for _ in range(6):
        status = next_status(status)
        seen.append(status)

    assert WebsiteStatus.BUILDING not in seen
    assert seen == [
        WebsiteStatus.ACTIVE,
        WebsiteStatus.SUSPENDED,
        WebsiteStatus.ACTIVE,
        WebsiteStatus.SUSPENDED,
        WebsiteStatus.ACTIVE,
        WebsiteStatus.SUSPENDED,
    ]


def test_unknown_status_is_rejected():
    with pytest.raises(ValueError):
        next_status("DELETED")
