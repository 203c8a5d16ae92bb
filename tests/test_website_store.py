"""Tests for the store's unit-of-work handling."""

import pytest

from app.application.use_cases import create_website, search_websites
from app.domain.entities import Website, WebsiteStatus
from app.infrastructure.repositories import InMemoryWebsiteRepository
from app.infrastructure.website_store import WebsiteStore


class FailingCommitRepository(InMemoryWebsiteRepository):
    """In-memory repository whose next ``commit`` raises."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_next_commit = False
        self.rollbacks = 0

    def commit(self) -> None:
        if self.fail_next_commit:
            self.fail_next_commit = False
            raise RuntimeError("commit failed")
        super().commit()

    def rollback(self) -> None:
        self.rollbacks += 1
        super().rollback()


def test_failed_commit_rolls_back_and_store_stays_usable(clock):
    repository = FailingCommitRepository()
    store = WebsiteStore(repository, clock=clock)
    repository.fail_next_commit = True

    with pytest.raises(RuntimeError, match="commit failed"):
        create_website(store, name="My Blog", subdomain="myblog", template_id="blog", owner="ann")

    assert repository.rollbacks == 1
    assert search_websites(store) == []

    website = create_website(store, name="My Blog", subdomain="myblog", template_id="blog", owner="ann")

    assert [item.id for item in search_websites(store)] == [website.id]
    assert repository.rollbacks == 1


def test_error_inside_transaction_discards_writes(store):
    with pytest.raises(LookupError):
        with store.transaction() as repository:
            website = repository.create(
                Website(
                    id=None,
                    name="Shop",
                    subdomain="shop",
                    template_id="ecommerce",
                    status=WebsiteStatus.BUILDING,
                    owner="ann",
                    created_at=store.now(),
                    updated_at=store.now(),
                )
            )
            assert repository.get(website.id) is not None
            raise LookupError("abort")

    assert search_websites(store) == []
