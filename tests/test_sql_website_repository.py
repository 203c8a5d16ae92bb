"""Tests specific to the SQLAlchemy backend."""

from datetime import datetime, timezone

import pytest

from app.application.use_cases import create_website, delete_website, search_websites
from app.config import Settings
from app.domain.entities import Website, WebsiteStatus
from app.domain.errors import InvalidSubdomainError, SubdomainErrorReason
from app.infrastructure.database import (
    create_database_engine,
    create_session_factory,
    initialize_database,
)
from app.infrastructure.repositories import SqlWebsiteRepository
from app.infrastructure.website_store import build_website_store


@pytest.fixture()
def repository(tmp_path):
    engine = create_database_engine(f"sqlite:///{tmp_path / 'repo.db'}")
    initialize_database(engine)
    session = create_session_factory(engine)()
    yield SqlWebsiteRepository(session)
    session.close()
    engine.dispose()


def _website(subdomain: str) -> Website:
    now = datetime(2024, 1, 18, tzinfo=timezone.utc)
    return Website(
        id=None,
        name=subdomain.title(),
        subdomain=subdomain,
        template_id="blog",
        status=WebsiteStatus.BUILDING,
        owner="admin",
        created_at=now,
        updated_at=now,
    )


def test_unique_constraint_surfaces_as_already_taken(repository):
    repository.create(_website("myblog"))
    repository.commit()

    with pytest.raises(InvalidSubdomainError) as exc_info:
        repository.create(_website("myblog"))

    assert exc_info.value.reason is SubdomainErrorReason.ALREADY_TAKEN
    assert [website.subdomain for website in repository.list()] == ["myblog"]


def test_rollback_discards_uncommitted_rows(repository):
    repository.create(_website("draft"))
    repository.rollback()

    assert repository.list() == []
    assert repository.get_by_subdomain("draft") is None


def test_get_by_subdomain_ignores_case(repository):
    created = repository.create(_website("shop"))
    repository.commit()

    assert repository.get_by_subdomain("SHOP").id == created.id
    assert repository.list_subdomains() == {"shop"}


def test_timestamps_round_trip_as_aware_datetimes(repository):
    created = repository.create(_website("clock"))
    repository.commit()

    loaded = repository.get(created.id)
    assert loaded.created_at.tzinfo is not None
    assert loaded.created_at == datetime(2024, 1, 18, tzinfo=timezone.utc)


def test_ids_are_never_reused(sql_store):
    first = create_website(sql_store, name="A", subdomain="a", template_id="blog", owner="x")
    second = create_website(sql_store, name="B", subdomain="b", template_id="blog", owner="x")
    delete_website(sql_store, second.id)

    third = create_website(sql_store, name="C", subdomain="c", template_id="blog", owner="x")

    assert third.id > second.id > first.id


def test_data_survives_a_new_store(tmp_path, clock):
    settings = Settings(
        website_backend="database",
        database_url=f"sqlite:///{tmp_path / 'persist.db'}",
    )
    store = build_website_store(settings, clock=clock)
    create_website(store, name="Kept", subdomain="kept", template_id="event", owner="x")

    reopened = build_website_store(settings, clock=clock)

    assert [website.subdomain for website in search_websites(reopened)] == ["kept"]
