"""Shared fixtures for the website lifecycle tests."""

from __future__ import annotations

import os
import pathlib
import sys
from datetime import datetime, timedelta, timezone

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("APP_TIMEZONE", "UTC")
os.environ.setdefault("WEBSITE_BACKEND", "memory")

from app.config import Settings  # noqa: E402
from app.infrastructure.repositories import InMemoryWebsiteRepository  # noqa: E402
from app.infrastructure.website_store import WebsiteStore, build_website_store  # noqa: E402


class FakeClock:
    """Deterministic clock that only moves when told to."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> datetime:
        self.current = self.current + timedelta(**kwargs)
        return self.current


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> WebsiteStore:
    return WebsiteStore(InMemoryWebsiteRepository(), clock=clock)


@pytest.fixture()
def sql_store(tmp_path: pathlib.Path, clock: FakeClock) -> WebsiteStore:
    settings = Settings(
        website_backend="database",
        database_url=f"sqlite:///{tmp_path / 'websites.db'}",
    )
    return build_website_store(settings, clock=clock)


@pytest.fixture(params=["memory", "database"])
def any_store(request: pytest.FixtureRequest) -> WebsiteStore:
    """Run a test once per persistence backend."""

    if request.param == "memory":
        return request.getfixturevalue("store")
    return request.getfixturevalue("sql_store")
