"""Website store: the single entry point to website persistence.

Every operation runs under one re-entrant lock. ``transaction`` keeps the
lock for the whole check-then-write sequence and commits on success or rolls
back on any exception, so readers never observe a half-applied change.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime

from app.config import DNS_LABEL_MAX_LENGTH, Settings, get_settings
from app.domain.entities import Website
from app.domain.repositories import WebsiteRepository
from app.infrastructure.template_catalog import TemplateCatalog, default_catalog
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class WebsiteStore:
    """Serialize access to a :class:`WebsiteRepository`."""

    def __init__(
        self,
        repository: WebsiteRepository,
        *,
        catalog: TemplateCatalog | None = None,
        clock: Clock | None = None,
        subdomain_max_length: int = DNS_LABEL_MAX_LENGTH,
        platform_domain: str = "cms.com",
    ) -> None:
        self._repository = repository
        self._lock = threading.RLock()
        self.catalog = catalog or default_catalog
        self.clock = clock or now_in_app_timezone
        self.subdomain_max_length = subdomain_max_length
        self.platform_domain = platform_domain

    @contextmanager
    def transaction(self) -> Iterator[WebsiteRepository]:
        """Yield the repository for a unit of work that commits atomically."""

        with self._lock:
            try:
                yield self._repository
                self._repository.commit()
            except Exception:
                self._repository.rollback()
                raise

    @contextmanager
    def read(self) -> Iterator[WebsiteRepository]:
        """Yield the repository for a consistent read-only snapshot."""

        with self._lock:
            yield self._repository

    def now(self) -> datetime:
        return self.clock()

    def touch(self, website: Website) -> Website:
        """Return ``website`` with ``updated_at`` advanced to now.

        The timestamp never moves before ``created_at`` even if the clock does.
        """

        return replace(website, updated_at=max(self.now(), website.created_at))


def build_website_store(
    settings: Settings | None = None,
    *,
    catalog: TemplateCatalog | None = None,
    clock: Clock | None = None,
) -> WebsiteStore:
    """Create a store using the backend selected by ``WEBSITE_BACKEND``."""

    settings = settings or get_settings()
    repository: WebsiteRepository
    if settings.website_backend == "database":
        from app.infrastructure.database import (
            create_database_engine,
            create_session_factory,
            initialize_database,
        )
        from app.infrastructure.repositories import SqlWebsiteRepository

        engine = create_database_engine(settings.database_url)
        initialize_database(engine)
        repository = SqlWebsiteRepository(create_session_factory(engine)())
    else:
        from app.infrastructure.repositories import InMemoryWebsiteRepository

        repository = InMemoryWebsiteRepository()

    logger.info("Website store initialized with the %s backend", settings.website_backend)
    return WebsiteStore(
        repository,
        catalog=catalog,
        clock=clock,
        subdomain_max_length=settings.subdomain_max_length,
        platform_domain=settings.platform_domain,
    )


__all__ = ["Clock", "WebsiteStore", "build_website_store"]
