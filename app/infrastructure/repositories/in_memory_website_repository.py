"""In-process storage for websites."""

from __future__ import annotations

import itertools
from collections.abc import Sequence
from dataclasses import replace

from app.domain.entities import Website
from app.domain.errors import InvalidSubdomainError, SubdomainErrorReason


class InMemoryWebsiteRepository:
    """Keep websites in a dict keyed by id with a secondary subdomain index.

    Writes are applied immediately; the first write after a ``commit`` or
    ``rollback`` takes a checkpoint that ``rollback`` restores. Entities are
    copied on the way in and out so callers never hold live records.
    """

    def __init__(self) -> None:
        self._websites: dict[int, Website] = {}
        self._subdomain_index: dict[str, int] = {}
        self._ids = itertools.count(1)
        self._checkpoint: tuple[dict[int, Website], dict[str, int]] | None = None

    def list(self) -> Sequence[Website]:
        return [replace(self._websites[key]) for key in sorted(self._websites)]

    def get(self, website_id: int) -> Website | None:
        website = self._websites.get(website_id)
        return replace(website) if website else None

    def get_by_subdomain(self, subdomain: str) -> Website | None:
        website_id = self._subdomain_index.get(subdomain.lower())
        return self.get(website_id) if website_id is not None else None

    def list_subdomains(self) -> set[str]:
        return set(self._subdomain_index)

    def create(self, website: Website) -> Website:
        key = website.subdomain.lower()
        if key in self._subdomain_index:
            raise InvalidSubdomainError(
                SubdomainErrorReason.ALREADY_TAKEN, website.subdomain
            )
        self._ensure_checkpoint()
        stored = replace(website, id=next(self._ids))
        self._websites[stored.id] = stored
        self._subdomain_index[key] = stored.id
        return replace(stored)

    def update(self, website: Website) -> Website:
        current = self._websites.get(website.id)
        if current is None:
            msg = f"Website with id {website.id} not found"
            raise ValueError(msg)
        self._ensure_checkpoint()
        # The subdomain is immutable once assigned.
        stored = replace(website, subdomain=current.subdomain)
        self._websites[stored.id] = stored
        return replace(stored)

    def delete(self, website_id: int) -> bool:
        current = self._websites.get(website_id)
        if current is None:
            return False
        self._ensure_checkpoint()
        del self._websites[website_id]
        del self._subdomain_index[current.subdomain.lower()]
        return True

    def commit(self) -> None:
        self._checkpoint = None

    def rollback(self) -> None:
        if self._checkpoint is not None:
            self._websites, self._subdomain_index = self._checkpoint
            self._checkpoint = None

    def _ensure_checkpoint(self) -> None:
        if self._checkpoint is None:
            self._checkpoint = (dict(self._websites), dict(self._subdomain_index))


__all__ = ["InMemoryWebsiteRepository"]
