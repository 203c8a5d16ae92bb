"""Use case for updating the mutable fields of a website."""

import logging
from collections.abc import Mapping
from dataclasses import replace

from app.domain.entities import Website
from app.domain.errors import WebsiteNotFoundError
from app.infrastructure.website_store import WebsiteStore
from app.schemas import WebsiteUpdate

from .validators import normalize_domain, validate_name

logger = logging.getLogger(__name__)


def update_website(
    store: WebsiteStore,
    website_id: int,
    patch: WebsiteUpdate | Mapping[str, object],
) -> Website:
    """Apply ``patch`` to the website and advance ``updated_at``.

    Only ``name`` and ``domain`` may be changed. Fields missing from the patch
    are left untouched; a blank or ``None`` domain removes the mapping.

    Raises:
        pydantic.ValidationError: If the patch carries unsupported fields.
        InvalidNameError: If the new name is blank.
        WebsiteNotFoundError: If the website does not exist.
    """

    if not isinstance(patch, WebsiteUpdate):
        patch = WebsiteUpdate.model_validate(patch)
    changes = patch.model_dump(exclude_unset=True)

    with store.transaction() as repository:
        current = repository.get(website_id)
        if current is None:
            raise WebsiteNotFoundError(website_id)

        updated = current
        if "name" in changes:
            updated = replace(updated, name=validate_name(changes["name"]))
        if "domain" in changes:
            updated = replace(updated, domain=normalize_domain(changes["domain"]))

        saved_website = repository.update(store.touch(updated))

    logger.info("Updated website %s fields: %s", website_id, sorted(changes))
    return saved_website


__all__ = ["update_website"]
