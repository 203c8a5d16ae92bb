"""Use case for provisioning websites."""

import logging

from app.domain.entities import Website
from app.domain.lifecycle import INITIAL_STATUS
from app.application.use_cases.templates import get_template
from app.infrastructure.website_store import WebsiteStore

from .validators import validate_name, validate_subdomain

logger = logging.getLogger(__name__)


def create_website(
    store: WebsiteStore,
    *,
    name: str,
    subdomain: str,
    template_id: str,
    owner: str,
    description: str | None = None,
) -> Website:
    """Provision a new website in the ``BUILDING`` state.

    The template is resolved first, then the subdomain is checked against the
    current index and finally the name. All checks and the insert happen in a
    single store transaction, so a failure leaves the collection untouched.

    Raises:
        UnknownTemplateError: If ``template_id`` is not in the catalog.
        InvalidSubdomainError: If the subdomain is malformed or already taken.
        InvalidNameError: If ``name`` is blank.
    """

    with store.transaction() as repository:
        template = get_template(store.catalog, template_id)
        normalized_subdomain = validate_subdomain(
            subdomain,
            repository.list_subdomains(),
            max_length=store.subdomain_max_length,
        )
        normalized_name = validate_name(name)

        now = store.now()
        website = Website(
            id=None,
            name=normalized_name,
            subdomain=normalized_subdomain,
            domain=None,
            template_id=template.id,
            status=INITIAL_STATUS,
            owner=owner,
            description=(description or "").strip() or None,
            visitor_count=0,
            created_at=now,
            updated_at=now,
        )
        saved_website = repository.create(website)

    logger.info(
        "Provisioned website %s (%s) from template '%s'",
        saved_website.id,
        saved_website.subdomain,
        template.id,
    )
    return saved_website


__all__ = ["create_website"]
