"""Persistence layer for websites."""

from collections.abc import Sequence
import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import Website, WebsiteStatus
from app.domain.errors import InvalidSubdomainError, SubdomainErrorReason
from app.infrastructure.models import WebsiteModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone

logger = logging.getLogger(__name__)


class SqlWebsiteRepository:
    """Provide CRUD operations for websites backed by SQLAlchemy.

    Methods flush but never commit; the website store decides when the unit
    of work ends.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Website]:
        query = self.session.query(WebsiteModel).order_by(WebsiteModel.id.asc())
        return [self._to_entity(model) for model in query.all()]

    def get(self, website_id: int) -> Website | None:
        model = self.session.get(WebsiteModel, website_id)
        return self._to_entity(model) if model else None

    def get_by_subdomain(self, subdomain: str) -> Website | None:
        model = (
            self.session.query(WebsiteModel)
            .filter(func.lower(WebsiteModel.subdomain) == subdomain.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def list_subdomains(self) -> set[str]:
        rows = self.session.query(WebsiteModel.subdomain).all()
        return {subdomain.lower() for (subdomain,) in rows}

    def create(self, website: Website) -> Website:
        model = WebsiteModel()
        self._apply_entity_to_model(model, website, include_creation_fields=True)
        self.session.add(model)
        try:
            self.session.flush()
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning(
                "Subdomain '%s' was claimed concurrently; rejecting creation",
                website.subdomain,
            )
            raise InvalidSubdomainError(
                SubdomainErrorReason.ALREADY_TAKEN, website.subdomain
            ) from exc
        return self._to_entity(model)

    def update(self, website: Website) -> Website:
        model = self.session.get(WebsiteModel, website.id)
        if not model:
            msg = f"Website with id {website.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, website, include_creation_fields=False)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def delete(self, website_id: int) -> bool:
        model = self.session.get(WebsiteModel, website_id)
        if not model:
            return False
        self.session.delete(model)
        self.session.flush()
        return True

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    @staticmethod
    def _to_entity(model: WebsiteModel) -> Website:
        return Website(
            id=model.id,
            name=model.name,
            subdomain=model.subdomain,
            domain=model.domain,
            template_id=model.template_id,
            status=WebsiteStatus(model.status),
            owner=model.owner,
            description=model.description,
            visitor_count=model.visitor_count,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )

    @staticmethod
    def _apply_entity_to_model(
        model: WebsiteModel,
        website: Website,
        *,
        include_creation_fields: bool,
    ) -> None:
        if include_creation_fields:
            model.subdomain = website.subdomain
            model.template_id = website.template_id
            model.owner = website.owner
            model.description = website.description
            model.created_at = ensure_app_naive_datetime(website.created_at)
        model.name = website.name
        model.domain = website.domain
        model.status = WebsiteStatus(website.status).value
        model.visitor_count = website.visitor_count
        model.updated_at = ensure_app_naive_datetime(website.updated_at)


__all__ = ["SqlWebsiteRepository"]
