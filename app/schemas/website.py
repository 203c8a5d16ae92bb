"""Schemas for website and template payloads."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import Website, WebsiteStatus


class TemplateRead(BaseModel):
    id: str
    name: str
    description: str
    features: list[str]

    model_config = ConfigDict(from_attributes=True)


class WebsiteCreate(BaseModel):
    """Payload required to provision a website."""

    name: str = Field(..., max_length=255)
    subdomain: str = Field(..., max_length=255)
    template_id: str = Field(..., max_length=50)
    description: str | None = Field(default=None)

    model_config = ConfigDict(extra="forbid")


class WebsiteUpdate(BaseModel):
    """Mutable website fields; anything else is rejected."""

    name: str | None = Field(default=None, max_length=255)
    domain: str | None = Field(default=None, max_length=255)

    model_config = ConfigDict(extra="forbid")


class WebsiteRead(BaseModel):
    id: int
    name: str
    subdomain: str
    host_name: str
    domain: str | None
    template_id: str
    status: WebsiteStatus
    owner: str
    description: str | None
    visitor_count: int = Field(..., ge=0)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, website: Website, *, platform_domain: str) -> "WebsiteRead":
        return cls(
            id=website.id,
            name=website.name,
            subdomain=website.subdomain,
            host_name=website.host_name(platform_domain),
            domain=website.domain,
            template_id=website.template_id,
            status=website.status,
            owner=website.owner,
            description=website.description,
            visitor_count=website.visitor_count,
            created_at=website.created_at,
            updated_at=website.updated_at,
        )


class WebsiteStatsRead(BaseModel):
    total: int
    active_count: int
    building_count: int
    suspended_count: int
    total_visitors: int

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "TemplateRead",
    "WebsiteCreate",
    "WebsiteRead",
    "WebsiteStatsRead",
    "WebsiteUpdate",
]
