"""Static catalog of the templates websites are provisioned from."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from app.domain.entities import Template

DEFAULT_TEMPLATES: tuple[Template, ...] = (
    Template(
        id="blog",
        name="Blog & Portfolio",
        description="Perfect for personal blogs and portfolios",
        features=("Responsive Design", "SEO Optimized", "Comment System"),
    ),
    Template(
        id="business",
        name="Business Website",
        description="Professional business presence",
        features=("Contact Forms", "Service Pages", "Team Showcase"),
    ),
    Template(
        id="ecommerce",
        name="E-commerce Store",
        description="Online store with payment integration",
        features=("Product Catalog", "Payment Gateway", "Inventory Management"),
    ),
    Template(
        id="portfolio",
        name="Creative Portfolio",
        description="Showcase your creative work",
        features=("Gallery Views", "Project Showcase", "Client Testimonials"),
    ),
    Template(
        id="event",
        name="Event Website",
        description="Event management and promotion",
        features=("Event Calendar", "Registration Forms", "Speaker Profiles"),
    ),
    Template(
        id="custom",
        name="Custom Build",
        description="Start from scratch with custom code",
        features=("Full Customization", "Custom Components", "Advanced Features"),
    ),
)


class TemplateCatalog:
    """Read-only registry of templates keyed by id."""

    def __init__(self, templates: Iterable[Template] = DEFAULT_TEMPLATES) -> None:
        self._templates: dict[str, Template] = {}
        for template in templates:
            if template.id in self._templates:
                raise ValueError(f"Duplicate template id '{template.id}'")
            self._templates[template.id] = template

    def list(self) -> Sequence[Template]:
        return tuple(self._templates.values())

    def get(self, template_id: str) -> Template | None:
        return self._templates.get(template_id)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates


default_catalog = TemplateCatalog()


__all__ = ["DEFAULT_TEMPLATES", "TemplateCatalog", "default_catalog"]
