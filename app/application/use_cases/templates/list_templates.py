"""Use case for listing the template catalog."""

from collections.abc import Sequence

from app.domain.entities import Template
from app.infrastructure.template_catalog import TemplateCatalog, default_catalog


def list_templates(catalog: TemplateCatalog | None = None) -> Sequence[Template]:
    """Return every template in catalog definition order."""

    return (catalog or default_catalog).list()
