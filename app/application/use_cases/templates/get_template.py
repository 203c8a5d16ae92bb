"""Use case for retrieving a template."""

from app.domain.entities import Template
from app.domain.errors import UnknownTemplateError
from app.infrastructure.template_catalog import TemplateCatalog


def get_template(catalog: TemplateCatalog, template_id: str) -> Template:
    """Return the template identified by ``template_id`` or raise an error."""

    template = catalog.get(template_id)
    if template is None:
        raise UnknownTemplateError(template_id)
    return template
