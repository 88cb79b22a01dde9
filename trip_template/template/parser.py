"""
Template parser : TemplateFile ↔ JSON, et ré-import vers un Document.

Un composant de type inconnu n'invalide pas le fichier : il est conservé et
rendu via le placeholder « Unknown component type ».
"""
import json
import logging
import re
from typing import Any, Dict, Union

from .. import config
from ..blocks import lookup
from ..core.schemas import Document, PlacedBlock
from .schema import TemplateFile

log = logging.getLogger(__name__)


def dumps(template: TemplateFile) -> str:
    """JSON du fichier template (indentation 2)."""
    return json.dumps(template.to_dict(), indent=2, ensure_ascii=False)


def export_filename(template_name: str) -> str:
    """"Booking Confirmation" → "booking-confirmation-template.json"."""
    slug = re.sub(r"\s+", "-", template_name.lower())
    return f"{slug}-template.json"


def load_template(data: Union[str, bytes, Dict[str, Any]]) -> TemplateFile:
    """Valide un fichier template (dict ou texte JSON). ValueError si le fichier est malformé."""
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise ValueError(f"Template JSON invalide : {e}") from e
    if not isinstance(data, dict):
        raise ValueError("Template invalide : objet JSON attendu")
    return TemplateFile.model_validate(data)


def parse_template(data: Union[str, bytes, Dict[str, Any], TemplateFile]) -> Document:
    """Reconstruit un Document (sans sélection) depuis un fichier template."""
    template = data if isinstance(data, TemplateFile) else load_template(data)

    if template.version != config.TEMPLATE_VERSION:
        log.warning("Template %s : version %s (attendue %s)",
                    template.template_id, template.version, config.TEMPLATE_VERSION)

    blocks = []
    for component in template.components:
        if lookup(component.type) is None:
            log.warning("Template %s : composant %s de type inconnu %r conservé",
                        template.template_id, component.id, component.type)
        blocks.append(PlacedBlock(id=component.id, type=component.type, properties=dict(component.props)))

    return Document(name=template.template_name, blocks=tuple(blocks))
