"""
Registry des blocs : catalogue statique (type → définition, type → champs éditables).

Les deux tables couvrent obligatoirement tous les BlockType : un type ajouté
sans définition ou sans entrée de champs fait échouer l'import.
"""
import logging
from typing import Dict, List, Optional, Tuple

from ..core.schemas import BlockCategory, BlockDefinition, BlockType, FieldSpec, as_block_type
from . import header, hero, content, service_list, timeline, pricing

log = logging.getLogger(__name__)

# Ordre d'insertion = ordre d'affichage dans la palette
_BLOCK_REGISTRY: Dict[BlockType, BlockDefinition] = {
    BlockType.HEADER:       header.DEFINITION,
    BlockType.HERO:         hero.DEFINITION,
    BlockType.CONTENT:      content.DEFINITION,
    BlockType.SERVICE_LIST: service_list.DEFINITION,
    BlockType.TIMELINE:     timeline.DEFINITION,
    BlockType.PRICING:      pricing.DEFINITION,
}

_FIELD_SCHEMA: Dict[BlockType, Tuple[FieldSpec, ...]] = {
    BlockType.HEADER:       tuple(header.FIELDS),
    BlockType.HERO:         tuple(hero.FIELDS),
    BlockType.CONTENT:      tuple(content.FIELDS),
    BlockType.SERVICE_LIST: tuple(service_list.FIELDS),
    BlockType.TIMELINE:     tuple(timeline.FIELDS),
    BlockType.PRICING:      tuple(pricing.FIELDS),
}


def check_exhaustive(table: dict, name: str) -> None:
    missing = set(BlockType) - set(table)
    if missing:
        raise RuntimeError(f"{name} incomplet, types sans entrée : {sorted(t.value for t in missing)}")


check_exhaustive(_BLOCK_REGISTRY, "Registry des blocs")
check_exhaustive(_FIELD_SCHEMA, "Schéma des champs")


def lookup(block_type) -> Optional[BlockDefinition]:
    """Définition d'un type de bloc, ou None si le type n'est pas enregistré."""
    bt = as_block_type(block_type)
    if bt is None:
        log.debug("Type de bloc inconnu : %r", block_type)
        return None
    return _BLOCK_REGISTRY[bt]


def all_definitions() -> List[BlockDefinition]:
    return list(_BLOCK_REGISTRY.values())


def list_by_category(category) -> List[BlockDefinition]:
    """Définitions d'une catégorie, dans l'ordre du catalogue."""
    try:
        cat = BlockCategory(category)
    except ValueError:
        return []
    return [d for d in _BLOCK_REGISTRY.values() if d.category == cat]


def palette() -> List[Tuple[BlockCategory, List[BlockDefinition]]]:
    """Palette groupée : Layout puis Data."""
    return [(cat, list_by_category(cat)) for cat in (BlockCategory.LAYOUT, BlockCategory.DATA)]


def field_specs(block_type) -> Tuple[FieldSpec, ...]:
    """Champs éditables d'un type (tuple vide si aucun ou type inconnu)."""
    bt = as_block_type(block_type)
    return _FIELD_SCHEMA[bt] if bt is not None else ()


__all__ = [
    "lookup",
    "all_definitions",
    "list_by_category",
    "palette",
    "field_specs",
    "check_exhaustive",
]
