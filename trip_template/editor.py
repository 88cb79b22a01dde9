"""
Panneau propriétés : champs éditables par type de bloc + normalisation des saisies.

Aide à l'édition, pas un formulaire validant : une valeur hors bornes est
ramenée dans l'intervalle, une valeur illisible est ignorée (valeur précédente
conservée). Aucune erreur n'est remontée à l'utilisateur.
"""
import logging
import math
import re
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from .blocks import field_specs, lookup
from .core.schemas import FieldKind, FieldSpec, PlacedBlock, Properties, PropertyValue

log = logging.getLogger(__name__)

NO_PROPERTIES_MESSAGE = "No properties available for this component"


class _Invalid:
    """Sentinelle « saisie rejetée »."""

    def __bool__(self):
        return False

    def __repr__(self):
        return "INVALID"


INVALID = _Invalid()

_PROPERTY_VALUE = TypeAdapter(PropertyValue)

_COLOR_RE   = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_TRUE_WORDS  = {"true", "on", "yes", "1"}
_FALSE_WORDS = {"false", "off", "no", "0", ""}


def is_property_value(value: Any) -> bool:
    """Scalaire (bool, int, float, str) ou liste de chaînes."""
    try:
        _PROPERTY_VALUE.validate_python(value)
    except ValidationError:
        return False
    return True


def fields_for(block_type) -> Tuple[FieldSpec, ...]:
    """Champs éditables, dans l'ordre d'affichage. Vide → NO_PROPERTIES_MESSAGE côté shell."""
    return field_specs(block_type)


def panel_title(block_type) -> str:
    """"service_list" → "SERVICE LIST"."""
    value = getattr(block_type, "value", block_type)
    return str(value).replace("_", " ").upper()


# ── Coercion ────────────────────────────────────────────────────────────────

def _parse_int(raw: Any) -> Optional[int]:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    if isinstance(raw, str):
        # Comme un champ number : "12px" → 12, "abc" → rejet
        m = _LEADING_INT.match(raw)
        return int(m.group(1)) if m else None
    return None


def clamp(value: int, minimum: Optional[int], maximum: Optional[int]) -> int:
    if minimum is not None and value < minimum:
        return minimum
    if maximum is not None and value > maximum:
        return maximum
    return value


def coerce_value(spec: FieldSpec, raw: Any) -> Any:
    """Normalise une saisie selon le champ ; INVALID si illisible."""
    if spec.kind == FieldKind.INTEGER:
        parsed = _parse_int(raw)
        if parsed is None:
            return INVALID
        clamped = clamp(parsed, spec.minimum, spec.maximum)
        if clamped != parsed:
            log.debug("Champ %s : %s ramené à %s", spec.key, parsed, clamped)
        return clamped

    if spec.kind == FieldKind.BOOLEAN:
        if isinstance(raw, bool):
            return raw
        word = str(raw).strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        return INVALID

    if spec.kind == FieldKind.COLOR:
        if isinstance(raw, str) and _COLOR_RE.match(raw.strip()):
            return raw.strip().lower()
        return INVALID

    # text / multiline-text
    if raw is None or isinstance(raw, (dict, list)):
        return INVALID
    return raw if isinstance(raw, str) else str(raw)


# ── Édition ─────────────────────────────────────────────────────────────────

def _spec(block_type, key: str) -> Optional[FieldSpec]:
    return next((s for s in fields_for(block_type) if s.key == key), None)


def _fallback(block_type, spec: FieldSpec, previous: Mapping[str, Any]) -> Any:
    if spec.key in previous:
        return previous[spec.key]
    definition = lookup(block_type)
    if definition is not None and spec.key in definition.default_properties:
        return definition.default_properties[spec.key]
    return spec.default


def apply_edit(block: PlacedBlock, key: str, value: Any) -> Properties:
    """
    Fusionne une saisie dans une copie des props du bloc (à passer ensuite à update_properties).

    Champ déclaré : valeur normalisée (bornes, format) ; saisie rejetée → valeur actuelle.
    Clé non déclarée : stockée telle quelle si c'est une PropertyValue, sinon ignorée.
    """
    props: Dict[str, Any] = dict(block.properties)
    spec = _spec(block.type, key)
    if spec is None:
        if is_property_value(value):
            props[key] = value
        else:
            log.info("Bloc %s : valeur %r ignorée pour la clé libre %s", block.id, value, key)
        return props

    coerced = coerce_value(spec, value)
    if coerced is INVALID:
        log.info("Bloc %s : saisie %r ignorée pour %s", block.id, value, key)
        fallback = _fallback(block.type, spec, block.properties)
        if fallback is not None:
            props[key] = fallback
        return props
    props[key] = coerced
    return props


def normalize_properties(
    block_type,
    properties: Mapping[str, Any],
    previous: Optional[Mapping[str, Any]] = None,
) -> Properties:
    """
    Normalise une map complète de props : chaque clé déclarée est bornée/validée,
    les clés inconnues sont conservées telles quelles si leur valeur est une
    PropertyValue (sinon valeur précédente, ou clé retirée).
    """
    previous = previous or {}
    result: Dict[str, Any] = dict(properties)
    declared = {s.key for s in fields_for(block_type)}
    for key in [k for k in result if k not in declared]:
        if is_property_value(result[key]):
            continue
        log.info("Clé libre %s : %r rejetée", key, result[key])
        if key in previous and is_property_value(previous[key]):
            result[key] = previous[key]
        else:
            del result[key]
    for spec in fields_for(block_type):
        if spec.key not in result:
            continue
        coerced = coerce_value(spec, result[spec.key])
        if coerced is INVALID:
            fallback = _fallback(block_type, spec, previous)
            log.info("Champ %s : %r rejeté, remplacé par %r", spec.key, result[spec.key], fallback)
            if fallback is None:
                del result[spec.key]
            else:
                result[spec.key] = fallback
        else:
            result[spec.key] = coerced
    return result
