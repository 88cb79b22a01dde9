"""
Substitution des variables {{path.to.field}} dans un texte.

Une seule passe : une valeur résolue n'est jamais re-substituée.
Token non résolu → laissé tel quel (aide visuelle pour l'auteur du template).
"""
import re
from typing import Any, List

from .paths import NOT_FOUND, lookup, to_display

VARIABLE_PATTERN = re.compile(r"\{\{([^}]+)\}\}")


def _is_falsy(value: Any) -> bool:
    """Falsy au sens historique : None, False, 0, NaN, "". Les listes et dicts ne le sont pas."""
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or value != value
    return False


def substitute(text: Any, record: Any) -> str:
    """
    Remplace chaque {{path}} par sa valeur dans `record`.

    Une valeur falsy (0, "", False) est traitée comme introuvable : le token
    reste visible. Comportement historique conservé. Une liste vide n'est pas
    falsy ici et s'affiche comme une chaîne vide.
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)
    if not text:
        return ""

    def replacer(match):
        raw = lookup(record, match.group(1))
        if raw is NOT_FOUND or _is_falsy(raw):
            return match.group(0)
        shown = to_display(raw)
        return match.group(0) if shown is NOT_FOUND else shown

    return VARIABLE_PATTERN.sub(replacer, text)


def find_variables(text: Any) -> List[str]:
    """Chemins des tokens présents dans `text`, dans l'ordre d'apparition."""
    if not text or not isinstance(text, str):
        return []
    return VARIABLE_PATTERN.findall(text)


def unresolved_variables(text: Any, record: Any) -> List[str]:
    """Chemins qui resteraient visibles après substitution."""
    unresolved = []
    for path in find_variables(text):
        raw = lookup(record, path)
        if raw is NOT_FOUND or _is_falsy(raw) or to_display(raw) is NOT_FOUND:
            unresolved.append(path)
    return unresolved
