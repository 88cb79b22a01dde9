"""
Path resolver : "trip.reference" → valeur dans un record imbriqué.

Navigation clé par clé (dict) ou index décimal (liste). Tout segment absent ou
non indexable court-circuite vers NOT_FOUND, sans exception.
"""
from collections.abc import Mapping
from typing import Any


class _NotFound:
    """Sentinelle « chemin introuvable » (falsy, singleton)."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "NOT_FOUND"


NOT_FOUND = _NotFound()


def _step(node: Any, segment: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(segment, NOT_FOUND)
    if isinstance(node, (list, tuple)) and segment.isascii() and segment.isdigit():
        index = int(segment)
        return node[index] if index < len(node) else NOT_FOUND
    return NOT_FOUND


def lookup(record: Any, path: str) -> Any:
    """Valeur brute au bout de `path`, ou NOT_FOUND."""
    node = record
    for segment in path.split("."):
        node = _step(node, segment)
        if node is NOT_FOUND:
            return NOT_FOUND
    return node


def to_display(value: Any) -> Any:
    """Valeur brute → chaîne affichable (NOT_FOUND si non affichable)."""
    if value is None or value is NOT_FOUND or isinstance(value, Mapping):
        return NOT_FOUND
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        if any(isinstance(v, (Mapping, list, tuple)) for v in value):
            return NOT_FOUND
        return ",".join("" if v is None else to_display(v) for v in value)
    return str(value)


def resolve(record: Any, path: str) -> Any:
    """
    Résout `path` dans `record` et coerce la feuille en chaîne.

    >>> resolve({"trip": {"duration": 7}}, "trip.duration")
    '7'
    >>> resolve({"trip": {}}, "trip.reference")
    NOT_FOUND
    """
    return to_display(lookup(record, path))
