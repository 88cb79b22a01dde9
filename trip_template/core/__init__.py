"""Core module pour trip_template."""
from .schemas import (
    BlockType,
    BlockCategory,
    PropertyValue,
    Properties,
    BlockDefinition,
    PlacedBlock,
    Document,
    FieldKind,
    FieldSpec,
    as_block_type,
)
from .paths import NOT_FOUND, lookup, resolve
from .variables import substitute, find_variables, unresolved_variables

__all__ = [
    "BlockType",
    "BlockCategory",
    "PropertyValue",
    "Properties",
    "BlockDefinition",
    "PlacedBlock",
    "Document",
    "FieldKind",
    "FieldSpec",
    "as_block_type",
    "NOT_FOUND",
    "lookup",
    "resolve",
    "substitute",
    "find_variables",
    "unresolved_variables",
]
