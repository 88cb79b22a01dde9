"""
Trip Template Builder : modèle de document, substitution de variables et rendu
de templates de confirmation de réservation.

Usage (opérations pures):
    >>> from trip_template import new_document, add_block, serialize
    >>> doc = add_block(new_document(), "header")
    >>> template = serialize(doc)

Usage (session):
    >>> from trip_template import TemplateBuilder
    >>> builder = TemplateBuilder()
    >>> builder.add("timeline")
    >>> nodes = builder.preview()
"""

# ── Core ────────────────────────────────────────────────────────────────────
from .core.schemas import (
    BlockType, BlockCategory, PropertyValue,
    BlockDefinition, PlacedBlock, Document,
    FieldKind, FieldSpec,
)
from .core.paths import NOT_FOUND, lookup as lookup_path, resolve
from .core.variables import substitute, find_variables, unresolved_variables

# ── Registry + éditeur ──────────────────────────────────────────────────────
from .blocks import lookup, all_definitions, list_by_category, palette
from .editor import INVALID, fields_for, apply_edit, coerce_value, panel_title

# ── Document + export ───────────────────────────────────────────────────────
from .document import (
    new_document, add_block, remove_block, select,
    update_properties, edit_block, move_block, rename, serialize,
)
from .template import TemplateFile, TemplateComponent, dumps, export_filename, load_template, parse_template

# ── Rendu ───────────────────────────────────────────────────────────────────
from .renderer import Node, render, render_document, render_block_html, render_document_html

from .builder import TemplateBuilder
from .sample_data import sample_trip_data

__version__ = "1.0.0"

__all__ = [
    # core
    "BlockType", "BlockCategory", "PropertyValue",
    "BlockDefinition", "PlacedBlock", "Document",
    "FieldKind", "FieldSpec",
    "NOT_FOUND", "lookup_path", "resolve",
    "substitute", "find_variables", "unresolved_variables",
    # registry + éditeur
    "lookup", "all_definitions", "list_by_category", "palette",
    "INVALID", "fields_for", "apply_edit", "coerce_value", "panel_title",
    # document + export
    "new_document", "add_block", "remove_block", "select",
    "update_properties", "edit_block", "move_block", "rename", "serialize",
    "TemplateFile", "TemplateComponent", "dumps", "export_filename", "load_template", "parse_template",
    # rendu
    "Node", "render", "render_document", "render_block_html", "render_document_html",
    "TemplateBuilder", "sample_trip_data",
]
