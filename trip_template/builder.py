"""
API session du Template Builder.
"""
from typing import Any, List, Optional

from . import document as ops
from .core.schemas import Document, FieldSpec
from .editor import fields_for
from .renderer.blocks import render, render_document
from .renderer.html import render_document_html
from .renderer.tree import Node
from .sample_data import sample_trip_data
from .template.parser import dumps, export_filename
from .template.schema import TemplateFile


class TemplateBuilder:
    """
    Session d'édition : détient le document courant et le record d'aperçu.

    Usage:
        >>> builder = TemplateBuilder()
        >>> builder.add("header")
        >>> builder.add("pricing")
        >>> filename, payload = builder.export()
    """

    def __init__(self, document: Optional[Document] = None, trip_data: Optional[dict] = None):
        """
        Args:
            document: Document de départ (vide par défaut)
            trip_data: Record de voyage pour l'aperçu (record de démonstration par défaut)
        """
        self.document = document or ops.new_document()
        self.trip_data = trip_data if trip_data is not None else sample_trip_data()

    # Drop palette → canvas : exactement un add_block
    def add(self, block_type) -> Optional[str]:
        """Ajoute un bloc, retourne son id (None si type inconnu)."""
        before = self.document
        self.document = ops.add_block(self.document, block_type)
        return self.document.selected_id if self.document is not before else None

    def remove(self, block_id: str) -> None:
        self.document = ops.remove_block(self.document, block_id)

    def select(self, block_id: Optional[str]) -> None:
        self.document = ops.select(self.document, block_id)

    def edit(self, block_id: str, key: str, value: Any) -> None:
        self.document = ops.edit_block(self.document, block_id, key, value)

    def move(self, block_id: str, new_index: int) -> None:
        self.document = ops.move_block(self.document, block_id, new_index)

    def rename(self, name: str) -> None:
        self.document = ops.rename(self.document, name)

    def selected_fields(self) -> List[FieldSpec]:
        """Champs du bloc sélectionné (vide si aucune sélection)."""
        selected = self.document.selected
        return list(fields_for(selected.type)) if selected else []

    def preview(self) -> List[Node]:
        return render_document(self.document, self.trip_data)

    def preview_block(self, block_id: str) -> Optional[Node]:
        block = self.document.get(block_id)
        return render(block, self.trip_data) if block else None

    def preview_html(self) -> str:
        return render_document_html(self.document, self.trip_data)

    def serialize(self) -> TemplateFile:
        return ops.serialize(self.document)

    def export(self) -> tuple[str, str]:
        """
        Exporte le template.

        Returns:
            (nom de fichier, JSON du template)
        """
        return export_filename(self.document.name), dumps(self.serialize())
