"""Renderers : arbre de présentation + peinture HTML."""
from .tree import Node
from .blocks import render, render_document
from .html import render_block_html, render_document_html

__all__ = ["Node", "render", "render_document", "render_block_html", "render_document_html"]
