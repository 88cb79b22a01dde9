"""
Renderer des blocs : (PlacedBlock, record) → Node.

Fonction pure et totale : un renderer par BlockType (table exhaustive), et un
placeholder visible pour les types inconnus (template produit par un schéma plus récent).
Les props de style sont transmises telles quelles, sans validation.
"""
import copy
import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, List

from .. import config
from ..blocks import check_exhaustive
from ..blocks.header import DEFAULT_TITLE
from ..core.paths import NOT_FOUND, resolve
from ..core.schemas import BlockType, Document, PlacedBlock
from ..core.variables import substitute
from .tree import Node

log = logging.getLogger(__name__)

HERO_BACKGROUND = "linear-gradient(to right, #2563eb, #1e40af)"


# ── Helpers ─────────────────────────────────────────────────────────────────

def _root(block: PlacedBlock, style_keys: List[str], children: List[Node], **extra_style) -> Node:
    p = block.properties
    style = {k: p[k] for k in style_keys if k in p}
    style.update(extra_style)
    return Node(
        kind=block.type,
        style=style,
        props=copy.deepcopy(dict(p)),
        attrs={"id": block.id, "type": block.type},
        children=children,
    )


def _services(record: Any) -> List[Mapping]:
    services = record.get("services") if isinstance(record, Mapping) else None
    if not isinstance(services, (list, tuple)):
        return []
    return [s for s in services if isinstance(s, Mapping)]


def _field(service: Mapping, key: str) -> str:
    value = resolve(service, key)
    return "" if value is NOT_FOUND else value


def _heading(text: str) -> Node:
    return Node(kind="heading", text=text)


# ── Renderers par type ──────────────────────────────────────────────────────

def render_header(block: PlacedBlock, record: Any) -> Node:
    p = block.properties
    children = []
    if p.get("showLogo"):
        children.append(Node(kind="logo", text=config.logo_text()))
    children.append(Node(kind="title", text=substitute(p.get("title") or DEFAULT_TITLE, record)))
    if p.get("showReference"):
        children.append(Node(kind="reference", text=f"Reference: {substitute('{{trip.reference}}', record)}"))
    return _root(block, ["backgroundColor", "height"], children)


def render_hero(block: PlacedBlock, record: Any) -> Node:
    children = [
        Node(kind="title", text=substitute("{{trip.title}}", record)),
        Node(kind="subtitle", text=substitute("{{trip.startDate}} - {{trip.endDate}}", record)),
    ]
    return _root(block, ["height", "textColor"], children, background=HERO_BACKGROUND)


def render_content(block: PlacedBlock, record: Any) -> Node:
    p = block.properties
    children = [
        Node(kind="heading", text=substitute(p.get("title"), record)),
        # Les retours à la ligne littéraux sont conservés (white-space: pre-wrap)
        Node(kind="body", text=substitute(p.get("content"), record)),
    ]
    return _root(block, ["fontSize", "textAlign"], children, whiteSpace="pre-wrap")


def _service_children(service: Mapping) -> List[Node]:
    return [
        Node(kind="date", text=_field(service, "date")),
        Node(kind="description", text=_field(service, "description")),
    ]


def render_service_list(block: PlacedBlock, record: Any) -> Node:
    # serviceTypes n'est pas appliqué comme filtre (voir DESIGN.md)
    cards = [
        Node(
            kind="service",
            children=[Node(kind="name", text=_field(s, "name"))] + _service_children(s),
        )
        for s in _services(record)
    ]
    return _root(block, ["layout"], [_heading("Services Included")] + cards)


def render_timeline(block: PlacedBlock, record: Any) -> Node:
    days = [
        Node(
            kind="day",
            text=f"Day {i}: {_field(s, 'name')}",
            style={"connectorColor": block.properties.get("connectorColor")},
            children=_service_children(s),
        )
        for i, s in enumerate(_services(record), 1)
    ]
    return _root(block, ["orientation", "connectorColor"], [_heading("Day by Day Itinerary")] + days)


def _row(label: str, path: str, record: Any, total: bool = False) -> Node:
    return Node(
        kind="row",
        attrs={"role": "total"} if total else {},
        children=[Node(kind="label", text=label), Node(kind="amount", text=substitute(path, record))],
    )


def render_pricing(block: PlacedBlock, record: Any) -> Node:
    p = block.properties
    rows = []
    if p.get("showSubtotal"):
        rows.append(_row("Subtotal:", "{{price.subtotal}}", record))
    if p.get("showDeposit"):
        rows.append(_row("Deposit Required:", "{{price.deposit}}", record))
    rows.append(_row("Total:", "{{price.total}}", record, total=True))
    return _root(block, ["tableStyle"], [_heading("Price Summary")] + rows)


def render_unknown(block: PlacedBlock, record: Any) -> Node:
    return Node(
        kind="unknown",
        text=f"Unknown component type: {block.type}",
        props=copy.deepcopy(dict(block.properties)),
        attrs={"id": block.id, "type": block.type},
    )


_RENDERERS: Dict[BlockType, Callable[[PlacedBlock, Any], Node]] = {
    BlockType.HEADER:       render_header,
    BlockType.HERO:         render_hero,
    BlockType.CONTENT:      render_content,
    BlockType.SERVICE_LIST: render_service_list,
    BlockType.TIMELINE:     render_timeline,
    BlockType.PRICING:      render_pricing,
}

check_exhaustive(_RENDERERS, "Table des renderers")


# ── Points d'entrée ─────────────────────────────────────────────────────────

def render(block: PlacedBlock, record: Any) -> Node:
    """Rend un bloc posé contre le record de voyage (jamais d'exception pour un type inconnu)."""
    bt = block.block_type
    if bt is None:
        log.info("Bloc %s : type inconnu %r, placeholder rendu", block.id, block.type)
        return render_unknown(block, record)
    return _RENDERERS[bt](block, record)


def render_document(document: Document, record: Any) -> List[Node]:
    """Rend tous les blocs du document, dans l'ordre de la page."""
    return [render(b, record) for b in document.blocks]
