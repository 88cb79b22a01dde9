"""
Document model : opérations pures sur le document (chaque appel retourne un nouveau Document).

Le shell détient le document courant ; il appelle ces fonctions à chaque action
utilisateur puis re-rend. Aucune opération ne rappelle le shell.
"""
import copy
import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Optional

from . import config
from .blocks import lookup
from .core.schemas import Document, PlacedBlock
from .editor import apply_edit, normalize_properties
from .template.schema import TemplateComponent, TemplateFile

log = logging.getLogger(__name__)

IdFactory = Callable[[str, Iterable[str]], str]


def _millis(now: Optional[datetime] = None) -> int:
    if now is None:
        return int(time.time() * 1000)
    return int(now.timestamp() * 1000)


def new_block_id(block_type: str, existing: Iterable[str]) -> str:
    """"<type>-<epoch ms>", suffixé -2, -3… si l'id existe déjà dans le document."""
    taken = set(existing)
    base = f"{block_type}-{_millis()}"
    candidate, n = base, 1
    while candidate in taken:
        n += 1
        candidate = f"{base}-{n}"
    return candidate


def new_document(name: Optional[str] = None) -> Document:
    return Document(name=name if name is not None else config.default_template_name())


# ── Opérations ──────────────────────────────────────────────────────────────

def add_block(document: Document, block_type, id_factory: Optional[IdFactory] = None) -> Document:
    """Ajoute un bloc (props = copie des defaults) en fin de page et le sélectionne. Type inconnu → no-op."""
    definition = lookup(block_type)
    if definition is None:
        log.warning("add_block : type inconnu %r, document inchangé", block_type)
        return document

    type_name = definition.type.value
    existing = [b.id for b in document.blocks]
    block_id = (id_factory or new_block_id)(type_name, existing)
    if block_id in existing:
        raise RuntimeError(f"Id de bloc déjà utilisé : {block_id!r}")

    block = PlacedBlock(
        id=block_id,
        type=type_name,
        properties=copy.deepcopy(dict(definition.default_properties)),
    )
    log.debug("Bloc ajouté : %s", block_id)
    return Document(name=document.name, blocks=document.blocks + (block,), selected_id=block_id)


def remove_block(document: Document, block_id: str) -> Document:
    """Retire le bloc ; la sélection est effacée si elle le désignait."""
    blocks = tuple(b for b in document.blocks if b.id != block_id)
    if len(blocks) == len(document.blocks):
        log.debug("remove_block : %s absent", block_id)
        return document
    selected = None if document.selected_id == block_id else document.selected_id
    return Document(name=document.name, blocks=blocks, selected_id=selected)


def select(document: Document, block_id: Optional[str]) -> Document:
    """Sélectionne un bloc (None → désélection). Un id absent est ignoré."""
    if block_id is not None and document.get(block_id) is None:
        log.warning("select : bloc %s absent, sélection inchangée", block_id)
        return document
    return Document(name=document.name, blocks=document.blocks, selected_id=block_id)


def update_properties(document: Document, block_id: str, new_properties: dict) -> Document:
    """
    Remplace intégralement les props du bloc (pas de fusion : l'appelant fusionne avant).
    Les champs déclarés sont bornés/validés ; bloc absent → document inchangé.
    """
    target = document.get(block_id)
    if target is None:
        log.debug("update_properties : %s absent, document inchangé", block_id)
        return document

    props = normalize_properties(target.type, new_properties, previous=target.properties)
    updated = PlacedBlock(id=target.id, type=target.type, properties=copy.deepcopy(props))
    blocks = tuple(updated if b.id == block_id else b for b in document.blocks)
    return Document(name=document.name, blocks=blocks, selected_id=document.selected_id)


def edit_block(document: Document, block_id: str, key: str, value: Any) -> Document:
    """Édition d'un champ depuis le panneau propriétés (fusion + remplacement)."""
    target = document.get(block_id)
    if target is None:
        return document
    return update_properties(document, block_id, apply_edit(target, key, value))


def move_block(document: Document, block_id: str, new_index: int) -> Document:
    """Déplace un bloc à `new_index` (borné à la page). L'ordre pilote la numérotation timeline."""
    blocks = list(document.blocks)
    index = next((i for i, b in enumerate(blocks) if b.id == block_id), None)
    if index is None:
        return document
    block = blocks.pop(index)
    new_index = max(0, min(new_index, len(blocks)))
    blocks.insert(new_index, block)
    return Document(name=document.name, blocks=tuple(blocks), selected_id=document.selected_id)


def rename(document: Document, name: str) -> Document:
    return Document(name=name, blocks=document.blocks, selected_id=document.selected_id)


# ── Export ──────────────────────────────────────────────────────────────────

def _iso_utc(now: datetime) -> str:
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def serialize(document: Document, now: Optional[datetime] = None) -> TemplateFile:
    """Instantané du document au format fichier (aucune référence partagée avec le document)."""
    now = now or datetime.now(timezone.utc)
    return TemplateFile(
        template_name=document.name,
        template_id=f"template-{_millis(now)}",
        components=[
            TemplateComponent(id=b.id, type=b.type, props=copy.deepcopy(dict(b.properties)))
            for b in document.blocks
        ],
        created_at=_iso_utc(now),
    )
