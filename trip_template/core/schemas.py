"""
Schémas Pydantic du Template Builder.
Structure : Document → PlacedBlock → properties (PropertyValue)

BlockDefinition : entrée du registry (defaults + métadonnées palette)
PlacedBlock     : instance posée sur le canvas (id immuable, props remplacées en bloc)
Document        : liste ordonnée de blocs + sélection courante
FieldSpec       : champ éditable d'un type de bloc (panneau propriétés)
"""
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr, model_validator

from .. import config


class BlockType(str, Enum):
    HEADER       = "header"
    HERO         = "hero"
    CONTENT      = "content"
    SERVICE_LIST = "service_list"
    TIMELINE     = "timeline"
    PRICING      = "pricing"


class BlockCategory(str, Enum):
    LAYOUT = "Layout"
    DATA   = "Data"


# Valeurs scalaires ou liste de chaînes : pas d'objets imbriqués
PropertyValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr, List[StrictStr]]
Properties = Dict[str, PropertyValue]


def as_block_type(value) -> Optional[BlockType]:
    """"header" / BlockType.HEADER → BlockType ; type inconnu → None."""
    if isinstance(value, BlockType):
        return value
    try:
        return BlockType(value)
    except ValueError:
        return None


# ── Registry ────────────────────────────────────────────────────────────────

class BlockDefinition(BaseModel):
    """Entrée du registry : un type de bloc, ses métadonnées et ses props par défaut."""
    model_config = ConfigDict(frozen=True)

    type: BlockType
    display_name: str
    icon: str = ""
    category: BlockCategory
    default_properties: Properties = Field(default_factory=dict)


# ── Canvas ──────────────────────────────────────────────────────────────────

class PlacedBlock(BaseModel):
    """Bloc posé sur le canvas. `type` reste une chaîne : un type inconnu survit à l'import."""
    model_config = ConfigDict(frozen=True)

    id: str
    type: str
    properties: Properties = Field(default_factory=dict)

    @property
    def block_type(self) -> Optional[BlockType]:
        return as_block_type(self.type)


class Document(BaseModel):
    """Document en cours d'édition (une instance logique par session)."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(default_factory=config.default_template_name)
    blocks: Tuple[PlacedBlock, ...] = ()
    selected_id: Optional[str] = None

    @model_validator(mode="after")
    def _check_ids(self):
        ids = [b.id for b in self.blocks]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Ids de blocs dupliqués : {ids}")
        if self.selected_id is not None and self.selected_id not in ids:
            raise ValueError(f"selected_id {self.selected_id!r} absent du document")
        return self

    def get(self, block_id: str) -> Optional[PlacedBlock]:
        for block in self.blocks:
            if block.id == block_id:
                return block
        return None

    @property
    def selected(self) -> Optional[PlacedBlock]:
        return self.get(self.selected_id) if self.selected_id else None


# ── Panneau propriétés ──────────────────────────────────────────────────────

class FieldKind(str, Enum):
    COLOR          = "color"
    INTEGER        = "integer"
    TEXT           = "text"
    MULTILINE_TEXT = "multiline-text"
    BOOLEAN        = "boolean"


class FieldSpec(BaseModel):
    """Champ éditable d'un type de bloc. minimum/maximum : bornes inclusives (integer)."""
    model_config = ConfigDict(frozen=True)

    key: str
    kind: FieldKind
    label: str
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    placeholder: Optional[str] = None
    default: Optional[PropertyValue] = None
