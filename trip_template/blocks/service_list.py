"""Bloc Service List : une carte par prestation du voyage."""
from ..core.schemas import BlockCategory, BlockDefinition, BlockType, FieldSpec

DEFINITION = BlockDefinition(
    type=BlockType.SERVICE_LIST,
    display_name="Service List",
    icon="📋",
    category=BlockCategory.DATA,
    default_properties={
        # Conservé et exporté, mais ne filtre pas le rendu (voir DESIGN.md)
        "serviceTypes": ["accommodation", "transport", "activities"],
        "layout": "card",
    },
)

FIELDS: list[FieldSpec] = []
