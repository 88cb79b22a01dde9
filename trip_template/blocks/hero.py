"""Bloc Hero : titre du voyage + dates sur fond dégradé."""
from ..core.schemas import BlockCategory, BlockDefinition, BlockType, FieldSpec

DEFINITION = BlockDefinition(
    type=BlockType.HERO,
    display_name="Hero Section",
    icon="🖼️",
    category=BlockCategory.LAYOUT,
    default_properties={
        "height": 200,
        "textColor": "#ffffff",
    },
)

FIELDS: list[FieldSpec] = []
