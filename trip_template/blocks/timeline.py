"""Bloc Timeline : itinéraire jour par jour (Day 1, Day 2… dans l'ordre des services)."""
from ..core.schemas import BlockCategory, BlockDefinition, BlockType, FieldSpec

DEFINITION = BlockDefinition(
    type=BlockType.TIMELINE,
    display_name="Timeline",
    icon="⏰",
    category=BlockCategory.DATA,
    default_properties={
        "orientation": "vertical",
        "connectorColor": "#1a5490",
        "showTimes": True,
    },
)

FIELDS: list[FieldSpec] = []
