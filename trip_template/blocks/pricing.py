"""Bloc Pricing : récapitulatif sous-total / acompte / total."""
from ..core.schemas import BlockCategory, BlockDefinition, BlockType, FieldSpec

DEFINITION = BlockDefinition(
    type=BlockType.PRICING,
    display_name="Price Table",
    icon="💰",
    category=BlockCategory.DATA,
    default_properties={
        "showSubtotal": True,
        "showDeposit": True,
        "tableStyle": "simple",
    },
)

FIELDS: list[FieldSpec] = []
