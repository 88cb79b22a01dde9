"""Bloc Header : bandeau couleur avec logo, titre et référence du voyage."""
from ..core.schemas import BlockCategory, BlockDefinition, BlockType, FieldKind, FieldSpec

DEFAULT_TITLE = "BOOKING CONFIRMATION"

DEFINITION = BlockDefinition(
    type=BlockType.HEADER,
    display_name="Header",
    icon="📄",
    category=BlockCategory.LAYOUT,
    default_properties={
        "backgroundColor": "#1a5490",
        "height": 80,
        "showLogo": True,
        "showReference": True,
        "title": DEFAULT_TITLE,
    },
)

FIELDS = [
    FieldSpec(key="backgroundColor", kind=FieldKind.COLOR,   label="Background Color"),
    FieldSpec(key="height",          kind=FieldKind.INTEGER, label="Height (px)", minimum=60, maximum=200),
    FieldSpec(key="title",           kind=FieldKind.TEXT,    label="Title", default=DEFAULT_TITLE),
    FieldSpec(key="showLogo",        kind=FieldKind.BOOLEAN, label="Show Logo"),
    FieldSpec(key="showReference",   kind=FieldKind.BOOLEAN, label="Show Reference"),
]
