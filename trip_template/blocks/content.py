"""Bloc Content : titre + texte libre avec variables {{...}}."""
from ..core.schemas import BlockCategory, BlockDefinition, BlockType, FieldKind, FieldSpec

DEFINITION = BlockDefinition(
    type=BlockType.CONTENT,
    display_name="Content Block",
    icon="📝",
    category=BlockCategory.LAYOUT,
    default_properties={
        "title": "Section Title",
        "content": "Enter your content here...",
        "fontSize": 14,
        "textAlign": "left",
    },
)

FIELDS = [
    FieldSpec(key="title",    kind=FieldKind.TEXT,           label="Title"),
    FieldSpec(
        key="content",
        kind=FieldKind.MULTILINE_TEXT,
        label="Content",
        placeholder="Use variables like {{trip.reference}} or {{contact.fullName}}",
    ),
    FieldSpec(key="fontSize", kind=FieldKind.INTEGER,        label="Font Size", minimum=10, maximum=24),
]
