"""
Schéma du fichier template exporté (JSON, clés camelCase).

{
  "templateName": "Booking Confirmation",
  "templateId":   "template-1741772400000",
  "version":      "1.0.0",
  "type":         "booking_confirmation",
  "language":     "en",
  "components":   [{"id": "header-1741772399000", "type": "header", "props": {...}}],
  "createdAt":    "2025-03-12T09:40:00.000Z"
}
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .. import config
from ..core.schemas import Properties


class TemplateComponent(BaseModel):
    """Un bloc dans le fichier. `type` libre : un type inconnu est conservé à l'import."""
    id: str
    type: str
    props: Properties = Field(default_factory=dict)


class TemplateFile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    template_name: str = Field(alias="templateName")
    template_id: str = Field(alias="templateId")
    version: str = config.TEMPLATE_VERSION
    type: str = config.TEMPLATE_TYPE
    language: str = config.TEMPLATE_LANGUAGE
    components: List[TemplateComponent] = Field(default_factory=list)
    created_at: str = Field(alias="createdAt")

    def to_dict(self) -> dict:
        """Dict au format fichier (clés camelCase, ordre du format)."""
        return self.model_dump(by_alias=True)
