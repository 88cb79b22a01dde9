"""
Router FastAPI : endpoints template builder.

GET  /template-builder/catalog             → palette (Layout puis Data)
GET  /template-builder/fields/{block_type} → champs éditables d'un type
GET  /template-builder/sample-data         → record de voyage de démonstration
POST /template-builder/render              → template (+ data) → HTMLResponse
POST /template-builder/preview             → template (+ data) → arbres de présentation
POST /template-builder/validate            → {"valid": bool, "error"?}
POST /template-builder/export              → document → fichier JSON téléchargeable
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse, Response
from pydantic import BaseModel, Field, ValidationError

from .blocks import lookup, palette
from .core.schemas import Document, PlacedBlock, Properties
from .document import serialize
from .editor import NO_PROPERTIES_MESSAGE, fields_for, panel_title
from .renderer.blocks import render_document
from .renderer.html import render_document_html
from .sample_data import sample_trip_data
from .template.parser import dumps, export_filename, parse_template

log = logging.getLogger(__name__)

router = APIRouter(prefix="/template-builder", tags=["template_builder"])


class RenderRequest(BaseModel):
    template: Dict[str, Any]
    data: Optional[Dict[str, Any]] = None


class ExportBlock(BaseModel):
    id: str
    type: str
    props: Properties = Field(default_factory=dict)


class ExportRequest(BaseModel):
    name: str
    components: List[ExportBlock] = Field(default_factory=list)


def _document(template: Dict[str, Any]) -> Document:
    try:
        return parse_template(template)
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/catalog", summary="Palette des blocs disponibles")
def catalog() -> JSONResponse:
    """Définitions groupées par catégorie, dans l'ordre du catalogue."""
    return JSONResponse({
        "categories": [
            {
                "category": cat.value,
                "blocks": [d.model_dump(mode="json") for d in definitions],
            }
            for cat, definitions in palette()
        ]
    })


@router.get("/fields/{block_type}", summary="Champs éditables d'un type de bloc")
def fields(block_type: str) -> JSONResponse:
    if lookup(block_type) is None:
        return JSONResponse({"error": f"Type de bloc inconnu : {block_type!r}"}, status_code=404)
    specs = fields_for(block_type)
    return JSONResponse({
        "title": panel_title(block_type),
        "fields": [s.model_dump(mode="json") for s in specs],
        "message": None if specs else NO_PROPERTIES_MESSAGE,
    })


@router.get("/sample-data", summary="Record de voyage de démonstration")
def sample_data() -> dict:
    return sample_trip_data()


@router.post("/render", response_class=HTMLResponse, summary="Rend un template en HTML")
def render(req: RenderRequest) -> HTMLResponse:
    document = _document(req.template)
    data = req.data if req.data is not None else sample_trip_data()
    return HTMLResponse(content=render_document_html(document, data))


@router.post("/preview", summary="Arbres de présentation d'un template")
def preview(req: RenderRequest) -> JSONResponse:
    document = _document(req.template)
    data = req.data if req.data is not None else sample_trip_data()
    return JSONResponse({"blocks": [n.model_dump(mode="json") for n in render_document(document, data)]})


@router.post("/validate", summary="Valide un template sans le rendre")
def validate(template: Dict[str, Any]) -> dict:
    try:
        document = parse_template(template)
    except (ValidationError, ValueError) as e:
        return {"valid": False, "error": str(e)}
    unknown = [b.type for b in document.blocks if lookup(b.type) is None]
    return {"valid": True, "unknown_types": unknown}


@router.post("/export", summary="Exporte un document en fichier template JSON")
def export(req: ExportRequest) -> Response:
    try:
        document = Document(
            name=req.name,
            blocks=tuple(PlacedBlock(id=b.id, type=b.type, properties=b.props) for b in req.components),
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    filename = export_filename(document.name)
    log.info("Export template %s (%d blocs)", filename, len(document.blocks))
    return Response(
        content=dumps(serialize(document)),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
