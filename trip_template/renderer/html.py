"""
Renderer HTML : peint l'arbre de présentation en HTML (aperçu du template).
Classes BEM : tt-block tt-block--<type>, tt-<kind> pour les nœuds internes.
"""
import re
from html import escape
from typing import Any, Dict, List

from ..core.schemas import Document
from .blocks import render_document
from .tree import Node

# Propriétés numériques exprimées en pixels
_PX_KEYS = {"height", "fontSize"}

_TAGS = {
    "heading": "h3",
    "title": "div",
    "subtitle": "p",
    "body": "div",
    "label": "span",
    "amount": "span",
}


def _css_name(key: str) -> str:
    return re.sub(r"([A-Z])", lambda m: "-" + m.group(1).lower(), key)


def _css_value(key: str, value: Any) -> str:
    if key in _PX_KEYS and isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"{value}px"
    return str(value)


def style_attr(style: Dict[str, Any]) -> str:
    """{"backgroundColor": "#fff", "height": 80} → ' style="background-color:#fff;height:80px"'."""
    rules = [
        f"{_css_name(k)}:{_css_value(k, v)}"
        for k, v in style.items()
        if v is not None and not isinstance(v, (list, dict))
    ]
    return f' style="{escape(";".join(rules))}"' if rules else ""


def render_node(node: Node, root: bool = False) -> str:
    if root:
        classes, tag = f"tt-block tt-block--{escape(node.kind)}", "section"
    else:
        classes, tag = f"tt-{escape(node.kind)}", _TAGS.get(node.kind, "div")
    data = "".join(f' data-{k}="{escape(v)}"' for k, v in node.attrs.items())

    text = escape(node.text) if node.text is not None else ""
    inner = "".join(render_node(child) for child in node.children)
    return f'<{tag} class="{classes}"{data}{style_attr(node.style)}>{text}{inner}</{tag}>'


def render_block_html(node: Node) -> str:
    """HTML d'un bloc rendu (nœud racine)."""
    return render_node(node, root=True)


_PAGE_CSS = """
body{margin:0;background:#f9fafb;font-family:Inter,-apple-system,BlinkMacSystemFont,sans-serif}
.tt-page{width:210mm;min-height:297mm;margin:0 auto;background:#fff}
.tt-block--header{display:flex;align-items:center;justify-content:space-between;padding:20px;color:#fff}
.tt-block--hero{display:flex;flex-direction:column;align-items:center;justify-content:center}
.tt-block--content,.tt-block--service_list,.tt-block--timeline,.tt-block--pricing,.tt-block--unknown{padding:20px}
.tt-block--unknown{text-align:center;color:#6b7280}
.tt-heading{color:#2563eb;font-weight:600;font-size:18px}
.tt-service,.tt-day{background:#f9fafb;padding:16px;border-radius:8px;margin-bottom:16px}
.tt-service{border-left:4px solid #2563eb}
.tt-row{display:flex;justify-content:space-between;margin-bottom:8px}
.tt-row[data-role=total]{padding-top:8px;border-top:1px solid #d1d5db;font-weight:600}
.tt-empty{height:400px;display:flex;align-items:center;justify-content:center;color:#6b7280}
"""


def render_document_html(document: Document, record: Any) -> str:
    """Page HTML complète : tous les blocs du document, dans l'ordre."""
    nodes: List[Node] = render_document(document, record)
    if nodes:
        body = "\n".join(render_block_html(n) for n in nodes)
    else:
        body = '<div class="tt-empty">Start Building Your Template</div>'

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>{escape(document.name)}</title>
  <style>{_PAGE_CSS}</style>
</head>
<body>
<main class="tt-page">
{body}
</main>
</body>
</html>"""
