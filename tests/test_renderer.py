"""Tests renderer : un cas par type, placeholder type inconnu, props transmises, HTML."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from trip_template.blocks import lookup
from trip_template.core.schemas import BlockType, Document, PlacedBlock
from trip_template.renderer.blocks import render, render_document
from trip_template.renderer.html import render_block_html, render_document_html, style_attr
from trip_template.sample_data import sample_trip_data


@pytest.fixture
def data():
    return sample_trip_data()


def placed(block_type: str, **props) -> PlacedBlock:
    defaults = dict(lookup(block_type).default_properties)
    defaults.update(props)
    return PlacedBlock(id=f"{block_type}-1", type=block_type, properties=defaults)


def texts(node, kind):
    return [n.text for n in node.find_all(kind)]


# ── Tous les types ────────────────────────────────────────────────────────────

@pytest.mark.parametrize("block_type", [bt.value for bt in BlockType])
@pytest.mark.parametrize("record", [{}, None, {"services": "pas une liste"}])
def test_every_type_renders_on_any_record(block_type, record):
    node = render(placed(block_type), record)
    assert node.kind == block_type
    assert node.attrs == {"id": f"{block_type}-1", "type": block_type}


def test_unknown_type_placeholder(data):
    block = PlacedBlock(id="map-1", type="map", properties={"zoom": 4})
    node = render(block, data)
    assert node.kind == "unknown"
    assert node.text == "Unknown component type: map"
    assert node.props == {"zoom": 4}


# ── header ────────────────────────────────────────────────────────────────────

def test_header_default(data):
    node = render(placed("header"), data)
    assert texts(node, "logo") == ["BELLAROME"]
    assert texts(node, "title") == ["BOOKING CONFIRMATION"]
    assert texts(node, "reference") == ["Reference: BR-2025-0142"]
    assert node.style == {"backgroundColor": "#1a5490", "height": 80}


def test_header_flags_off(data):
    node = render(placed("header", showLogo=False, showReference=False), data)
    assert node.find("logo") is None
    assert node.find("reference") is None


def test_header_title_substituted(data):
    node = render(placed("header", title="Confirmation {{trip.reference}}"), data)
    assert texts(node, "title") == ["Confirmation BR-2025-0142"]


def test_header_empty_title_falls_back(data):
    node = render(placed("header", title=""), data)
    assert texts(node, "title") == ["BOOKING CONFIRMATION"]


def test_header_logo_from_env(data, monkeypatch):
    monkeypatch.setenv("TRIP_TEMPLATE_LOGO_TEXT", "ACME TRAVEL")
    node = render(placed("header"), data)
    assert texts(node, "logo") == ["ACME TRAVEL"]


def test_header_reference_unresolved_kept(data):
    del data["trip"]["reference"]
    node = render(placed("header"), data)
    assert texts(node, "reference") == ["Reference: {{trip.reference}}"]


# ── hero / content ────────────────────────────────────────────────────────────

def test_hero(data):
    node = render(placed("hero"), data)
    assert texts(node, "title") == ["Smith Family - Tuscany Adventure"]
    assert texts(node, "subtitle") == ["2025-03-15 - 2025-03-22"]
    assert node.style["height"] == 200
    assert node.style["textColor"] == "#ffffff"


def test_content_keeps_newlines(data):
    block = placed("content", title="Hello {{contact.firstName}}",
                   content="Dear {{contact.fullName}},\n\nSee you in {{trip.nope}}.")
    node = render(block, data)
    assert texts(node, "heading") == ["Hello John"]
    assert texts(node, "body") == ["Dear John Smith,\n\nSee you in {{trip.nope}}."]
    assert node.style == {"fontSize": 14, "textAlign": "left", "whiteSpace": "pre-wrap"}


# ── service_list / timeline ───────────────────────────────────────────────────

def test_service_list_one_card_per_service(data):
    node = render(placed("service_list"), data)
    cards = node.find_all("service")
    assert len(cards) == 2
    assert [c.find("name").text for c in cards] == ["Villa Toscana Resort", "Private Wine Tour"]
    assert cards[0].find("date").text == "Mar 15-22"


def test_service_list_not_filtered_by_service_types(data):
    node = render(placed("service_list", serviceTypes=["transport"]), data)
    assert len(node.find_all("service")) == 2
    assert node.props["serviceTypes"] == ["transport"]


def test_timeline_day_labels(data):
    node = render(placed("timeline"), data)
    assert texts(node, "day") == ["Day 1: Villa Toscana Resort", "Day 2: Private Wine Tour"]


def test_timeline_numbering_follows_record_order(data):
    data["services"].reverse()
    node = render(placed("timeline"), data)
    assert texts(node, "day") == ["Day 1: Private Wine Tour", "Day 2: Villa Toscana Resort"]


def test_timeline_connector_color_passthrough(data):
    node = render(placed("timeline", connectorColor="pas-une-couleur"), data)
    assert node.style["connectorColor"] == "pas-une-couleur"
    assert all(d.style["connectorColor"] == "pas-une-couleur" for d in node.find_all("day"))


def test_timeline_without_services():
    assert render(placed("timeline"), {"services": []}).find_all("day") == []


# ── pricing ───────────────────────────────────────────────────────────────────

def test_pricing_all_rows(data):
    node = render(placed("pricing"), data)
    assert texts(node, "label") == ["Subtotal:", "Deposit Required:", "Total:"]
    assert texts(node, "amount") == ["€11,200", "€2,490", "€12,450"]


def test_pricing_total_always_shown(data):
    node = render(placed("pricing", showSubtotal=False, showDeposit=False), data)
    rows = node.find_all("row")
    assert len(rows) == 1
    assert rows[0].attrs == {"role": "total"}


def test_pricing_missing_prices_keep_tokens():
    node = render(placed("pricing"), {})
    assert texts(node, "amount") == ["{{price.subtotal}}", "{{price.deposit}}", "{{price.total}}"]


# ── Props transmises sans validation ──────────────────────────────────────────

def test_styles_passed_verbatim(data):
    block = PlacedBlock(id="h", type="header", properties={"backgroundColor": "bizarre", "height": 9999, "extra": "x"})
    node = render(block, data)
    assert node.style == {"backgroundColor": "bizarre", "height": 9999}
    assert node.props["extra"] == "x"


def test_render_does_not_alias_props(data):
    block = placed("service_list")
    node = render(block, data)
    node.props["serviceTypes"].append("cruise")
    assert block.properties["serviceTypes"] == ["accommodation", "transport", "activities"]


def test_render_document_order(data):
    doc = Document(blocks=(placed("pricing"), placed("header")))
    assert [n.kind for n in render_document(doc, data)] == ["pricing", "header"]


# ── HTML ──────────────────────────────────────────────────────────────────────

def test_style_attr():
    assert style_attr({"backgroundColor": "#fff", "height": 80}) == ' style="background-color:#fff;height:80px"'
    assert style_attr({}) == ""


def test_block_html(data):
    html = render_block_html(render(placed("header"), data))
    assert 'class="tt-block tt-block--header"' in html
    assert 'data-id="header-1"' in html
    assert "BR-2025-0142" in html


def test_html_escapes_text(data):
    html = render_block_html(render(placed("content", content="<script>x</script>"), data))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_document_html(data):
    unknown = PlacedBlock(id="map-1", type="map")
    doc = Document(name="Tuscany", blocks=(placed("hero"), unknown))
    html = render_document_html(doc, data)
    assert "<!DOCTYPE html>" in html
    assert "<title>Tuscany</title>" in html
    assert "Unknown component type: map" in html


def test_document_html_empty(data):
    assert "Start Building Your Template" in render_document_html(Document(), data)
