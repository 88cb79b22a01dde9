"""Tests registry : définitions, catégories, lookup tolérant, tables exhaustives."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from trip_template.blocks import (
    lookup, all_definitions, list_by_category, palette, field_specs, check_exhaustive,
)
from trip_template.core.schemas import BlockCategory, BlockType


# ── lookup ────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("block_type", list(BlockType))
def test_lookup_every_type(block_type):
    definition = lookup(block_type)
    assert definition is not None
    assert definition.type == block_type


def test_lookup_by_string():
    assert lookup("service_list").display_name == "Service List"


@pytest.mark.parametrize("value", ["map", "", "HEADER", None, 3])
def test_lookup_unknown_returns_none(value):
    assert lookup(value) is None


def test_header_defaults():
    d = lookup("header").default_properties
    assert d == {
        "backgroundColor": "#1a5490",
        "height": 80,
        "showLogo": True,
        "showReference": True,
        "title": "BOOKING CONFIRMATION",
    }


def test_service_list_defaults_keep_service_types():
    d = lookup("service_list").default_properties
    assert d["serviceTypes"] == ["accommodation", "transport", "activities"]
    assert d["layout"] == "card"


# ── catégories ────────────────────────────────────────────────────────────────

def test_list_by_category_layout_order():
    types = [d.type.value for d in list_by_category(BlockCategory.LAYOUT)]
    assert types == ["header", "hero", "content"]


def test_list_by_category_data_order():
    types = [d.type.value for d in list_by_category("Data")]
    assert types == ["service_list", "timeline", "pricing"]


def test_list_by_category_unknown():
    assert list_by_category("Media") == []


def test_palette_layout_then_data():
    cats = [cat for cat, _ in palette()]
    assert cats == [BlockCategory.LAYOUT, BlockCategory.DATA]
    assert sum(len(defs) for _, defs in palette()) == len(all_definitions()) == 6


# ── champs + exhaustivité ─────────────────────────────────────────────────────

def test_field_specs_only_header_and_content():
    with_fields = {bt for bt in BlockType if field_specs(bt)}
    assert with_fields == {BlockType.HEADER, BlockType.CONTENT}


def test_field_specs_unknown_type_empty():
    assert field_specs("map") == ()


def test_check_exhaustive_raises_on_missing_type():
    table = {bt: None for bt in BlockType if bt != BlockType.PRICING}
    with pytest.raises(RuntimeError, match="pricing"):
        check_exhaustive(table, "Table test")


def test_definitions_are_frozen():
    with pytest.raises(Exception):
        lookup("header").display_name = "Autre"
