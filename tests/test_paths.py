"""Tests path resolver : navigation dict/liste, coercion, chemins absents."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from trip_template.core.paths import NOT_FOUND, lookup, resolve
from trip_template.sample_data import sample_trip_data


@pytest.fixture
def data():
    return sample_trip_data()


# ── resolve : chemins présents ────────────────────────────────────────────────

@pytest.mark.parametrize("path, expected", [
    ("trip.reference", "BR-2025-0142"),
    ("trip.title", "Smith Family - Tuscany Adventure"),
    ("contact.fullName", "John Smith"),
    ("price.total", "€12,450"),
    ("services.1.name", "Private Wine Tour"),
])
def test_resolve_present_paths(data, path, expected):
    assert resolve(data, path) == expected


def test_resolve_coerces_int(data):
    assert resolve(data, "trip.duration") == "7"


def test_resolve_coerces_bool_and_float():
    record = {"flags": {"paid": True, "late": False}, "amount": 12.0, "rate": 0.5}
    assert resolve(record, "flags.paid") == "true"
    assert resolve(record, "flags.late") == "false"
    assert resolve(record, "amount") == "12"
    assert resolve(record, "rate") == "0.5"


def test_resolve_zero_is_found():
    assert resolve({"n": 0}, "n") == "0"


def test_resolve_list_of_scalars_joined():
    assert resolve({"tags": ["a", "b", 3]}, "tags") == "a,b,3"


# ── resolve : chemins absents ─────────────────────────────────────────────────

@pytest.mark.parametrize("path", [
    "trip.missing",
    "missing.reference",
    "trip.reference.deeper",
    "services.9.name",
    "services.first.name",
    "contact",
])
def test_resolve_not_found(data, path):
    assert resolve(data, path) is NOT_FOUND


@pytest.mark.parametrize("segment", ["²", "³", "1²", "-1", "+0"])
def test_resolve_non_ascii_or_signed_index_not_found(segment):
    record = {"services": [{"name": "A"}, {"name": "B"}]}
    assert lookup(record, f"services.{segment}") is NOT_FOUND
    assert resolve(record, f"services.{segment}.name") is NOT_FOUND


def test_resolve_none_leaf_not_found():
    assert resolve({"a": None}, "a") is NOT_FOUND


def test_resolve_non_mapping_record():
    assert resolve(None, "a.b") is NOT_FOUND
    assert resolve("texte", "a") is NOT_FOUND


def test_lookup_returns_raw_value(data):
    assert lookup(data, "trip.duration") == 7
    assert isinstance(lookup(data, "services"), list)


def test_not_found_is_falsy_singleton():
    assert not NOT_FOUND
    assert repr(NOT_FOUND) == "NOT_FOUND"
    assert type(NOT_FOUND)() is NOT_FOUND


def test_record_not_mutated(data):
    before = sample_trip_data()
    resolve(data, "services.0.name")
    lookup(data, "trip.missing")
    assert data == before
