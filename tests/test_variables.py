"""Tests substitution {{path}} : passe unique, tokens non résolus conservés, quirk falsy."""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from trip_template.core.variables import substitute, find_variables, unresolved_variables
from trip_template.sample_data import sample_trip_data


@pytest.fixture
def data():
    return sample_trip_data()


# ── substitute ────────────────────────────────────────────────────────────────

def test_resolved_and_unresolved_tokens(data):
    result = substitute("{{trip.reference}} and {{x.y}}", data)
    assert result == "BR-2025-0142 and {{x.y}}"


def test_multiple_tokens(data):
    result = substitute("Dear {{contact.firstName}}, your trip {{trip.reference}} starts {{trip.startDate}}.", data)
    assert result == "Dear John, your trip BR-2025-0142 starts 2025-03-15."


@pytest.mark.parametrize("text", ["", "Texte sans variable", "{ simple }", "{{}}", "{{ }", "}} {{"])
def test_noop_without_tokens(data, text):
    assert substitute(text, data) == text


def test_none_returns_empty(data):
    assert substitute(None, data) == ""


def test_non_string_text(data):
    assert substitute(42, data) == "42"


def test_single_pass_no_recursion():
    record = {"a": "{{b}}", "b": "boucle"}
    assert substitute("{{a}}", record) == "{{b}}"


def test_idempotent_after_one_pass(data):
    once = substitute("{{trip.title}} / {{nope}}", data)
    assert substitute(once, data) == once


def test_path_is_not_trimmed(data):
    assert substitute("{{ trip.reference }}", data) == "{{ trip.reference }}"


def test_newlines_preserved(data):
    assert substitute("Hello {{contact.firstName}}\n\nBye", data) == "Hello John\n\nBye"


# Quirk conservé : une valeur falsy (0, "", False) laisse le token visible,
# alors que resolve() la considère trouvée.
@pytest.mark.parametrize("value", [0, 0.0, "", False, None])
def test_falsy_value_keeps_token(value):
    assert substitute("{{v}}", {"v": value}) == "{{v}}"


def test_empty_list_renders_empty():
    assert substitute("[{{tags}}]", {"tags": []}) == "[]"


def test_superscript_index_keeps_token(data):
    assert substitute("{{services.².name}}", data) == "{{services.².name}}"


def test_mapping_value_keeps_token(data):
    assert substitute("{{contact}}", data) == "{{contact}}"


def test_numeric_value_rendered(data):
    assert substitute("{{trip.totalTravelers}} travelers", data) == "4 travelers"


# ── find_variables / unresolved_variables ─────────────────────────────────────

def test_find_variables_in_order():
    assert find_variables("{{b.c}} x {{a}} {{b.c}}") == ["b.c", "a", "b.c"]


def test_find_variables_empty():
    assert find_variables("") == []
    assert find_variables(None) == []


def test_unresolved_variables(data):
    text = "{{trip.reference}} {{trip.nope}} {{contact}}"
    assert unresolved_variables(text, data) == ["trip.nope", "contact"]
