from __future__ import annotations

import pytest

from tree_sitter_visitor.errors import IdentifierCollisionError
from tree_sitter_visitor.sanitize import sanitize_identifier
from tree_sitter_visitor.schema import NodeKind, load_schema
from tree_sitter_visitor.synthesize import GeneratedMethod, synthesize


def _kinds(*names: str) -> list[NodeKind]:
    return [NodeKind(raw_name=name) for name in names]


def test_generation_is_deterministic(calculator_schema):
    first = synthesize(load_schema(calculator_schema))
    second = synthesize(load_schema(calculator_schema))
    assert first.method_names == second.method_names
    assert list(first.dispatch.items()) == list(second.dispatch.items())


def test_one_method_per_kind(calculator_schema):
    kinds = load_schema(calculator_schema)
    interface = synthesize(kinds)
    for kind in kinds:
        expected = f"visit_{sanitize_identifier(kind.raw_name)}"
        assert interface.method_names.count(expected) == 1
        assert interface.dispatch[kind.raw_name] == expected
    assert len(interface.methods) == len(kinds)


def test_dispatch_follows_schema_order():
    interface = synthesize(_kinds("b", "a", ",", "c"))
    assert list(interface.dispatch) == ["b", "a", ",", "c"]
    assert interface.method_names == ("visit_b", "visit_a", "visit_COMMA", "visit_c")


def test_repeated_raw_name_collapses_to_first_arm():
    interface = synthesize(_kinds("identifier", "x", "identifier"))
    assert interface.method_names == ("visit_identifier", "visit_x")
    assert list(interface.dispatch) == ["identifier", "x"]


def test_distinct_names_with_same_identifier_are_rejected():
    with pytest.raises(IdentifierCollisionError) as info:
        synthesize(_kinds("number", "+", "PLUS"))
    assert info.value.identifier == "PLUS"
    assert info.value.raw_names == ("+", "PLUS")
    assert "visit_PLUS" in str(info.value)


def test_dropped_characters_can_collide():
    with pytest.raises(IdentifierCollisionError) as info:
        synthesize(_kinds("é", "ü"))
    assert info.value.identifier == ""


def test_single_unsupported_name_degenerates_to_bare_prefix():
    interface = synthesize(_kinds("é"))
    assert interface.method_names == ("visit_",)


def test_method_docs_embed_raw_name():
    method = GeneratedMethod(raw_name=",", identifier="COMMA")
    assert method.name == "visit_COMMA"
    assert method.doc == "Visits a node of type ``','``."


def test_invalid_kind_attribute_rejected():
    with pytest.raises(ValueError):
        synthesize(_kinds("x"), kind_attribute="not valid")
    with pytest.raises(ValueError):
        synthesize(_kinds("x"), kind_attribute="class")


def test_dispatch_table_is_read_only():
    interface = synthesize(_kinds("x"))
    with pytest.raises(TypeError):
        interface.dispatch["y"] = "visit_y"  # type: ignore[index]
