from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tree_sitter_visitor import (
    IdentifierCollisionError,
    load_interface,
    render_module,
    write_visitor_module,
)


def test_write_creates_module(tmp_path: Path, fizzbuzz_schema: Path):
    target = write_visitor_module(
        "FizzBuzzVisitor", fizzbuzz_schema, tmp_path / "gen" / "fizzbuzz_visitor.py"
    )
    assert target == tmp_path / "gen" / "fizzbuzz_visitor.py"
    source = target.read_text(encoding="utf-8")
    assert "class FizzBuzzVisitor(Generic[ReturnType]):" in source
    for name in ("visit_source_file", "visit_buzz", "visit_fizz", "def visit(self"):
        assert name in source


def test_paths_resolve_against_relative_to(tmp_path: Path, make_schema):
    make_schema(["a", "b"], name="node-types.json")
    target = write_visitor_module(
        "AbVisitor", "node-types.json", "out/ab_visitor.py", relative_to=tmp_path
    )
    assert target == tmp_path / "out" / "ab_visitor.py"
    assert "from node-types.json" in target.read_text(encoding="utf-8")


def test_unchanged_module_is_not_rewritten(tmp_path: Path, fizzbuzz_schema: Path, caplog):
    output = tmp_path / "fizzbuzz_visitor.py"
    write_visitor_module("FizzBuzzVisitor", fizzbuzz_schema, output)
    with caplog.at_level(logging.INFO, logger="tree_sitter_visitor.generate"):
        write_visitor_module("FizzBuzzVisitor", fizzbuzz_schema, output)
    assert any("up to date" in r.getMessage() for r in caplog.records)


def test_collision_leaves_no_partial_output(tmp_path: Path, make_schema):
    schema = make_schema(["-", "DASH"])
    output = tmp_path / "dash_visitor.py"
    with pytest.raises(IdentifierCollisionError):
        write_visitor_module("DashVisitor", schema, output)
    assert not output.exists()


def test_committed_example_module_matches_generator():
    root = Path(__file__).parents[1]
    committed = root / "examples" / "calculator_visitor.py"
    schema = "examples/grammars/calculator/node-types.json"
    expected = render_module(
        load_interface(schema, relative_to=root), "CalculatorVisitor", source=schema
    )
    assert committed.read_text(encoding="utf-8") == expected
