"""Shared pytest fixtures for tree-sitter-visitor tests."""

import json
from pathlib import Path

import pytest

GRAMMARS_DIR = Path(__file__).parent / "grammars"


# Helper functions for writing node-types schemas
def write_schema(path: Path, kinds, **extra):
    """Write a node-types.json file declaring ``kinds`` in order.

    Args:
        path: Destination file.
        kinds: Raw node kind names.
        **extra: Additional fields copied into every record.

    Returns:
        The written path.
    """
    records = [{"type": kind, "named": True, **extra} for kind in kinds]
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


@pytest.fixture
def make_schema(tmp_path):
    """Fixture writing ad-hoc schemas under ``tmp_path``."""

    def _make(kinds, name="node-types.json", **extra):
        return write_schema(tmp_path / name, kinds, **extra)

    return _make


@pytest.fixture
def fizzbuzz_schema() -> Path:
    return GRAMMARS_DIR / "fizzbuzz" / "node-types.json"


@pytest.fixture
def calculator_schema() -> Path:
    return GRAMMARS_DIR / "calculator" / "node-types.json"
