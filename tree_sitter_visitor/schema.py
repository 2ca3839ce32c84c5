"""Load the ordered list of node kinds from a tree-sitter ``node-types.json``.

Only the ``type`` field of each record matters to the generator; ``named`` is
carried along when present and every other field (``fields``, ``children``,
``subtypes`` ...) is ignored.

Relative schema paths are resolved against the directory of the source file
that asked for the visitor, so a module can sit next to its grammar and write
``generate_visitor("DummyVisitor", "src/node-types.json")``.
"""

from __future__ import annotations

import inspect
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .errors import SchemaError

logger = logging.getLogger(__name__)


class NodeTypeRecord(BaseModel):
    """One record of a ``node-types.json`` array."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    type: str = Field(strict=True)
    named: bool | None = None


_RECORDS = TypeAdapter(list[NodeTypeRecord])


@dataclass(frozen=True)
class NodeKind:
    raw_name: str
    named: bool | None = None


def caller_globals(stacklevel: int = 1) -> dict[str, Any]:
    """Return the module globals of the frame ``stacklevel`` frames up.

    ``stacklevel=1`` is the direct caller of the function invoking this
    helper. An empty dict is returned when the stack is shallower.
    """
    frame = inspect.currentframe()
    try:
        for _ in range(stacklevel + 1):
            if frame is None:
                break
            frame = frame.f_back
        return frame.f_globals if frame is not None else {}
    finally:
        del frame


def caller_directory(stacklevel: int = 1) -> Path:
    """Return the directory of the source file ``stacklevel`` frames up.

    Callers without a backing file (REPL, ``exec``) resolve to the current
    working directory.
    """
    filename = caller_globals(stacklevel + 1).get("__file__")
    if not filename:
        return Path.cwd()
    return Path(filename).resolve().parent


def caller_module(stacklevel: int = 1) -> str | None:
    """Return the ``__name__`` of the module ``stacklevel`` frames up."""
    return caller_globals(stacklevel + 1).get("__name__")


def resolve_schema_path(
    path: str | os.PathLike[str], relative_to: str | os.PathLike[str] | None = None
) -> Path:
    """Resolve ``path`` against ``relative_to`` (absolute paths are kept)."""
    candidate = Path(path)
    if not str(path):
        raise SchemaError("Schema path is empty", path)
    if not candidate.is_absolute():
        base = Path(relative_to) if relative_to is not None else Path.cwd()
        candidate = base / candidate
    resolved = candidate.resolve()
    if not resolved.is_file():
        raise SchemaError(f"Schema file does not exist: {resolved}", resolved)
    return resolved


def parse_schema(payload: str | bytes, source: str = "<schema>") -> tuple[NodeKind, ...]:
    """Validate a JSON payload and return its node kinds in schema order."""
    try:
        records = _RECORDS.validate_json(payload)
    except ValidationError as exc:
        raise SchemaError(f"Invalid node-types schema {source}: {exc}", source) from exc
    return tuple(NodeKind(raw_name=r.type, named=r.named) for r in records)


def load_schema(
    path: str | os.PathLike[str], relative_to: str | os.PathLike[str] | None = None
) -> tuple[NodeKind, ...]:
    """Read ``path`` and return the node kinds it declares.

    Raises:
        SchemaError: the path does not resolve to a readable file, or its
            contents are not a JSON array of objects with a string ``type``.
    """
    resolved = resolve_schema_path(path, relative_to)
    logger.debug("Loading node-types schema from %s", resolved)
    try:
        payload = resolved.read_bytes()
    except OSError as exc:
        raise SchemaError(f"Cannot read schema file {resolved}: {exc}", resolved) from exc
    kinds = parse_schema(payload, source=str(resolved))
    logger.debug("Loaded %d node kinds from %s", len(kinds), resolved)
    return kinds


__all__ = [
    "NodeKind",
    "NodeTypeRecord",
    "caller_directory",
    "caller_globals",
    "caller_module",
    "resolve_schema_path",
    "parse_schema",
    "load_schema",
]
