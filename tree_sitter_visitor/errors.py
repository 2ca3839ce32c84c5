"""Exception types raised by the visitor generator and generated visitors.

Two families exist:

* generation-time errors (``VisitorGenerationError`` and subclasses) abort
  the build; no partial interface is ever produced.
* consumer-runtime errors are raised by generated code when a visitor meets a
  node kind it does not handle.
"""

from __future__ import annotations


class VisitorGenerationError(Exception):
    """Base class for failures while generating a visitor interface."""


class SchemaError(VisitorGenerationError):
    """The node-types schema could not be resolved, read or parsed."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class IdentifierCollisionError(VisitorGenerationError):
    """Distinct raw node kinds sanitize to the same method identifier."""

    def __init__(self, identifier: str, raw_names: tuple[str, ...]):
        quoted = ", ".join(repr(name) for name in raw_names)
        super().__init__(
            f"Node kinds {quoted} all map to method 'visit_{identifier}'"
        )
        self.identifier = identifier
        self.raw_names = raw_names


class UnimplementedVisitError(NotImplementedError):
    """A generated ``visit_<kind>`` method was called without an override."""

    def __init__(self, identifier: str):
        super().__init__(identifier)
        self.identifier = identifier


class UnknownNodeKindError(LookupError):
    """``visit`` received a node whose kind is absent from the schema."""

    def __init__(self, kind: str):
        super().__init__(f"unknown node kind: {kind}")
        self.kind = kind


__all__ = [
    "VisitorGenerationError",
    "SchemaError",
    "IdentifierCollisionError",
    "UnimplementedVisitError",
    "UnknownNodeKindError",
]
