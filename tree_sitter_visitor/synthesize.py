"""Synthesize visitor interfaces from an ordered list of node kinds.

:func:`synthesize` is the single generation step. Its result, a
:class:`VisitorInterface`, is materialized in one of two ways:

* :func:`build_class` creates a new class in memory and
  :func:`augment_class` inserts the same members into a consumer's class;
* :func:`render_module` emits equivalent Python source for a build step.

Both produce a ``Generic[ReturnType]`` class with one overridable
``visit_<identifier>`` method per distinct node kind and a ``visit`` method
that routes on the node's runtime kind.
"""

from __future__ import annotations

import keyword
import types
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .errors import (
    IdentifierCollisionError,
    UnimplementedVisitError,
    UnknownNodeKindError,
)
from .sanitize import sanitize_identifier
from .schema import NodeKind

ReturnType = TypeVar("ReturnType")

DEFAULT_KIND_ATTRIBUTE = "type"
INTERFACE_DOC = "A visitor interface for the language.\n\nThis class is automatically generated."
VISIT_DOC = "Visits a node of any type."


@dataclass(frozen=True)
class GeneratedMethod:
    raw_name: str
    identifier: str

    @property
    def name(self) -> str:
        return f"visit_{self.identifier}"

    @property
    def doc(self) -> str:
        return f"Visits a node of type ``{self.raw_name!r}``."


@dataclass(frozen=True)
class VisitorInterface:
    """Generated methods plus the raw-kind to method-name dispatch table."""

    methods: tuple[GeneratedMethod, ...]
    dispatch: Mapping[str, str]
    kind_attribute: str = DEFAULT_KIND_ATTRIBUTE

    @property
    def method_names(self) -> tuple[str, ...]:
        return tuple(method.name for method in self.methods)


def synthesize(
    kinds: Iterable[NodeKind], kind_attribute: str = DEFAULT_KIND_ATTRIBUTE
) -> VisitorInterface:
    """Build the visitor interface for ``kinds`` (schema order is kept).

    Repeated raw names collapse onto their first occurrence. Distinct raw
    names that sanitize to the same identifier are rejected.

    Raises:
        IdentifierCollisionError: two different kinds share an identifier.
        ValueError: ``kind_attribute`` is not a valid attribute name.
    """
    if not kind_attribute.isidentifier() or keyword.iskeyword(kind_attribute):
        raise ValueError(f"Invalid node kind attribute: {kind_attribute!r}")

    methods: list[GeneratedMethod] = []
    dispatch: dict[str, str] = {}
    owners: dict[str, str] = {}
    for kind in kinds:
        if kind.raw_name in dispatch:
            continue
        identifier = sanitize_identifier(kind.raw_name)
        if identifier in owners:
            raise IdentifierCollisionError(identifier, (owners[identifier], kind.raw_name))
        owners[identifier] = kind.raw_name
        method = GeneratedMethod(raw_name=kind.raw_name, identifier=identifier)
        methods.append(method)
        dispatch[kind.raw_name] = method.name
    return VisitorInterface(
        methods=tuple(methods),
        dispatch=types.MappingProxyType(dispatch),
        kind_attribute=kind_attribute,
    )


def validate_class_name(name: str) -> str:
    if not name.isidentifier() or keyword.iskeyword(name):
        raise ValueError(f"Invalid visitor class name: {name!r}")
    return name


def _unimplemented(method: GeneratedMethod):
    identifier = method.identifier

    def visit_kind(self, node: Any) -> Any:
        raise UnimplementedVisitError(identifier)

    visit_kind.__name__ = method.name
    visit_kind.__doc__ = method.doc
    return visit_kind


def _dispatcher(interface: VisitorInterface):
    dispatch = interface.dispatch
    kind_attribute = interface.kind_attribute

    def visit(self, node: Any) -> Any:
        kind = getattr(node, kind_attribute)
        try:
            name = dispatch[kind]
        except KeyError:
            raise UnknownNodeKindError(kind) from None
        return getattr(self, name)(node)

    visit.__doc__ = VISIT_DOC
    return visit


def _members(interface: VisitorInterface, qualname: str) -> dict[str, Any]:
    members: dict[str, Any] = {}
    for method in interface.methods:
        function = _unimplemented(method)
        function.__qualname__ = f"{qualname}.{method.name}"
        members[method.name] = function
    visit = _dispatcher(interface)
    visit.__qualname__ = f"{qualname}.visit"
    members["visit"] = visit
    members["__visitor_dispatch__"] = interface.dispatch
    return members


def build_class(
    interface: VisitorInterface,
    name: str,
    module: str | None = None,
) -> type:
    """Create a new ``Generic[ReturnType]`` visitor class named ``name``."""
    validate_class_name(name)

    def exec_body(body: dict[str, Any]) -> None:
        body["__doc__"] = INTERFACE_DOC
        if module is not None:
            body["__module__"] = module
        body.update(_members(interface, name))

    return types.new_class(name, (Generic[ReturnType],), exec_body=exec_body)


def augment_class(interface: VisitorInterface, cls: type) -> type:
    """Insert the generated members into an existing class and return it.

    Members the class body already declares are left untouched, and so are
    ``visit_*`` methods it inherits from its own bases (mixins). ``visit``
    and the dispatch table always follow this interface unless the class
    body declares them. A class that is not generic yet becomes
    subscriptable (``cls[float]``), so consumers can still name their
    result type.
    """
    own = vars(cls)
    for member, value in _members(interface, cls.__qualname__).items():
        if member in own:
            continue
        if member.startswith("visit_") and hasattr(cls, member):
            continue
        setattr(cls, member, value)
    if not _is_generic(cls) and "__class_getitem__" not in own:
        cls.__class_getitem__ = classmethod(types.GenericAlias)  # type: ignore[attr-defined]
    if cls.__doc__ is None:
        cls.__doc__ = INTERFACE_DOC
    return cls


def _is_generic(base: Any) -> bool:
    origin = getattr(base, "__origin__", base)
    return isinstance(origin, type) and issubclass(origin, Generic)  # type: ignore[arg-type]


def _docstring(text: str, indent: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    lines = escaped.split("\n")
    if len(lines) == 1:
        return f'{indent}"""{escaped}"""'
    body = "\n".join(f"{indent}{line}" if line else "" for line in lines[1:])
    return f'{indent}"""{lines[0]}\n{body}\n{indent}"""'


def render_module(interface: VisitorInterface, name: str, source: str | None = None) -> str:
    """Return the source of a module defining the visitor class ``name``."""
    validate_class_name(name)
    origin = f" from {source}" if source else ""
    header = (
        f"Visitor interface ``{name}`` generated by tree-sitter-visitor{origin}.\n\n"
        "Do not edit by hand: regenerate it from the node-types schema instead."
    )
    lines = [
        _docstring(header, ""),
        "",
        "from __future__ import annotations",
        "",
        "from typing import Any, Generic, TypeVar",
        "",
        "from tree_sitter_visitor.errors import UnimplementedVisitError, UnknownNodeKindError",
        "",
        'ReturnType = TypeVar("ReturnType")',
        "",
        "",
        f"class {name}(Generic[ReturnType]):",
        _docstring(INTERFACE_DOC, "    "),
        "",
        "    __visitor_dispatch__ = {",
    ]
    lines.extend(f"        {raw!r}: {method!r}," for raw, method in interface.dispatch.items())
    lines.append("    }")
    for method in interface.methods:
        lines.extend(
            [
                "",
                f"    def {method.name}(self, node: Any) -> ReturnType:",
                _docstring(method.doc, "        "),
                f"        raise UnimplementedVisitError({method.identifier!r})",
            ]
        )
    lines.extend(
        [
            "",
            "    def visit(self, node: Any) -> ReturnType:",
            _docstring(VISIT_DOC, "        "),
            f"        kind = node.{interface.kind_attribute}",
            "        try:",
            "            name = self.__visitor_dispatch__[kind]",
            "        except KeyError:",
            "            raise UnknownNodeKindError(kind) from None",
            "        return getattr(self, name)(node)",
            "",
            "",
            f'__all__ = ["{name}", "ReturnType"]',
            "",
        ]
    )
    return "\n".join(lines)


__all__ = [
    "DEFAULT_KIND_ATTRIBUTE",
    "GeneratedMethod",
    "ReturnType",
    "VisitorInterface",
    "augment_class",
    "build_class",
    "render_module",
    "synthesize",
    "validate_class_name",
]
