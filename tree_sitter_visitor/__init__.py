"""Generate typed visitor interfaces from tree-sitter ``node-types.json`` files.

Example::

    from tree_sitter_visitor import generate_visitor

    DummyVisitor = generate_visitor("DummyVisitor", "src/node-types.json")

    class Counter(DummyVisitor[None]):
        def visit_fizz(self, node):
            ...
"""

import importlib.metadata

# ---------------------------------------------------------------------------
# Version metadata
# ---------------------------------------------------------------------------
# In-tree execution (build hooks, tests without an install) has no
# distribution metadata; fall back to a neutral placeholder.
try:  # pragma: no cover - trivial guard
    __version__ = importlib.metadata.version("tree-sitter-visitor")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0"

from .errors import (  # noqa: E402
    IdentifierCollisionError,
    SchemaError,
    UnimplementedVisitError,
    UnknownNodeKindError,
    VisitorGenerationError,
)
from .generate import (  # noqa: E402
    generate_visitor,
    load_interface,
    visitor_interface,
    write_visitor_module,
)
from .sanitize import sanitize_identifier  # noqa: E402
from .schema import NodeKind, load_schema  # noqa: E402
from .synthesize import (  # noqa: E402
    GeneratedMethod,
    ReturnType,
    VisitorInterface,
    render_module,
    synthesize,
)

__all__ = [
    "__version__",
    "GeneratedMethod",
    "IdentifierCollisionError",
    "NodeKind",
    "ReturnType",
    "SchemaError",
    "UnimplementedVisitError",
    "UnknownNodeKindError",
    "VisitorGenerationError",
    "VisitorInterface",
    "generate_visitor",
    "load_interface",
    "load_schema",
    "render_module",
    "sanitize_identifier",
    "synthesize",
    "visitor_interface",
    "write_visitor_module",
]
