"""Front ends of the visitor generator.

All of them load a node-types schema, run :func:`synthesize` once and
materialize the result:

* :func:`generate_visitor` returns a new class,
  ``DummyVisitor = generate_visitor("DummyVisitor", "src/node-types.json")``;
* :func:`visitor_interface` decorates an existing class;
* :func:`write_visitor_module` writes an importable module (build step,
  CLI and Hatch build hook).

Relative schema paths are resolved against the directory of the calling
source file for the first two, and against ``relative_to`` (default: the
working directory) for the build step.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .schema import caller_directory, caller_module, load_schema
from .synthesize import (
    DEFAULT_KIND_ATTRIBUTE,
    VisitorInterface,
    augment_class,
    build_class,
    render_module,
    synthesize,
)

LOG_LEVEL_ENV = "TS_VISITOR_LOG_LEVEL"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once; ``level`` overrides ``TS_VISITOR_LOG_LEVEL``."""
    level_name = (level or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    resolved = getattr(logging, level_name, logging.WARNING)
    if getattr(configure_logging, "_done", False):  # type: ignore[attr-defined]
        logging.getLogger().setLevel(resolved)
        return
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    configure_logging._done = True  # type: ignore[attr-defined]


def load_interface(
    schema_path: str | os.PathLike[str],
    relative_to: str | os.PathLike[str] | None = None,
    kind_attribute: str = DEFAULT_KIND_ATTRIBUTE,
) -> VisitorInterface:
    """Load ``schema_path`` and synthesize its visitor interface."""
    return synthesize(load_schema(schema_path, relative_to), kind_attribute)


def generate_visitor(
    name: str,
    schema_path: str | os.PathLike[str],
    *,
    kind_attribute: str = DEFAULT_KIND_ATTRIBUTE,
) -> type:
    """Return a new visitor class named ``name`` for the given schema."""
    interface = load_interface(schema_path, caller_directory(), kind_attribute)
    module = caller_module()
    return build_class(interface, name, module=module)


def visitor_interface(
    schema_path: str | os.PathLike[str],
    *,
    kind_attribute: str = DEFAULT_KIND_ATTRIBUTE,
):
    """Class decorator inserting the generated visitor members.

    Methods the class defines, and ``visit_*`` methods it inherits from its
    own bases, are kept.

    Example:
        >>> @visitor_interface("src/node-types.json")
        ... class DummyVisitor:
        ...     pass
    """
    interface = load_interface(schema_path, caller_directory(), kind_attribute)

    def decorate(cls: type) -> type:
        return augment_class(interface, cls)

    return decorate


def write_visitor_module(
    name: str,
    schema_path: str | os.PathLike[str],
    output_path: str | os.PathLike[str],
    *,
    relative_to: str | os.PathLike[str] | None = None,
    kind_attribute: str = DEFAULT_KIND_ATTRIBUTE,
) -> Path:
    """Render the visitor module for ``schema_path`` into ``output_path``.

    The file is only rewritten when its content changes. Relative
    ``output_path`` values are resolved like the schema path.
    """
    interface = load_interface(schema_path, relative_to, kind_attribute)
    base = Path(relative_to) if relative_to is not None else Path.cwd()
    target = Path(output_path)
    if not target.is_absolute():
        target = base / target
    source = render_module(interface, name, source=Path(schema_path).as_posix())
    if target.exists() and target.read_text(encoding="utf-8") == source:
        logger.info("Visitor module %s is up to date", target)
        return target
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(source, encoding="utf-8")
    logger.info("Wrote %s (%d methods) -> %s", name, len(interface.methods), target)
    return target


__all__ = [
    "LOG_LEVEL_ENV",
    "configure_logging",
    "generate_visitor",
    "load_interface",
    "visitor_interface",
    "write_visitor_module",
]
