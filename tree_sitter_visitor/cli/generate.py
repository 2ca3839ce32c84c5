"""Generate command.

Renders the visitor module for a node-types schema, either to a file
(``--output``) or to stdout.
"""

from __future__ import annotations

from pathlib import Path

import click

from ..errors import VisitorGenerationError
from ..generate import load_interface, write_visitor_module
from ..synthesize import DEFAULT_KIND_ATTRIBUTE, render_module


@click.command("generate")
@click.argument("name", type=str)
@click.argument("schema", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    "output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the generated module here instead of printing it.",
)
@click.option(
    "--kind-attribute",
    default=DEFAULT_KIND_ATTRIBUTE,
    show_default=True,
    help="Node attribute holding the runtime node kind.",
)
def generate_cmd(name: str, schema: Path, output: Path | None, kind_attribute: str):
    """Generate visitor class NAME from the node-types SCHEMA file."""
    try:
        if output is None:
            interface = load_interface(schema, kind_attribute=kind_attribute)
            click.echo(render_module(interface, name, source=schema.as_posix()), nl=False)
            return
        target = write_visitor_module(
            name, schema, output, kind_attribute=kind_attribute
        )
    except (VisitorGenerationError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Generated {name} -> {target}")


__all__ = ["generate_cmd"]
