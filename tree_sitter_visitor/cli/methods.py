"""Methods command.

Prints the node kind -> method name table a schema would generate, in
dispatch order. Useful to see which ``visit_*`` methods a grammar needs.
"""

from __future__ import annotations

import json
from pathlib import Path

import click
import yaml

from ..errors import VisitorGenerationError
from ..generate import load_interface


@click.command("methods")
@click.argument("schema", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    show_default=True,
    help="Output format for the method table",
)
def methods_cmd(schema: Path, fmt: str) -> None:
    """List the generated visit methods for SCHEMA."""
    try:
        interface = load_interface(schema)
    except VisitorGenerationError as exc:
        raise click.ClickException(str(exc)) from exc

    table = [
        {"type": method.raw_name, "method": method.name}
        for method in interface.methods
    ]
    if fmt.lower() == "yaml":
        click.echo(
            yaml.safe_dump(
                table, sort_keys=False, allow_unicode=True, default_flow_style=False
            ),
            nl=False,
        )
        return
    click.echo(json.dumps(table, indent=2))


__all__ = ["methods_cmd"]
