"""CLI command group for tree-sitter-visitor.

This module exposes the root Click command group `tree_sitter_visitor` which
aggregates subcommands implemented in sibling modules (`generate`, `methods`).

Example usage:

        tree-sitter-visitor generate DummyVisitor src/node-types.json -o dummy_visitor.py
        tree-sitter-visitor methods src/node-types.json --format yaml
"""

from __future__ import annotations

import click

from ..generate import configure_logging
from .generate import generate_cmd
from .methods import methods_cmd


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default=None,
    help="Logging level (default: $TS_VISITOR_LOG_LEVEL or WARNING)",
)
def tree_sitter_visitor(log_level: str | None):
    """Generate visitor interfaces from tree-sitter node-types schemas."""
    configure_logging(log_level)


# Register subcommands
tree_sitter_visitor.add_command(generate_cmd)
tree_sitter_visitor.add_command(methods_cmd)

__all__ = ["tree_sitter_visitor"]
