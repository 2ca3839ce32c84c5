"""Custom Hatch build hook that regenerates visitor modules before builds.

Configured via:

    [tool.hatch.build.hooks.custom]
    path = "hatch_build_hooks.py"

    [[tool.hatch.build.hooks.custom.visitors]]
    name = "CalculatorVisitor"
    schema = "examples/calculator/node-types.json"
    output = "examples/calculator/calculator_visitor.py"
    kind-attribute = "type"  # optional

Paths are relative to the project root. This executes within the Hatch
build environment.
"""

from __future__ import annotations

from hatchling.builders.hooks.plugin.interface import BuildHookInterface


class CustomBuildHook(BuildHookInterface):
    """Run the visitor generator so generated modules are up to date."""

    def initialize(self, version: str, build_data: dict) -> None:  # noqa: D401
        # Ensure the project source root is importable while building
        import sys  # noqa: PLC0415

        if self.root not in sys.path:
            sys.path.insert(0, self.root)

        from tree_sitter_visitor.generate import (  # noqa: PLC0415
            configure_logging,
            write_visitor_module,
        )

        configure_logging()
        for entry in self.config.get("visitors", []):
            missing = {"name", "schema", "output"} - set(entry)
            if missing:
                raise ValueError(
                    f"Visitor entry {entry!r} is missing: {', '.join(sorted(missing))}"
                )
            write_visitor_module(
                entry["name"],
                entry["schema"],
                entry["output"],
                relative_to=self.root,
                kind_attribute=entry.get("kind-attribute", "type"),
            )
