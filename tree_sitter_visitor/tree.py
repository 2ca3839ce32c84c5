"""Minimal in-memory syntax tree with the tree-sitter ``Node`` surface.

Generated visitors only read ``node.type`` and whatever their own
``visit_*`` overrides use. :class:`SyntaxNode` provides the commonly used
part of py-tree-sitter's ``Node`` API so visitors can be driven from
hand-built trees (tests, examples) or from trees produced by other parsers.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SyntaxNode:
    """A syntax tree node.

    Attributes
    ----------
    type : str
        Node kind, the tag generated visitors dispatch on.
    children : tuple[SyntaxNode, ...]
        Child nodes in source order (named and anonymous).
    text : bytes
        Source text covered by the node; defaults to the concatenated
        text of the children joined by single spaces.
    is_named : bool
        ``False`` for anonymous tokens such as ``"+"``.
    fields : Mapping[str, int]
        Field name -> index into ``children``.
    """

    type: str
    children: tuple[SyntaxNode, ...] = ()
    text: bytes = b""
    is_named: bool = True
    fields: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.text and self.children:
            object.__setattr__(
                self, "text", b" ".join(child.text for child in self.children)
            )
        for name, index in self.fields.items():
            if not 0 <= index < len(self.children):
                raise IndexError(f"Field '{name}' points outside children: {index}")

    @property
    def named_children(self) -> list[SyntaxNode]:
        return [child for child in self.children if child.is_named]

    @property
    def child_count(self) -> int:
        return len(self.children)

    def child_by_field_name(self, name: str) -> SyntaxNode | None:
        index = self.fields.get(name)
        return None if index is None else self.children[index]

    def walk(self) -> Iterator[SyntaxNode]:
        """Yield this node and its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


def token(text: str) -> SyntaxNode:
    """Return an anonymous token node whose kind is its own text."""
    return SyntaxNode(type=text, text=text.encode(), is_named=False)


def leaf(kind: str, text: str) -> SyntaxNode:
    return SyntaxNode(type=kind, text=text.encode())


def node(kind: str, *children: SyntaxNode, **fields: int) -> SyntaxNode:
    return SyntaxNode(type=kind, children=tuple(children), fields=fields)


__all__ = ["SyntaxNode", "token", "leaf", "node"]
