"""Fizz/buzz counting example.

Demonstrates:
  * The function-style front end (``generate_visitor``) and the
    decoration-style front end (``@visitor_interface``) over the same schema
  * A visitor returning ``None`` that keeps its state on ``self``
  * Schema paths resolved relative to this file, not the working directory

Run:
    python examples/fizzbuzz.py

"""

from __future__ import annotations

from tree_sitter_visitor import generate_visitor, visitor_interface
from tree_sitter_visitor.tree import SyntaxNode, leaf, node

SCHEMA = "grammars/fizzbuzz/node-types.json"

FizzBuzzVisitor = generate_visitor("FizzBuzzVisitor", SCHEMA)


@visitor_interface(SCHEMA)
class DecoratedFizzBuzzVisitor:
    """Same interface, declared in place."""

    def visit_source_file(self, node: SyntaxNode) -> None:
        for child in node.children:
            self.visit(child)


class Counter(FizzBuzzVisitor[None]):
    def __init__(self) -> None:
        self.fizz_count = 0
        self.buzz_count = 0

    def visit_source_file(self, node: SyntaxNode) -> None:
        for child in node.children:
            self.visit(child)

    def visit_fizz(self, node: SyntaxNode) -> None:
        self.fizz_count += 1

    def visit_buzz(self, node: SyntaxNode) -> None:
        self.buzz_count += 1


class DecoratedCounter(DecoratedFizzBuzzVisitor):
    def __init__(self) -> None:
        self.counts: dict[str, int] = {}

    def visit_fizz(self, node: SyntaxNode) -> None:
        self.counts["fizz"] = self.counts.get("fizz", 0) + 1

    def visit_buzz(self, node: SyntaxNode) -> None:
        self.counts["buzz"] = self.counts.get("buzz", 0) + 1


if __name__ == "__main__":
    words = "fizz buzz fizz fizz buzz".split()
    tree = node("source_file", *(leaf(word, word) for word in words))

    counter = Counter()
    counter.visit(tree)
    print(f"function style:   fizz={counter.fizz_count} buzz={counter.buzz_count}")

    decorated = DecoratedCounter()
    decorated.visit(tree)
    print(f"decoration style: {decorated.counts}")
