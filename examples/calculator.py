"""Calculator example.

Demonstrates:
  * Subclassing a visitor module generated at build time
    (``calculator_visitor.py``, kept current by the Hatch build hook)
  * Evaluating arithmetic trees by overriding one method per node kind
  * The fail-fast default: kinds the evaluator does not handle raise

The trees are built by hand with :mod:`tree_sitter_visitor.tree`; a real
tree-sitter parse of the same grammar yields nodes with the same kinds.

Run:
    python examples/calculator.py

"""

from __future__ import annotations

from calculator_visitor import CalculatorVisitor

from tree_sitter_visitor import UnimplementedVisitError
from tree_sitter_visitor.tree import SyntaxNode, leaf, node, token

_OPERATORS = {
    "add_expr": lambda lhs, rhs: lhs + rhs,
    "sub_expr": lambda lhs, rhs: lhs - rhs,
    "mul_expr": lambda lhs, rhs: lhs * rhs,
    "div_expr": lambda lhs, rhs: lhs / rhs,
}


class Evaluator(CalculatorVisitor[float]):
    def visit_root(self, node: SyntaxNode) -> float:
        return self.visit(node.named_children[0])

    def visit_number(self, node: SyntaxNode) -> float:
        return float(node.text)

    def visit_paren_expr(self, node: SyntaxNode) -> float:
        return self.visit(node.child_by_field_name("body"))

    def _binary(self, node: SyntaxNode) -> float:
        lhs = self.visit(node.child_by_field_name("lhs"))
        rhs = self.visit(node.child_by_field_name("rhs"))
        return _OPERATORS[node.type](lhs, rhs)

    visit_add_expr = _binary
    visit_sub_expr = _binary
    visit_mul_expr = _binary
    visit_div_expr = _binary


def binary(kind: str, lhs: SyntaxNode, op: str, rhs: SyntaxNode) -> SyntaxNode:
    return node(kind, lhs, token(op), rhs, lhs=0, rhs=2)


if __name__ == "__main__":
    # (1 + 2) * 4 - 6 / 3
    tree = node(
        "root",
        binary(
            "sub_expr",
            binary(
                "mul_expr",
                node(
                    "paren_expr",
                    token("("),
                    binary("add_expr", leaf("number", "1"), "+", leaf("number", "2")),
                    token(")"),
                    body=1,
                ),
                "*",
                leaf("number", "4"),
            ),
            "-",
            binary("div_expr", leaf("number", "6"), "/", leaf("number", "3")),
        ),
    )
    evaluator = Evaluator()
    print(f"{tree.text.decode()} = {evaluator.visit(tree)}")

    try:
        evaluator.visit(token("+"))
    except UnimplementedVisitError as exc:
        print(f"Anonymous tokens are not evaluated: visit_{exc.identifier}")
