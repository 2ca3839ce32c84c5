"""Visitor interface ``CalculatorVisitor`` generated by tree-sitter-visitor from examples/grammars/calculator/node-types.json.

Do not edit by hand: regenerate it from the node-types schema instead.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from tree_sitter_visitor.errors import UnimplementedVisitError, UnknownNodeKindError

ReturnType = TypeVar("ReturnType")


class CalculatorVisitor(Generic[ReturnType]):
    """A visitor interface for the language.

    This class is automatically generated.
    """

    __visitor_dispatch__ = {
        'add_expr': 'visit_add_expr',
        'div_expr': 'visit_div_expr',
        'mul_expr': 'visit_mul_expr',
        'paren_expr': 'visit_paren_expr',
        'root': 'visit_root',
        'sub_expr': 'visit_sub_expr',
        '(': 'visit_LPAREN',
        ')': 'visit_RPAREN',
        '*': 'visit_STAR',
        '+': 'visit_PLUS',
        '-': 'visit_DASH',
        '/': 'visit_SLASH',
        'number': 'visit_number',
    }

    def visit_add_expr(self, node: Any) -> ReturnType:
        """Visits a node of type ``'add_expr'``."""
        raise UnimplementedVisitError('add_expr')

    def visit_div_expr(self, node: Any) -> ReturnType:
        """Visits a node of type ``'div_expr'``."""
        raise UnimplementedVisitError('div_expr')

    def visit_mul_expr(self, node: Any) -> ReturnType:
        """Visits a node of type ``'mul_expr'``."""
        raise UnimplementedVisitError('mul_expr')

    def visit_paren_expr(self, node: Any) -> ReturnType:
        """Visits a node of type ``'paren_expr'``."""
        raise UnimplementedVisitError('paren_expr')

    def visit_root(self, node: Any) -> ReturnType:
        """Visits a node of type ``'root'``."""
        raise UnimplementedVisitError('root')

    def visit_sub_expr(self, node: Any) -> ReturnType:
        """Visits a node of type ``'sub_expr'``."""
        raise UnimplementedVisitError('sub_expr')

    def visit_LPAREN(self, node: Any) -> ReturnType:
        """Visits a node of type ``'('``."""
        raise UnimplementedVisitError('LPAREN')

    def visit_RPAREN(self, node: Any) -> ReturnType:
        """Visits a node of type ``')'``."""
        raise UnimplementedVisitError('RPAREN')

    def visit_STAR(self, node: Any) -> ReturnType:
        """Visits a node of type ``'*'``."""
        raise UnimplementedVisitError('STAR')

    def visit_PLUS(self, node: Any) -> ReturnType:
        """Visits a node of type ``'+'``."""
        raise UnimplementedVisitError('PLUS')

    def visit_DASH(self, node: Any) -> ReturnType:
        """Visits a node of type ``'-'``."""
        raise UnimplementedVisitError('DASH')

    def visit_SLASH(self, node: Any) -> ReturnType:
        """Visits a node of type ``'/'``."""
        raise UnimplementedVisitError('SLASH')

    def visit_number(self, node: Any) -> ReturnType:
        """Visits a node of type ``'number'``."""
        raise UnimplementedVisitError('number')

    def visit(self, node: Any) -> ReturnType:
        """Visits a node of any type."""
        kind = node.type
        try:
            name = self.__visitor_dispatch__[kind]
        except KeyError:
            raise UnknownNodeKindError(kind) from None
        return getattr(self, name)(node)


__all__ = ["CalculatorVisitor", "ReturnType"]
