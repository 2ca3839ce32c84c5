import pytest

from tree_sitter_visitor.tree import SyntaxNode, leaf, node, token


def test_fields_and_named_children():
    add = node("add_expr", leaf("number", "1"), token("+"), leaf("number", "2"), lhs=0, rhs=2)
    assert add.child_by_field_name("lhs").text == b"1"
    assert add.child_by_field_name("rhs").text == b"2"
    assert add.child_by_field_name("body") is None
    assert [child.type for child in add.named_children] == ["number", "number"]
    assert add.child_count == 3
    assert add.text == b"1 + 2"


def test_token_is_anonymous():
    plus = token("+")
    assert plus.type == "+"
    assert not plus.is_named


def test_walk_is_preorder():
    tree = node("root", node("add_expr", leaf("number", "1"), token("+"), leaf("number", "2")))
    assert [n.type for n in tree.walk()] == ["root", "add_expr", "number", "+", "number"]


def test_field_index_out_of_range():
    with pytest.raises(IndexError):
        SyntaxNode(type="paren_expr", fields={"body": 0})
