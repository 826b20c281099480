from simplelang import Lexer, Parser
from simplelang.tree.printer import Printer
from simplelang.util import Span

from simplelang.tree.tree import (  # isort:skip
    AssignmentNode,
    ConditionalNode,
    DeclarationNode,
    ExpressionNode,
    NodeType,
    ProgramNode,
)


def parse(program: str) -> ProgramNode:
    return Parser(program).parse(Lexer(program).scan())


def test_node_types():
    assert ProgramNode().type == NodeType.PROGRAM
    assert DeclarationNode("x").type == NodeType.DECLARATION
    assert AssignmentNode("x").type == NodeType.ASSIGNMENT
    assert ExpressionNode("1").type == NodeType.EXPRESSION
    assert ConditionalNode("if").type == NodeType.CONDITIONAL


def test_equality_ignores_spans():
    assert DeclarationNode("x", span=Span(1, (0, 6))) == DeclarationNode(
        "x", span=Span(4, (2, 8))
    )
    assert DeclarationNode("x") != DeclarationNode("y")
    # Same payload, different kind of node
    assert DeclarationNode("x") != AssignmentNode("x")


def test_children_are_not_shared():
    first, second = ProgramNode(), ProgramNode()
    first.children.append(DeclarationNode("x"))
    assert second.children == []


def test_contains():
    tree = parse("int x; if 1 then x = 2 + 3;")
    assert ExpressionNode("3") in tree
    assert AssignmentNode(
        "x", [ExpressionNode("+", [ExpressionNode("2"), ExpressionNode("3")])]
    ) in tree
    assert ExpressionNode("4") not in tree
    assert DeclarationNode("y") not in tree


def test_walk():
    tree = parse("int x; x = 1 + 2;")
    assert [node.value for node in tree.walk()] == ["", "x", "x", "+", "1", "2"]


def test_expression_accessors():
    leaf = ExpressionNode("1")
    assert leaf.is_leaf
    assert leaf.left is None and leaf.right is None

    chain = ExpressionNode("-", [ExpressionNode("1"), ExpressionNode("2")])
    assert not chain.is_leaf
    assert chain.left == ExpressionNode("1")
    assert chain.right == ExpressionNode("2")


def test_print_program():
    tree = parse("int x;x=1+2;if 1==1 then x=2; else if 0 then int y;")
    assert str(tree) == (
        "int x;\n"
        "x = 1 + 2;\n"
        "if 1 == 1 then\n"
        "    x = 2;\n"
        "else\n"
        "    if 0 then\n"
        "        int y;"
    )


def test_print_expression():
    exp = ExpressionNode(
        "+",
        [
            ExpressionNode("1"),
            ExpressionNode("-", [ExpressionNode("2"), ExpressionNode("3")]),
        ],
    )
    assert Printer().print(exp) == "1 + 2 - 3"


def test_print_empty():
    assert str(ProgramNode()) == ""


def test_print_nested_round_trip(nested_program: str):
    tree = parse(nested_program)
    assert parse(str(tree)) == tree
