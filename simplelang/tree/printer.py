from enum import Enum, auto
from typing import Iterator

from simplelang.token import Token
from simplelang.tree.visitor import YieldVisitor
from simplelang.type import Type

from simplelang.tree.tree import (  # isort:skip
    AssignmentNode,
    ConditionalNode,
    DeclarationNode,
    ExpressionNode,
    Node,
)

RIGHT_ATTACHED_TOKENS = {
    Token(";", Type.SYMBOL),
}


class PrintingInfo(Enum):
    NEWLINE = auto()
    INDENT = auto()
    UNINDENT = auto()


INDENT = " " * 4


class Printer(YieldVisitor):
    """Render a tree back into SimpleLang source.

    The output scans and parses back into an equal tree: one statement per line,
    with the branches of a conditional on their own, indented, lines.
    """

    def print(self, tree: Node) -> str:
        # Traverse the tree, collecting Tokens and printing information
        depth = 0
        program = ""
        for token in self.visit(tree):
            match token:
                case PrintingInfo.NEWLINE:
                    program = program.rstrip(" ") + "\n"
                case PrintingInfo.INDENT:
                    depth += 1
                case PrintingInfo.UNINDENT:
                    depth -= 1
                case _:
                    # Ensure indentation is correct
                    if program.endswith("\n"):
                        program += INDENT * depth

                    # Remove the last space if this is a tightly bound character, e.g. ';'
                    if token in RIGHT_ATTACHED_TOKENS and program.endswith(" "):
                        program = program[:-1]

                    program += token.text + " "

        return program.strip()

    def visit_DeclarationNode(self, node: DeclarationNode, **kwargs) -> Iterator:
        yield Token("int", Type.KEYWORD)
        yield Token(node.value, Type.IDENTIFIER)
        yield Token(";", Type.SYMBOL)
        yield PrintingInfo.NEWLINE

    def visit_AssignmentNode(self, node: AssignmentNode, **kwargs) -> Iterator:
        yield Token(node.value, Type.IDENTIFIER)
        yield Token("=", Type.OPERATOR)
        yield from self.visit(node.exp)
        yield Token(";", Type.SYMBOL)
        yield PrintingInfo.NEWLINE

    def visit_ExpressionNode(self, node: ExpressionNode, **kwargs) -> Iterator:
        if node.is_leaf:
            yield Token(node.value, Type.NUMBER)
            return
        # Chains are right-associative, so no brackets are ever needed
        yield from self.visit(node.left)
        yield Token(node.value, Type.OPERATOR)
        yield from self.visit(node.right)

    def visit_ConditionalNode(self, node: ConditionalNode, **kwargs) -> Iterator:
        yield Token("if", Type.KEYWORD)
        yield from self.visit(node.cond)
        yield Token("then", Type.KEYWORD)
        yield PrintingInfo.INDENT
        yield PrintingInfo.NEWLINE
        yield from self.visit(node.body)
        yield PrintingInfo.UNINDENT
        if node.else_body is not None:
            yield Token("else", Type.KEYWORD)
            yield PrintingInfo.INDENT
            yield PrintingInfo.NEWLINE
            yield from self.visit(node.else_body)
            yield PrintingInfo.UNINDENT
