from typing import List, Optional

from simplelang.token import Token
from simplelang.type import Type
from simplelang.util import Span

from simplelang.tree.tree import (  # isort:skip
    AssignmentNode,
    ConditionalNode,
    DeclarationNode,
    ExpressionNode,
    Node,
    ProgramNode,
)
from simplelang.error.parser_error import (  # isort:skip
    AssignmentNameError,
    DeclarationNameError,
    MissingAssignError,
    MissingNumberError,
    MissingSemicolonError,
    MissingThenError,
)


class Parser:
    def __init__(self, program: str) -> None:
        self.og_program = program
        self.tokens: List[Token] = []
        self.current = 0

    def parse(self, tokens: List[Token]) -> ProgramNode:
        """Given a list of Tokens from the lexer, apply the SimpleLang grammar
        to produce an Abstract Syntax Tree.

        Parsing stops at the first END_OF_FILE token, or at the end of the list.

        Args:
            tokens (List[Token]): A list of tokens, produced by `Lexer(program).scan()`

        Raises:
            ParserException: On the first production that cannot be matched.

        Returns:
            ProgramNode: The root of the AST.
        """
        self.tokens = tokens
        self.current = 0

        body = []
        while self.peek().type != Type.END_OF_FILE:
            body.append(self.parse_statement())

        span = body[0].span & body[-1].span if body else Span(0, (0, 0))
        return ProgramNode("", body, span=span)

    def peek(self) -> Token:
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return self.end_of_file()

    def advance(self) -> Token:
        if self.current < len(self.tokens):
            token = self.tokens[self.current]
            self.current += 1
            return token
        return self.end_of_file()

    def match(self, type: Type, text: Optional[str] = None) -> bool:
        """Consume the current token if it is of type `type` (and reads `text`, if given).

        Returns:
            bool: Whether the current token was consumed.
        """
        if self.peek().match(type, text):
            self.advance()
            return True
        return False

    def end_of_file(self) -> Token:
        # Place the implicit END_OF_FILE directly after the last token
        if self.tokens:
            last = self.tokens[-1].span
            span = Span(last.end_ln, (last.end_col, last.end_col))
        else:
            span = Span(1, (0, 0))
        return Token("", Type.END_OF_FILE, span)

    def parse_statement(self) -> Node:
        token = self.peek()
        if token.match(Type.KEYWORD, "int"):
            return self.parse_declaration()
        if token.match(Type.KEYWORD, "if"):
            return self.parse_conditional()
        # Other keywords are not statements, and will fail as an assignment
        return self.parse_assignment()

    def parse_declaration(self) -> DeclarationNode:
        keyword = self.advance()  # int
        identifier = self.advance()
        if identifier.type != Type.IDENTIFIER:
            DeclarationNameError(
                self.og_program,
                keyword.span & identifier.span,
                "Declaration",
                identifier,
            )

        semicolon = self.peek()
        if not self.match(Type.SYMBOL, ";"):
            MissingSemicolonError(
                self.og_program, keyword.span & semicolon.span, "Declaration", semicolon
            )

        return DeclarationNode(identifier.text, span=keyword.span & semicolon.span)

    def parse_assignment(self) -> AssignmentNode:
        identifier = self.advance()
        if identifier.type != Type.IDENTIFIER:
            AssignmentNameError(
                self.og_program, identifier.span, "Assignment", identifier
            )

        operator = self.peek()
        if not self.match(Type.OPERATOR, "="):
            MissingAssignError(
                self.og_program, identifier.span & operator.span, "Assignment", operator
            )

        exp = self.parse_expression()

        semicolon = self.peek()
        if not self.match(Type.SYMBOL, ";"):
            MissingSemicolonError(
                self.og_program,
                identifier.span & semicolon.span,
                "Assignment",
                semicolon,
            )

        return AssignmentNode(
            identifier.text, [exp], span=identifier.span & semicolon.span
        )

    def parse_expression(self) -> ExpressionNode:
        number = self.advance()
        if number.type != Type.NUMBER:
            MissingNumberError(self.og_program, number.span, "Expression", number)

        leaf = ExpressionNode(number.text, span=number.span)
        if self.peek().type != Type.OPERATOR:
            return leaf

        # Any operator continues the chain, and the chain is right-associative:
        # 1 + 2 - 3 is 1 + (2 - 3)
        operator = self.advance()
        right = self.parse_expression()
        return ExpressionNode(operator.text, [leaf, right], span=leaf.span & right.span)

    def parse_conditional(self) -> ConditionalNode:
        keyword = self.advance()  # if
        cond = self.parse_expression()

        then = self.peek()
        if not self.match(Type.KEYWORD, "then"):
            MissingThenError(
                self.og_program, keyword.span & then.span, "Conditional", then
            )

        children = [cond, self.parse_statement()]
        # A dangling else belongs to the innermost conditional
        if self.match(Type.KEYWORD, "else"):
            children.append(self.parse_statement())

        return ConditionalNode(
            "if", children, span=keyword.span & children[-1].span
        )
