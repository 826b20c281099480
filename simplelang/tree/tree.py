from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Iterator, List, Optional

from simplelang.util import Span


class NodeType(Enum):
    PROGRAM = auto()
    DECLARATION = auto()
    ASSIGNMENT = auto()
    EXPRESSION = auto()
    CONDITIONAL = auto()


@dataclass
class Node:
    value: str = ""
    children: List[Node] = field(default_factory=list)
    span: Span = field(repr=False, kw_only=True, compare=False, default=None)

    type: ClassVar[NodeType]

    def __str__(self) -> str:
        from simplelang.tree.printer import Printer

        printer = Printer()
        return printer.print(self)

    def __contains__(self, element: Node) -> bool:
        if self == element:
            return True
        return any(element in child for child in self.children)

    def walk(self) -> Iterator[Node]:
        """Yield this node and then every node below it, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass
class ProgramNode(Node):
    type: ClassVar[NodeType] = NodeType.PROGRAM


@dataclass
class DeclarationNode(Node):
    type: ClassVar[NodeType] = NodeType.DECLARATION


@dataclass
class AssignmentNode(Node):
    type: ClassVar[NodeType] = NodeType.ASSIGNMENT

    @property
    def exp(self) -> ExpressionNode:
        return self.children[0]


@dataclass
class ExpressionNode(Node):
    """Either a numeral leaf, or an operator whose children are
    the numeral on its left and the remaining chain on its right."""

    type: ClassVar[NodeType] = NodeType.EXPRESSION

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def left(self) -> Optional[ExpressionNode]:
        return self.children[0] if self.children else None

    @property
    def right(self) -> Optional[ExpressionNode]:
        return self.children[1] if self.children else None


@dataclass
class ConditionalNode(Node):
    type: ClassVar[NodeType] = NodeType.CONDITIONAL

    @property
    def cond(self) -> ExpressionNode:
        return self.children[0]

    @property
    def body(self) -> Node:
        return self.children[1]

    @property
    def else_body(self) -> Optional[Node]:
        return self.children[2] if len(self.children) > 2 else None
