from typing import Iterator

from simplelang.tree.tree import Node


class YieldVisitor:
    """
    For yielding values from nodes in our AST
    """

    def visit(self, node: Node, *args, **kwargs) -> Iterator:
        """Visit a node."""
        method = "visit_" + node.__class__.__name__
        visitor = getattr(self, method, self.visit_children)
        yield from visitor(node, *args, **kwargs)

    def visit_children(self, node: Node, *args, **kwargs) -> Iterator:
        """Called if no explicit visitor function exists for a node."""
        for child in node.children:
            yield from self.visit(child, *args, **kwargs)
