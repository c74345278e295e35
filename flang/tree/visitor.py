from flang.tree.tree import Node


class NodeVisitor:
    """
    For visiting nodes in our AST
    """

    def visit(self, node: Node, *args, **kwargs):
        """Visit a node."""
        method = "visit_" + node.__class__.__name__
        visitor = getattr(self, method, self.visit_children)
        return visitor(node, *args, **kwargs)

    def visit_children(self, node: Node, *args, **kwargs):
        """Called if no explicit visitor function exists for a node."""
        for _, value in node.iter_fields():
            if isinstance(value, tuple):
                for item in value:
                    if isinstance(item, Node):
                        self.visit(item, *args, **kwargs)
            elif isinstance(value, Node):
                self.visit(value, *args, **kwargs)


class YieldVisitor(NodeVisitor):
    """
    For yielding values from nodes in our AST
    """

    def visit(self, node: Node, *args, **kwargs):
        """Visit a node."""
        method = "visit_" + node.__class__.__name__
        visitor = getattr(self, method, self.visit_children)
        yield from visitor(node, *args, **kwargs)

    def visit_children(self, node: Node, *args, **kwargs):
        """Called if no explicit visitor function exists for a node."""
        for _, value in node.iter_fields():
            if isinstance(value, tuple):
                for item in value:
                    if isinstance(item, Node):
                        yield from self.visit(item, *args, **kwargs)

            elif isinstance(value, Node):
                yield from self.visit(value, *args, **kwargs)
