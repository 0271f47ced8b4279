"""
Visitors applied to the intermediate tree.

Nodes call ``visitor.visit(self)`` and composite nodes then forward
``accept`` to their children, so every visitor sees nodes in pre-order.
"""

import re

from .nodes import Newline, Node, Paragraph


class Visitor:
    """Dispatches ``visit`` to ``visit_<NodeName>`` or ``generic_visit``."""

    def visit(self, node):
        method = getattr(self, 'visit_' + node.node_name(), self.generic_visit)
        return method(node)

    def generic_visit(self, node):
        pass


class GrepVisitor(Visitor):
    """Collects nodes of a Node subclass, or whose repr matches a regex.

    The regex is anchored at the start of the repr (``re.match``).
    """

    def __init__(self, pattern):
        if isinstance(pattern, type) and issubclass(pattern, Node):
            self._matches = lambda node: isinstance(node, pattern)
        else:
            regex = re.compile(pattern)
            self._matches = lambda node: regex.match(repr(node)) is not None
        self.result = []

    def visit(self, node):
        if self._matches(node):
            self.result.append(node)


class LastNewlineRemoverVisitor(Visitor):
    """Drops trailing line breaks from each paragraph's runs."""

    def visit_Paragraph(self, node):
        runs = node.runs.nodes
        while runs and isinstance(runs[-1], Newline):
            runs.pop()

    visit_ListParagraph = visit_Paragraph

    def generic_visit(self, node):
        # Paragraph subclasses defined elsewhere still get cleaned
        if isinstance(node, Paragraph):
            self.visit_Paragraph(node)
