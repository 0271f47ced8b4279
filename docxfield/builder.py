"""
Work-queue driving block-level tree construction.

The builder keeps a stack of layers, each a queue of source nodes still to
be processed. Block elements found while extracting inline runs are pushed
onto the topmost layer, so the driver loop picks them up after the current
paragraph has been emitted.
"""

from collections import deque

from .nodes import Root


class Layer:
    __slots__ = ('items', 'ilvl')

    def __init__(self, items=(), ilvl=False):
        self.items = deque(items)
        self.ilvl = ilvl

    def __repr__(self):
        return f"<Layer ilvl={self.ilvl} pending={len(self.items)}>"


class AstBuilder:
    def __init__(self, nodes):
        self._layers = [Layer(nodes, False)]
        self._root = Root([])

    def to_ast(self):
        return self._root

    def new_layer(self, ilvl=False):
        self._layers.append(Layer((), ilvl))

    def next(self):
        """Pop the next pending node, or None when all layers are drained."""
        layer = self._current_layer()
        if layer is None:
            return None
        return layer.items.popleft()

    def push(self, node):
        self._layers[-1].items.append(node)

    def push_all(self, nodes):
        for node in nodes:
            self.push(node)

    def done(self):
        return self._current_layer() is None

    def nested(self):
        return self.ilvl() > 0

    def ilvl(self):
        return sum(1 for layer in self._layers if layer.ilvl) - 1

    def emit(self, node):
        self._root.nodes.append(node)

    def _current_layer(self):
        # Exhausted layers are discarded before looking for work
        while self._layers:
            layer = self._layers[-1]
            if layer.items:
                return layer
            self._layers.pop()
        return None
